"""
Market-data tool handlers.

Each handler gets the client explicitly, validates its arguments before any
network call, posts one progress notice and wraps the raw payload under a
single key. Errors are not caught here.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..client import KalshiClient, MarketQuery
from ..tools import MAX_MARKETS_LIMIT
from ..validation import opt_int, opt_string, req_string

Notify = Callable[[str], None]


async def get_series(client: KalshiClient, args: dict[str, Any], notify: Notify) -> dict[str, Any]:
  tool = "kalshi_getSeries"
  ticker = req_string(args, "ticker", tool)

  notify(f"[{tool}] Fetching series: {ticker}")
  series = await client.get_series(ticker)
  return {"series": series}


async def get_markets(client: KalshiClient, args: dict[str, Any], notify: Notify) -> dict[str, Any]:
  tool = "kalshi_getMarkets"
  query = MarketQuery(
    series_ticker=opt_string(args, "series_ticker", tool),
    status=opt_string(args, "status", tool),
    limit=opt_int(args, "limit", tool, 1, MAX_MARKETS_LIMIT),
    cursor=opt_string(args, "cursor", tool),
  )

  notify(f"[{tool}] Fetching markets")
  markets = await client.get_markets(query)
  return {"markets": markets}


async def get_event(client: KalshiClient, args: dict[str, Any], notify: Notify) -> dict[str, Any]:
  tool = "kalshi_getEvent"
  ticker = req_string(args, "ticker", tool)

  notify(f"[{tool}] Fetching event: {ticker}")
  event = await client.get_event(ticker)
  return {"event": event}


async def get_orderbook(client: KalshiClient, args: dict[str, Any], notify: Notify) -> dict[str, Any]:
  tool = "kalshi_getOrderbook"
  ticker = req_string(args, "ticker", tool)

  notify(f"[{tool}] Fetching orderbook: {ticker}")
  orderbook = await client.get_orderbook(ticker)
  return {"orderbook": orderbook}
