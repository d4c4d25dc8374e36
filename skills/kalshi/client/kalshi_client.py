"""
Async HTTP client for the Kalshi public trade API v2.

Uses aiohttp. Read-only, unauthenticated GETs; one request per call, no retries.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote, urlencode

import aiohttp
from pydantic import BaseModel, ConfigDict, Field

from ..config import KalshiConfig
from ..errors import InvalidArgument, RemoteRequestFailure, ServiceUnavailable

log = logging.getLogger("skill.kalshi.client")

# Fixed emission order for /markets query parameters
MARKET_QUERY_FIELDS = ("series_ticker", "status", "limit", "cursor")


class MarketQuery(BaseModel):
  """Optional filters for GET /markets."""

  model_config = ConfigDict(frozen=True)

  series_ticker: str | None = None
  status: str | None = None
  limit: int | None = Field(default=None, ge=1, le=200)
  cursor: str | None = None

  def to_query_string(self) -> str:
    params: list[tuple[str, str]] = []
    for key in MARKET_QUERY_FIELDS:
      value = getattr(self, key)
      if value is None or value == "":
        continue
      params.append((key, str(value)))
    return urlencode(params)


class KalshiClient:
  """Async HTTP client for the Kalshi API."""

  def __init__(
    self,
    config: KalshiConfig | None = None,
    session: aiohttp.ClientSession | None = None,
  ) -> None:
    self._config = config or KalshiConfig()
    self._session = session
    self._owns_session = session is None

  @property
  def base_url(self) -> str:
    return self._config.base_url

  @property
  def is_connected(self) -> bool:
    return self._session is not None and not self._session.closed

  async def connect(self) -> None:
    """Create the aiohttp session."""
    if self._session and not self._session.closed:
      return
    self._session = aiohttp.ClientSession(headers={"Accept": "application/json"})
    self._owns_session = True

  async def close(self) -> None:
    """Close the aiohttp session if this client created it."""
    if self._owns_session and self._session and not self._session.closed:
      await self._session.close()
    self._session = None

  async def _get(self, path: str) -> Any:
    """GET base_url + path and return the decoded JSON body."""
    if not self.is_connected:
      await self.connect()

    url = f"{self._config.base_url}{path}"
    log.debug("GET %s", url)
    try:
      async with self._session.request("GET", url) as resp:
        body = await resp.read()
        if not 200 <= resp.status < 300:
          text = body.decode("utf-8", errors="replace")
          raise RemoteRequestFailure(resp.status, text[:500] or "request failed", url=url)
        if not body.strip():
          raise RemoteRequestFailure(resp.status, "empty response body", url=url)
        try:
          return json.loads(body)
        except ValueError as e:
          raise RemoteRequestFailure(resp.status, f"response is not valid JSON: {e}", url=url) from e
    except (TimeoutError, aiohttp.ClientError) as e:
      raise RemoteRequestFailure(0, f"request failed: {e}", url=url) from e

  # ------------------------------------------------------------------
  # API methods
  # ------------------------------------------------------------------

  async def get_series(self, ticker: str) -> Any:
    """Get a market series by ticker."""
    if not ticker:
      raise InvalidArgument("ticker is required")
    return await self._get(f"/series/{quote(ticker, safe='')}")

  async def get_markets(self, query: MarketQuery | None = None) -> Any:
    """List markets, optionally filtered by series, status and page."""
    qs = (query or MarketQuery()).to_query_string()
    return await self._get(f"/markets?{qs}" if qs else "/markets")

  async def get_event(self, ticker: str) -> Any:
    """Get an event by ticker."""
    if not ticker:
      raise InvalidArgument("ticker is required")
    return await self._get(f"/events/{quote(ticker, safe='')}")

  async def get_orderbook(self, ticker: str) -> Any:
    """Get the orderbook for a market by ticker."""
    if not ticker:
      raise InvalidArgument("ticker is required")
    return await self._get(f"/markets/{quote(ticker, safe='')}/orderbook")


# ---------------------------------------------------------------------------
# Active client
# ---------------------------------------------------------------------------

_client: KalshiClient | None = None


def set_client(client: KalshiClient | None) -> None:
  global _client
  _client = client


def current_client() -> KalshiClient | None:
  return _client


def get_client() -> KalshiClient:
  if _client is None:
    raise ServiceUnavailable("Kalshi client not initialized. Is the skill enabled and loaded?")
  return _client
