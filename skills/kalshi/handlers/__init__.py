"""
Tool handler dispatcher.
"""

from __future__ import annotations

import logging
from typing import Any

from ..client import KalshiClient, get_client
from ..errors import InvalidArgument
from .market import Notify, get_event, get_markets, get_orderbook, get_series

log = logging.getLogger("skill.kalshi.handlers")

HANDLERS: dict[str, Any] = {
  "kalshi_getSeries": get_series,
  "kalshi_getMarkets": get_markets,
  "kalshi_getEvent": get_event,
  "kalshi_getOrderbook": get_orderbook,
}

_notify: Notify | None = None


def set_notifier(fn: Notify | None) -> None:
  """Route progress notices to the host (e.g. ctx.log); None restores the logger."""
  global _notify
  _notify = fn


def _notice(message: str) -> None:
  if _notify is not None:
    _notify(message)
  else:
    log.info(message)


async def dispatch_tool(
  tool_name: str,
  args: dict[str, Any] | None,
  client: KalshiClient | None = None,
) -> dict[str, Any]:
  """Run one tool against the given client, or the active one."""
  handler = HANDLERS.get(tool_name)
  if not handler:
    raise InvalidArgument(f"Unknown tool: {tool_name}")
  if client is None:
    client = get_client()
  return await handler(client, args or {}, _notice)
