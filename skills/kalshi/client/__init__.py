"""
Kalshi HTTP client and the skill's active-client slot.
"""

from .kalshi_client import (
  KalshiClient,
  MarketQuery,
  current_client,
  get_client,
  set_client,
)

__all__ = [
  "KalshiClient",
  "MarketQuery",
  "current_client",
  "get_client",
  "set_client",
]
