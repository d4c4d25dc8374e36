"""
Kalshi tool definitions (4 tools).

Each entry is (name, display_name, description, JSON Schema).
"""

from __future__ import annotations

MAX_MARKETS_LIMIT = 200

_TICKER_SCHEMA = {
  "type": "string",
  "minLength": 1,
}

TOOL_DEFINITIONS: list[tuple[str, str, str, dict]] = [
  (
    "kalshi_getSeries",
    "Kalshi/getSeries",
    "Get information about a Kalshi market series by ticker.",
    {
      "type": "object",
      "properties": {
        "ticker": {**_TICKER_SCHEMA, "description": "Series ticker (e.g., KXHIGHNY)"},
      },
      "required": ["ticker"],
    },
  ),
  (
    "kalshi_getMarkets",
    "Kalshi/getMarkets",
    "Get Kalshi markets with optional filtering by series, status, and pagination.",
    {
      "type": "object",
      "properties": {
        "series_ticker": {
          "type": "string",
          "description": "Filter by series ticker",
        },
        "status": {
          "type": "string",
          "description": "Filter by status (e.g., 'open', 'closed')",
        },
        "limit": {
          "type": "integer",
          "minimum": 1,
          "maximum": MAX_MARKETS_LIMIT,
          "description": "Number of results (default: 100)",
        },
        "cursor": {
          "type": "string",
          "description": "Pagination cursor",
        },
      },
    },
  ),
  (
    "kalshi_getEvent",
    "Kalshi/getEvent",
    "Get a specific Kalshi event by ticker.",
    {
      "type": "object",
      "properties": {
        "ticker": {**_TICKER_SCHEMA, "description": "Event ticker"},
      },
      "required": ["ticker"],
    },
  ),
  (
    "kalshi_getOrderbook",
    "Kalshi/getOrderbook",
    "Get the orderbook (bids) for a specific Kalshi market.",
    {
      "type": "object",
      "properties": {
        "ticker": {**_TICKER_SCHEMA, "description": "Market ticker"},
      },
      "required": ["ticker"],
    },
  ),
]

TOOL_NAMES: list[str] = [name for name, _, _, _ in TOOL_DEFINITIONS]
