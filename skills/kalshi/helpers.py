"""
Result formatting and error handling helpers for the Kalshi skill.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

from dev.types.skill_types import ToolResult

from .errors import InvalidArgument, ServiceUnavailable

log = logging.getLogger("skill.kalshi.helpers")


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class ErrorCategory(str, Enum):
  SERIES = "SERIES"
  MARKETS = "MARKETS"
  EVENT = "EVENT"
  ORDERBOOK = "ORDERBOOK"
  API = "API"


TOOL_CATEGORIES: dict[str, ErrorCategory] = {
  "kalshi_getSeries": ErrorCategory.SERIES,
  "kalshi_getMarkets": ErrorCategory.MARKETS,
  "kalshi_getEvent": ErrorCategory.EVENT,
  "kalshi_getOrderbook": ErrorCategory.ORDERBOOK,
}


def log_and_format_error(
  function_name: str,
  error: Exception,
  category: str | ErrorCategory | None = None,
) -> ToolResult:
  prefix = category.value if isinstance(category, ErrorCategory) else (category or "GEN")
  hash_val = sum(ord(c) for c in function_name) % 1000
  error_code = f"{prefix}-ERR-{hash_val:03d}"

  # Caller mistakes and a missing client are actionable; show them verbatim
  if isinstance(error, (InvalidArgument, ServiceUnavailable)):
    log.warning("[KALSHI] %s rejected - %s", function_name, error)
    return ToolResult(content=str(error), is_error=True)

  log.error("[KALSHI] Error in %s - Code: %s - %s", function_name, error_code, error)
  return ToolResult(
    content=f"An error occurred (code: {error_code}). Check logs for details.",
    is_error=True,
  )


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_json_result(result: dict[str, Any]) -> ToolResult:
  """Serialize a tool's result mapping as the text content handed to the AI."""
  return ToolResult(content=json.dumps(result, ensure_ascii=False))
