"""
Input validation helpers for Kalshi tool arguments.

Every failure raises InvalidArgument prefixed with the calling tool's name.
"""

from __future__ import annotations

from typing import Any

from .errors import InvalidArgument


def req_string(args: dict[str, Any], key: str, tool: str) -> str:
  """Read a required, non-empty string from args."""
  v = args.get(key)
  if not isinstance(v, str) or not v:
    raise InvalidArgument(f"[{tool}] {key} is required")
  return v


def opt_string(args: dict[str, Any], key: str, tool: str) -> str | None:
  """Read an optional string from args. Empty strings count as absent."""
  v = args.get(key)
  if v is None or v == "":
    return None
  if not isinstance(v, str):
    raise InvalidArgument(f"[{tool}] {key} must be a string")
  return v


def opt_int(args: dict[str, Any], key: str, tool: str, minimum: int, maximum: int) -> int | None:
  """Read an optional integer within [minimum, maximum] from args."""
  v = args.get(key)
  if v is None:
    return None
  # JSON numbers may arrive as floats; 50.0 is still an integer
  if isinstance(v, float) and v.is_integer():
    v = int(v)
  if isinstance(v, bool) or not isinstance(v, int):
    raise InvalidArgument(f"[{tool}] {key} must be an integer")
  if v < minimum or v > maximum:
    raise InvalidArgument(f"[{tool}] {key} must be between {minimum} and {maximum}, got {v}")
  return v
