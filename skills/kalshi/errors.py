"""
Error taxonomy for the Kalshi skill.

Nothing below the skill boundary catches these; they reach the caller as-is.
"""

from __future__ import annotations


class KalshiError(Exception):
  """Base class for every error raised by the Kalshi skill."""


class InvalidArgument(KalshiError):
  """A required argument is missing/empty, or an argument has the wrong type or range."""


class ServiceUnavailable(KalshiError):
  """No Kalshi client is registered with the skill runtime."""


class RemoteRequestFailure(KalshiError):
  """Transport error, non-2xx status, or a body that is not JSON."""

  def __init__(self, status: int, message: str, url: str | None = None):
    self.status = status
    self.url = url
    super().__init__(f"Kalshi API error {status}: {message}")
