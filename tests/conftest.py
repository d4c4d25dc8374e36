"""
Shared fixtures: a recording stand-in for the aiohttp session so tests can
assert exact URLs and call counts without touching the network.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from skills.kalshi.client import KalshiClient, set_client
from skills.kalshi.config import KalshiConfig
from skills.kalshi.handlers import set_notifier

BASE_URL = "https://example.test"


class FakeResponse:
  def __init__(self, status: int, body: Any) -> None:
    self.status = status
    if isinstance(body, bytes):
      self._body = body
    elif isinstance(body, str):
      self._body = body.encode()
    else:
      self._body = json.dumps(body).encode()

  async def read(self) -> bytes:
    return self._body

  async def __aenter__(self) -> FakeResponse:
    return self

  async def __aexit__(self, *exc: Any) -> bool:
    return False


class FakeSession:
  """Answers GETs from a url -> (status, body) table and records every call."""

  def __init__(self, routes: dict[str, tuple[int, Any]] | None = None) -> None:
    self.routes = dict(routes or {})
    self.calls: list[tuple[str, str]] = []
    self.closed = False
    self.error: Exception | None = None

  def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
    self.calls.append((method, url))
    if self.error is not None:
      raise self.error
    status, body = self.routes.get(url, (200, {}))
    return FakeResponse(status, body)

  async def close(self) -> None:
    self.closed = True

  @property
  def urls(self) -> list[str]:
    return [url for _, url in self.calls]


@pytest.fixture
def session() -> FakeSession:
  return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> KalshiClient:
  return KalshiClient(KalshiConfig(base_url=BASE_URL), session=session)


@pytest.fixture(autouse=True)
def _reset_runtime():
  set_client(None)
  set_notifier(None)
  yield
  set_client(None)
  set_notifier(None)
