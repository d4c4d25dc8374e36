"""
Skill wiring tests: lifecycle hooks against the mock context, tool execute
results at the host boundary, options, and the setup flow.
"""

from __future__ import annotations

import json

import pytest

import skills.kalshi.setup as kalshi_setup
from dev.harness.mock_context import MockContextOptions, create_mock_context
from skills.kalshi.client import KalshiClient, current_client, set_client
from skills.kalshi.config import DEFAULT_BASE_URL, KalshiConfig
from skills.kalshi.skill import skill
from skills.kalshi.tools import TOOL_NAMES

from .conftest import BASE_URL, FakeSession


def _ctx(config: dict | None = None):
  initial = {"config.json": json.dumps(config)} if config is not None else {}
  return create_mock_context(MockContextOptions(initial_data=initial))


def test_skill_definition():
  assert skill.name == "kalshi"
  assert skill.has_setup is True
  assert [t.definition.name for t in skill.tools] == TOOL_NAMES
  assert skill.tools[0].definition.display_name == "Kalshi/getSeries"


def test_option_toggle_filters_tools():
  assert len(skill.enabled_tools()) == 4
  assert skill.enabled_tools({"enable_market_tools": False}) == []


async def test_load_registers_tools_with_default_config():
  ctx, inspect = _ctx()

  await skill.hooks.on_load(ctx)

  assert inspect.get_registered_tools() == TOOL_NAMES
  assert current_client().base_url == DEFAULT_BASE_URL
  assert inspect.get_state()["connection_status"] == "ready"


async def test_load_uses_configured_base_url():
  ctx, _ = _ctx({"kalshi": {"base_url": BASE_URL}})

  await skill.hooks.on_load(ctx)

  assert current_client().base_url == BASE_URL
  status = await skill.hooks.on_status(ctx)
  assert status == {"connection_status": "ready", "base_url": BASE_URL, "tools": TOOL_NAMES}


async def test_disabled_config_registers_nothing():
  ctx, inspect = _ctx({"enabled": False})

  await skill.hooks.on_load(ctx)

  assert inspect.get_registered_tools() == []
  assert current_client() is None
  assert inspect.get_state()["connection_status"] == "disabled"

  result = await skill.tools[0].execute({"ticker": "KXHIGHNY"})
  assert result.is_error
  assert "not initialized" in result.content


async def test_registered_tool_returns_json_and_logs_notice():
  ctx, inspect = _ctx()
  await skill.hooks.on_load(ctx)

  session = FakeSession({f"{BASE_URL}/series/KXHIGHNY": (200, {"series": {"ticker": "KXHIGHNY"}})})
  set_client(KalshiClient(KalshiConfig(base_url=BASE_URL), session=session))

  result = await inspect.get_tool("kalshi_getSeries").execute({"ticker": "KXHIGHNY"})

  assert not result.is_error
  assert json.loads(result.content) == {"series": {"series": {"ticker": "KXHIGHNY"}}}
  assert inspect.get_logs() == ["[kalshi_getSeries] Fetching series: KXHIGHNY"]


async def test_tool_errors_become_error_results():
  ctx, inspect = _ctx()
  await skill.hooks.on_load(ctx)
  session = FakeSession({f"{BASE_URL}/markets/M/orderbook": (404, "not found")})
  set_client(KalshiClient(KalshiConfig(base_url=BASE_URL), session=session))
  tool = inspect.get_tool("kalshi_getOrderbook")

  invalid = await tool.execute({"ticker": ""})
  remote = await tool.execute({"ticker": "M"})

  assert invalid.is_error
  assert invalid.content == "[kalshi_getOrderbook] ticker is required"
  assert remote.is_error
  assert remote.content.startswith("An error occurred (code: ORDERBOOK-ERR-")
  assert len(session.calls) == 1


async def test_unload_drops_client_and_tools():
  ctx, inspect = _ctx()
  await skill.hooks.on_load(ctx)

  await skill.hooks.on_unload(ctx)

  assert inspect.get_registered_tools() == []
  assert current_client() is None
  status = await skill.hooks.on_status(ctx)
  assert status["connection_status"] == "disconnected"


# ---------------------------------------------------------------------------
# Setup flow
# ---------------------------------------------------------------------------


@pytest.fixture
def probe_session(monkeypatch) -> FakeSession:
  session = FakeSession()
  monkeypatch.setattr(
    kalshi_setup, "KalshiClient", lambda config: KalshiClient(config, session=session)
  )
  return session


async def test_setup_start_asks_for_base_url():
  ctx, _ = _ctx()
  step = await skill.hooks.on_setup_start(ctx)
  assert step.id == "base_url"
  assert step.fields[0].required is False


async def test_setup_rejects_non_http_url(probe_session):
  ctx, inspect = _ctx()

  result = await skill.hooks.on_setup_submit(ctx, "base_url", {"base_url": "ftp://x"})

  assert result.status == "error"
  assert result.errors[0].field == "base_url"
  assert probe_session.calls == []
  assert inspect.get_data() == {}


async def test_setup_probes_and_persists(probe_session):
  ctx, inspect = _ctx()

  result = await skill.hooks.on_setup_submit(ctx, "base_url", {"base_url": f"{BASE_URL}/"})

  assert result.status == "complete"
  assert probe_session.urls == [f"{BASE_URL}/markets?limit=1"]
  saved = json.loads(inspect.get_data()["config.json"])
  assert saved == {"base_url": BASE_URL, "enabled": True}


async def test_setup_blank_url_uses_default(probe_session):
  ctx, inspect = _ctx()

  result = await skill.hooks.on_setup_submit(ctx, "base_url", {"base_url": ""})

  assert result.status == "complete"
  assert probe_session.urls == [f"{DEFAULT_BASE_URL}/markets?limit=1"]


async def test_setup_reports_unreachable_endpoint(probe_session):
  probe_session.routes[f"{BASE_URL}/markets?limit=1"] = (503, "down")
  ctx, inspect = _ctx()

  result = await skill.hooks.on_setup_submit(ctx, "base_url", {"base_url": BASE_URL})

  assert result.status == "error"
  assert "503" in result.errors[0].message
  assert inspect.get_data() == {}


async def test_setup_unknown_step():
  ctx, _ = _ctx()
  result = await skill.hooks.on_setup_submit(ctx, "api_key", {})
  assert result.status == "error"


async def test_reload_closes_previous_client():
  ctx, inspect = _ctx()
  old = KalshiClient(KalshiConfig(base_url=BASE_URL), session=FakeSession())
  set_client(old)
  assert old.is_connected

  await skill.hooks.on_load(ctx)

  assert not old.is_connected
  assert current_client() is not old
  assert inspect.get_registered_tools() == TOOL_NAMES


async def test_reload_disabled_drops_previous_client():
  ctx, _ = _ctx({"enabled": False})
  old = KalshiClient(KalshiConfig(base_url=BASE_URL), session=FakeSession())
  set_client(old)

  await skill.hooks.on_load(ctx)

  assert not old.is_connected
  assert current_client() is None
