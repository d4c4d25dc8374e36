"""
Kalshi SkillDefinition. Wires setup, tools, and lifecycle hooks
into the unified skill protocol.

Usage:
    from skills.kalshi.skill import skill
"""

from __future__ import annotations

import logging
from typing import Any

from dev.types.skill_types import (
  SkillDefinition,
  SkillHooks,
  SkillOptionDefinition,
  SkillTool,
  ToolDefinition,
)
from dev.types.skill_types import (
  ToolResult as SkillToolResult,
)

from .config import CONFIG_FILENAME, parse_config
from .errors import KalshiError
from .handlers import dispatch_tool, set_notifier
from .helpers import TOOL_CATEGORIES, format_json_result, log_and_format_error
from .setup import on_setup_cancel, on_setup_start, on_setup_submit
from .tools import TOOL_DEFINITIONS, TOOL_NAMES

log = logging.getLogger("skill.kalshi.skill")


def _make_execute(tool_name: str):
  """Create an async execute function for a given tool name."""

  async def execute(args: dict[str, Any]) -> SkillToolResult:
    try:
      result = await dispatch_tool(tool_name, args)
    except KalshiError as e:
      return log_and_format_error(tool_name, e, TOOL_CATEGORIES.get(tool_name))
    return format_json_result(result)

  return execute


def _build_tools() -> list[SkillTool]:
  """Build SkillTool list from tool definitions."""
  skill_tools: list[SkillTool] = []
  for name, display_name, description, schema in TOOL_DEFINITIONS:
    definition = ToolDefinition(
      name=name,
      display_name=display_name,
      description=description,
      parameters=schema,
    )
    skill_tools.append(
      SkillTool(
        definition=definition,
        execute=_make_execute(name),
      )
    )
  return skill_tools


TOOLS = _build_tools()


# ---------------------------------------------------------------------------
# Lifecycle hooks
# ---------------------------------------------------------------------------


async def _on_load(ctx: Any) -> None:
  """Create the Kalshi client and register tools, unless disabled in config."""
  from .client import KalshiClient, current_client, set_client

  raw: str | None = None
  try:
    raw = await ctx.read_data(CONFIG_FILENAME)
  except FileNotFoundError:
    log.debug("No %s, using defaults", CONFIG_FILENAME)
  config = parse_config(raw)

  previous = current_client()
  if previous is not None:
    await previous.close()
    set_client(None)

  if not config.enabled:
    log.warning("Kalshi disabled in config, tools not registered")
    ctx.set_state({"connection_status": "disabled"})
    return

  set_client(KalshiClient(config))
  set_notifier(ctx.log)
  for tool in TOOLS:
    ctx.tools.register(tool)

  ctx.set_state({"connection_status": "ready", "base_url": config.base_url})
  log.info("Kalshi skill loaded (%s)", config.base_url)


async def _on_unload(ctx: Any) -> None:
  """Close the client and drop the tools."""
  from .client import current_client, set_client

  client = current_client()
  if client is not None:
    await client.close()
  set_client(None)
  set_notifier(None)

  for name in TOOL_NAMES:
    ctx.tools.unregister(name)

  ctx.set_state({"connection_status": "unloaded"})
  log.info("Kalshi skill unloaded")


async def _on_status(ctx: Any) -> dict[str, Any]:
  """Return current skill status information."""
  from .client import current_client

  client = current_client()
  return {
    "connection_status": "ready" if client is not None else "disconnected",
    "base_url": client.base_url if client is not None else None,
    "tools": TOOL_NAMES if client is not None else [],
  }


# ---------------------------------------------------------------------------
# Tool-category toggle options
# ---------------------------------------------------------------------------

TOOL_CATEGORY_OPTIONS = [
  SkillOptionDefinition(
    name="enable_market_tools",
    type="boolean",
    label="Market Data",
    description="4 tools: series, markets, events, and orderbooks",
    default=True,
    group="tool_categories",
    tool_filter=list(TOOL_NAMES),
  ),
]


# ---------------------------------------------------------------------------
# Skill definition
# ---------------------------------------------------------------------------

skill = SkillDefinition(
  name="kalshi",
  description="Kalshi prediction markets, read-only series, markets, events, and orderbooks.",
  version="1.0.0",
  has_setup=True,
  tools=TOOLS,
  options=TOOL_CATEGORY_OPTIONS,
  hooks=SkillHooks(
    on_load=_on_load,
    on_unload=_on_unload,
    on_status=_on_status,
    on_setup_start=on_setup_start,
    on_setup_submit=on_setup_submit,
    on_setup_cancel=on_setup_cancel,
  ),
)
