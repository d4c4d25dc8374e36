"""
MCP server for the Kalshi skill.

Uses the official `mcp` Python SDK. Handles tools/list and tools/call over the
same handlers the skill protocol uses.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from mcp.server import Server
from mcp.types import TextContent, Tool

from .client import KalshiClient
from .config import KalshiConfig
from .errors import KalshiError
from .handlers import dispatch_tool
from .tools import TOOL_DEFINITIONS

log = logging.getLogger("skill.kalshi.server")

ALL_TOOLS: list[Tool] = [
  Tool(name=name, description=description, inputSchema=schema)
  for name, _, description, schema in TOOL_DEFINITIONS
]


def config_from_env() -> KalshiConfig:
  """Build the config for MCP mode; KALSHI_BASE_URL overrides the endpoint."""
  return KalshiConfig(base_url=os.environ.get("KALSHI_BASE_URL"))


async def call_tool_content(
  client: KalshiClient, name: str, arguments: dict[str, Any] | None
) -> list[TextContent]:
  """Run one tool and render its result as MCP text content.

  Failures are re-raised so the SDK reports them as isError results.
  """
  try:
    result = await dispatch_tool(name, arguments or {}, client=client)
  except KalshiError as e:
    log.warning("Tool %s failed: %s", name, e)
    raise
  return [TextContent(type="text", text=json.dumps(result, ensure_ascii=False))]


def create_mcp_server(config: KalshiConfig | None = None) -> tuple[Server, KalshiClient]:
  """Create the MCP server and the client it serves from."""
  server = Server("kalshi-skill")
  client = KalshiClient(config or config_from_env())

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return ALL_TOOLS

  @server.call_tool()
  async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    return await call_tool_content(client, name, arguments)

  return server, client
