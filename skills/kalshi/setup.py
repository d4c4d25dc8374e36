"""
Kalshi skill setup flow: API endpoint selection and validation.

Steps:
  1. base_url: optional override of the Kalshi trade API base URL

The endpoint is probed with a one-market listing. On success the config
is persisted via ctx.write_data("config.json", ...).
"""

from __future__ import annotations

import json
import logging
from typing import Any

from dev.types.setup_types import (
  SetupField,
  SetupFieldError,
  SetupResult,
  SetupStep,
)

from .client import KalshiClient, MarketQuery
from .config import CONFIG_FILENAME, DEFAULT_BASE_URL, KalshiConfig
from .errors import RemoteRequestFailure

log = logging.getLogger("skill.kalshi.setup")


STEP_BASE_URL = SetupStep(
  id="base_url",
  title="Kalshi API Endpoint",
  description=(
    "Kalshi market data is public and needs no API key. Leave the endpoint "
    "blank to use the production API."
  ),
  fields=[
    SetupField(
      name="base_url",
      type="text",
      label="API Base URL",
      description="Kalshi trade API v2 base URL",
      required=False,
      placeholder=DEFAULT_BASE_URL,
    ),
  ],
)


async def on_setup_start(ctx: Any) -> SetupStep:
  """Return the first (and only) setup step."""
  return STEP_BASE_URL


async def on_setup_submit(ctx: Any, step_id: str, values: dict[str, Any]) -> SetupResult:
  """Validate the endpoint and persist config."""
  if step_id != "base_url":
    return SetupResult(
      status="error",
      errors=[SetupFieldError(field="", message=f"Unknown step: {step_id}")],
    )

  raw_url = str(values.get("base_url") or "").strip()
  if raw_url and not raw_url.startswith(("http://", "https://")):
    return SetupResult(
      status="error",
      errors=[
        SetupFieldError(field="base_url", message="Base URL must start with http:// or https://")
      ],
    )

  config = KalshiConfig(base_url=raw_url or None)

  client = KalshiClient(config)
  try:
    await client.get_markets(MarketQuery(limit=1))
  except RemoteRequestFailure as exc:
    log.warning("Endpoint validation failed: %s", exc)
    return SetupResult(
      status="error",
      errors=[
        SetupFieldError(
          field="base_url",
          message=f"Could not reach Kalshi at {config.base_url}: {exc}",
        )
      ],
    )
  finally:
    await client.close()

  await ctx.write_data(CONFIG_FILENAME, json.dumps(config.model_dump(), indent=2))

  return SetupResult(
    status="complete",
    message=f"Kalshi connected ({config.base_url}).",
  )


async def on_setup_cancel(ctx: Any) -> None:
  """Nothing to clean up for Kalshi setup."""
  pass
