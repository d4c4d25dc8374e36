"""
Kalshi skill configuration, persisted as config.json in the skill data dir.
"""

from __future__ import annotations

import json
import logging

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

log = logging.getLogger("skill.kalshi.config")

DEFAULT_BASE_URL = "https://api.elections.kalshi.com/trade-api/v2"
CONFIG_FILENAME = "config.json"


class KalshiConfig(BaseModel):
  model_config = ConfigDict(frozen=True)

  base_url: str = DEFAULT_BASE_URL
  enabled: bool = True

  @field_validator("base_url", mode="before")
  @classmethod
  def _default_and_strip(cls, v: object) -> object:
    # An empty or null base_url means "use the production endpoint"
    if v is None or (isinstance(v, str) and not v.strip()):
      return DEFAULT_BASE_URL
    if isinstance(v, str):
      return v.strip().rstrip("/")
    return v


def parse_config(raw: str | None) -> KalshiConfig:
  """Parse config.json contents; anything unreadable falls back to defaults."""
  if not raw:
    return KalshiConfig()
  try:
    data = json.loads(raw)
  except json.JSONDecodeError:
    log.warning("config.json is not valid JSON, using defaults")
    return KalshiConfig()
  if not isinstance(data, dict):
    log.warning("config.json must hold an object, using defaults")
    return KalshiConfig()
  # Nested form: {"kalshi": {...}}
  if isinstance(data.get("kalshi"), dict):
    data = data["kalshi"]
  try:
    return KalshiConfig.model_validate(data)
  except ValidationError as exc:
    log.warning("Invalid Kalshi config, using defaults: %s", exc)
    return KalshiConfig()
