"""
Mock SkillContext for testing skills outside the host runtime.

Usage:
    from dev.harness.mock_context import create_mock_context

    ctx, inspect = create_mock_context()
    await skill.hooks.on_load(ctx)
    print(inspect.get_logs())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dev.types.skill_types import SkillTool


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@dataclass
class MockContextOptions:
  """Options for creating a mock context."""

  initial_data: dict[str, str] = field(default_factory=dict)
  initial_state: dict[str, Any] = field(default_factory=dict)
  data_dir: str = "/mock/data"


# ---------------------------------------------------------------------------
# Inspector: lets tests peek into mock state
# ---------------------------------------------------------------------------


class MockInspector:
  """Inspect the internal state of a mock context."""

  def __init__(
    self,
    logs: list[str],
    data_store: dict[str, str],
    state: list[dict[str, Any]],
    registered_tools: dict[str, SkillTool],
  ) -> None:
    self._logs = logs
    self._data_store = data_store
    self._state = state
    self._registered_tools = registered_tools

  def get_logs(self) -> list[str]:
    return list(self._logs)

  def get_data(self) -> dict[str, str]:
    return dict(self._data_store)

  def get_state(self) -> dict[str, Any]:
    return dict(self._state[0])

  def get_registered_tools(self) -> list[str]:
    return list(self._registered_tools.keys())

  def get_tool(self, name: str) -> SkillTool | None:
    return self._registered_tools.get(name)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def create_mock_context(
  options: MockContextOptions | None = None,
) -> tuple[Any, MockInspector]:
  """Create a mock SkillContext and an inspector for test assertions."""

  opts = options or MockContextOptions()

  data_store: dict[str, str] = dict(opts.initial_data)
  logs: list[str] = []
  registered_tools: dict[str, SkillTool] = {}
  # Wrap in list so nested class can mutate via reference
  state: list[dict[str, Any]] = [dict(opts.initial_state)]

  # --- Tool Registry ---
  class _Tools:
    def register(self, tool: SkillTool) -> None:
      registered_tools[tool.definition.name] = tool

    def unregister(self, name: str) -> None:
      registered_tools.pop(name, None)

    def list(self) -> list[str]:
      return list(registered_tools.keys())

  # --- Context ---
  class _Context:
    tools = _Tools()
    data_dir = opts.data_dir

    async def read_data(self, filename: str) -> str:
      content = data_store.get(filename)
      if content is None:
        raise FileNotFoundError(f"No such file: '{filename}'")
      return content

    async def write_data(self, filename: str, content: str) -> None:
      data_store[filename] = content

    def log(self, message: str) -> None:
      logs.append(message)

    def get_state(self) -> Any:
      return state[0]

    def set_state(self, partial: dict[str, Any]) -> None:
      state[0] = {**state[0], **partial}

  ctx = _Context()

  inspector = MockInspector(
    logs=logs,
    data_store=data_store,
    state=state,
    registered_tools=registered_tools,
  )

  return ctx, inspector
