"""
Skill Types (Pydantic v2)

Type definitions shared between skills and the host runtime. Skills import
these types to declare their tools, lifecycle hooks and options.

Usage:
    from dev.types.skill_types import SkillDefinition, SkillContext, SkillTool
"""

from __future__ import annotations

from typing import Any, Literal, Protocol, runtime_checkable, Callable, Awaitable, Optional

from pydantic import BaseModel, ConfigDict, Field

from dev.types.setup_types import (  # noqa: F401  re-exported
    SetupField,
    SetupStep,
    SetupFieldError,
    SetupResult,
)


# ---------------------------------------------------------------------------
# Tool Definition & Result
# ---------------------------------------------------------------------------


class ToolDefinition(BaseModel):
    """Schema for an AI-callable tool."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Tool name (unique per skill)")
    description: str = Field(description="Human-readable description")
    display_name: str | None = Field(default=None, description='Label shown by the host, e.g. "Kalshi/getSeries"')
    parameters: dict[str, Any] = Field(
        description="JSON Schema for tool parameters",
        default_factory=lambda: {"type": "object", "properties": {}},
    )


class ToolResult(BaseModel):
    """Result returned by a tool's execute function."""

    content: str
    is_error: bool = False


class SkillTool(BaseModel):
    """A tool the skill exposes to the AI."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    definition: ToolDefinition
    execute: Callable[..., Awaitable[ToolResult]] = Field(
        description="Async function that executes the tool"
    )


# ---------------------------------------------------------------------------
# Context Protocols (what the host hands to every hook)
# ---------------------------------------------------------------------------


@runtime_checkable
class ToolRegistry(Protocol):
    """Register/unregister AI tools at runtime."""

    def register(self, tool: SkillTool) -> None: ...
    def unregister(self, name: str) -> None: ...
    def list(self) -> list[str]: ...


@runtime_checkable
class SkillContext(Protocol):
    """Context object passed to skill lifecycle hooks."""

    tools: ToolRegistry
    data_dir: str

    async def read_data(self, filename: str) -> str: ...
    async def write_data(self, filename: str, content: str) -> None: ...
    def log(self, message: str) -> None: ...
    def get_state(self) -> Any: ...
    def set_state(self, partial: dict[str, Any]) -> None: ...


# ---------------------------------------------------------------------------
# Hook type aliases
# ---------------------------------------------------------------------------

LoadHook = Callable[[SkillContext], Awaitable[None]]
UnloadHook = Callable[[SkillContext], Awaitable[None]]
StatusHook = Callable[[SkillContext], Awaitable[dict[str, Any]]]

SetupStartHandler = Callable[[SkillContext], Awaitable[SetupStep]]
SetupSubmitHandler = Callable[[SkillContext, str, dict[str, Any]], Awaitable[SetupResult]]
SetupCancelHandler = Callable[[SkillContext], Awaitable[None]]


class SkillHooks(BaseModel):
    """Lifecycle hooks for a skill."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    on_load: Optional[LoadHook] = None
    on_unload: Optional[UnloadHook] = None
    on_status: StatusHook = Field(description="Returns current skill status information")
    on_setup_start: Optional[SetupStartHandler] = None
    on_setup_submit: Optional[SetupSubmitHandler] = None
    on_setup_cancel: Optional[SetupCancelHandler] = None


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class SkillOptionDefinition(BaseModel):
    """A user-toggleable option. Boolean options may gate a set of tools."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: Literal["boolean", "select"]
    label: str
    description: str | None = None
    default: bool | str | None = None
    group: str | None = None
    tool_filter: list[str] | None = Field(
        default=None,
        description="Tools hidden from the AI while this boolean option is off",
    )


# ---------------------------------------------------------------------------
# Skill Definition (the main export from skill.py)
# ---------------------------------------------------------------------------


class SkillDefinition(BaseModel):
    """Top-level skill definition: the `skill` object exported by skill.py."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(description="Skill name (lowercase-hyphens, matches directory)")
    description: str = Field(description="Brief description")
    version: str = Field(default="1.0.0", description="Semver version string")
    hooks: SkillHooks | None = None
    tools: list[SkillTool] = Field(default_factory=list)
    options: list[SkillOptionDefinition] = Field(default_factory=list)
    has_setup: bool = Field(
        default=False,
        description="Whether this skill has an interactive setup flow",
    )

    def enabled_tools(self, option_values: dict[str, Any] | None = None) -> list[SkillTool]:
        """Tools left visible after applying boolean option tool filters."""
        values = {o.name: o.default for o in self.options}
        values.update(option_values or {})
        excluded: set[str] = set()
        for od in self.options:
            if od.type == "boolean" and od.tool_filter and not values.get(od.name):
                excluded.update(od.tool_filter)
        return [t for t in self.tools if t.definition.name not in excluded]
