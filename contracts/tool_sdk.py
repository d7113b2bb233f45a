"""Tool SDK contracts.

Two kinds of tool are exposed to the agent host.  Composite tools group
many registrar commands under one name and are described purely by data
(``CompositeTool`` / ``ActionDefinition``); the dispatcher executes them.
Standalone tools implement ``BaseTool`` and run their own logic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Union

from pydantic import BaseModel


# ── Flat parameter space ─────────────────────────────────────────────

FlatValue = Union[str, int, float, bool, None]
FlatParams = dict[str, FlatValue]

# (action_name, validated_input) -> flat query parameters
Transform = Callable[[str, dict[str, Any]], FlatParams]


# ── Composite tool declarations ──────────────────────────────────────


@dataclass(frozen=True)
class ActionDefinition:
    """One registrar command reachable through a composite tool.

    ``params`` is a JSON Schema object describing the action's input; it
    drives both validation and discovery.  Without a ``transform`` the
    validated input is sent as-is, minus the ``action`` discriminator.
    """

    command: str
    description: str
    params: Mapping[str, Any] | None = None
    transform: Transform | None = None


@dataclass(frozen=True)
class CompositeTool:
    """A named, closed group of actions."""

    name: str
    description: str
    actions: Mapping[str, ActionDefinition] = field(default_factory=dict)

    def action_names(self) -> list[str]:
        return list(self.actions)


# ── Data models ──────────────────────────────────────────────────────


class ToolDefinition(BaseModel):
    """Discovery schema for a tool, as advertised to the agent host."""

    name: str
    description: str
    input_schema: dict[str, Any]   # JSON Schema
    actions: list[str] = []        # empty for standalone tools


class ActionSummary(BaseModel):
    name: str
    description: str
    command: str


class ToolOutput(BaseModel):
    call_id: str
    tool_name: str
    result: Any = None
    error: dict[str, Any] | None = None
    success: bool = True


# ── Context passed to every tool invocation ──────────────────────────


@dataclass
class ToolContext:
    """Runtime context supplied to a tool's run() method."""

    request_id: str
    transport: Any = None            # contracts.transport.Transport
    transport_factory: Callable[[], Any] | None = None

    def require_transport(self) -> Any:
        """Return the transport, building it on first use."""
        if self.transport is None and self.transport_factory is not None:
            self.transport = self.transport_factory()
        if self.transport is None:
            raise RuntimeError("No transport available for this tool call")
        return self.transport


# ── Abstract base class ─────────────────────────────────────────────


class BaseTool(ABC):
    """Abstract base class for standalone (non-composite) tools."""

    @abstractmethod
    def definition(self) -> ToolDefinition:
        """Return the tool's function-calling schema."""
        ...

    @abstractmethod
    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolOutput:
        """Execute the tool."""
        ...
