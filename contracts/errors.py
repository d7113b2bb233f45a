"""Structured error taxonomy for tool dispatch.

Every failure a caller can trigger is a ``ToolError`` subclass.  The
dispatch boundary converts them into ``ErrorPayload`` so the agent host
always receives machine-readable diagnostics.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel

DOCS_BASE = "https://github.com/joachimBrindeau/domain-mcp"


class ErrorKind(str, Enum):
    UNKNOWN_TOOL = "UnknownTool"
    UNKNOWN_ACTION = "UnknownAction"
    MISSING_PARAM = "MissingParam"
    VALIDATION_ERROR = "ValidationError"
    API_ERROR = "ApiError"


class ErrorDetail(BaseModel):
    kind: ErrorKind
    message: str
    suggestions: list[str] | None = None
    validActions: list[str] | None = None
    docsUrl: str


class ErrorPayload(BaseModel):
    success: bool = False
    error: ErrorDetail

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def docs_url(tool: str) -> str:
    """Anchor into the docs for *tool* (``dynadot_dns`` -> ``#dns``)."""
    anchor = tool.removeprefix("dynadot_") if tool else ""
    return f"{DOCS_BASE}#{anchor}" if anchor else DOCS_BASE


def find_similar(action: str, candidates: list[str]) -> str | None:
    """Best-effort "did you mean" match on 3-character prefixes.

    Checked in both directions and case-insensitively; the first
    candidate in declaration order wins.
    """
    needle = action.lower()
    for candidate in candidates:
        lowered = candidate.lower()
        if lowered.startswith(needle[:3]) or needle.startswith(lowered[:3]):
            return candidate
    return None


# ── Exceptions ───────────────────────────────────────────────────────


class ToolError(Exception):
    """Base class for every failure surfaced to the agent host."""

    kind: ErrorKind = ErrorKind.VALIDATION_ERROR

    def __init__(
        self,
        message: str,
        *,
        tool: str = "",
        suggestions: list[str] | None = None,
        valid_actions: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.tool = tool
        self.suggestions = suggestions or []
        self.valid_actions = valid_actions

    @property
    def docs_url(self) -> str:
        return docs_url(self.tool)

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            error=ErrorDetail(
                kind=self.kind,
                message=self.message,
                suggestions=self.suggestions or None,
                validActions=self.valid_actions,
                docsUrl=self.docs_url,
            )
        )


class UnknownToolError(ToolError):
    kind = ErrorKind.UNKNOWN_TOOL

    def __init__(self, tool: str, available: list[str]) -> None:
        super().__init__(
            f"Unknown tool: {tool}. Available tools: {', '.join(available)}",
            tool=tool,
        )
        self.available = available

    @property
    def docs_url(self) -> str:
        return DOCS_BASE


class UnknownActionError(ToolError):
    kind = ErrorKind.UNKNOWN_ACTION

    def __init__(self, action: str, valid_actions: list[str], *, tool: str = "") -> None:
        suggestion = find_similar(action, valid_actions)
        super().__init__(
            f"Unknown action: {action}. Valid actions: {', '.join(valid_actions)}",
            tool=tool,
            suggestions=[f"Did you mean '{suggestion}'?"] if suggestion else None,
            valid_actions=list(valid_actions),
        )
        self.action = action


class MissingParamError(ToolError):
    kind = ErrorKind.MISSING_PARAM

    def __init__(self, param: str, *, action: str = "", tool: str = "") -> None:
        where = f" for action '{action}'" if action else ""
        super().__init__(f"Missing required parameter '{param}'{where}", tool=tool)
        self.param = param


class ParamValidationError(ToolError):
    kind = ErrorKind.VALIDATION_ERROR


class ApiError(ToolError):
    """The registrar reported a failure; ``message`` is the remote text verbatim."""

    kind = ErrorKind.API_ERROR

    def __init__(self, message: str, *, command: str = "", tool: str = "") -> None:
        super().__init__(message, tool=tool)
        self.command = command


class ResponseShapeError(ApiError):
    """The response envelope did not match the expected nesting."""


class ConfigError(ValueError):
    """Invalid or incomplete runtime configuration."""
