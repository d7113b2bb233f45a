"""Shared contracts — source of truth for all domain-mcp interfaces."""

from contracts.audit import AuditEntry, AuditEvent, AuditLogger
from contracts.config import ApiConfig, AuditConfig, RegistrarConfig, ServerConfig
from contracts.errors import (
    ApiError,
    ConfigError,
    ErrorKind,
    ErrorPayload,
    MissingParamError,
    ParamValidationError,
    ResponseShapeError,
    ToolError,
    UnknownActionError,
    UnknownToolError,
)
from contracts.tool_sdk import (
    ActionDefinition,
    ActionSummary,
    BaseTool,
    CompositeTool,
    FlatParams,
    ToolContext,
    ToolDefinition,
    ToolOutput,
)
from contracts.transport import Transport

__all__ = [
    # audit
    "AuditEntry",
    "AuditEvent",
    "AuditLogger",
    # config
    "ApiConfig",
    "AuditConfig",
    "RegistrarConfig",
    "ServerConfig",
    # errors
    "ApiError",
    "ConfigError",
    "ErrorKind",
    "ErrorPayload",
    "MissingParamError",
    "ParamValidationError",
    "ResponseShapeError",
    "ToolError",
    "UnknownActionError",
    "UnknownToolError",
    # tool sdk
    "ActionDefinition",
    "ActionSummary",
    "BaseTool",
    "CompositeTool",
    "FlatParams",
    "ToolContext",
    "ToolDefinition",
    "ToolOutput",
    # transport
    "Transport",
]
