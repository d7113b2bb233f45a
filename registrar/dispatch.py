"""Action dispatcher — tool input to one registrar call and back.

``dispatch(tool, input)`` runs five steps for a composite tool:
resolve the action, validate the input against its shape, compute the
flat parameters (transform or passthrough), call the transport with the
action's command, normalize the raw envelope.  Every ``ToolError``
raised on the way is returned as the structured error payload; nothing
escapes to the host as an opaque exception.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Callable

from contracts.audit import AuditEntry, AuditEvent, AuditLogger, current_request_id
from contracts.errors import ApiError, ConfigError, ToolError
from contracts.tool_sdk import FlatParams, ToolContext
from contracts.transport import Transport

from registrar.normalize import normalize
from registrar.registry import ToolRegistry
from registrar.validation import ACTION_FIELD, validate_input


@dataclass(frozen=True)
class PreparedCall:
    """Output of the pure part of dispatch: what would be sent, and where."""

    tool: str
    action: str
    command: str
    params: FlatParams


def passthrough(data: dict[str, Any]) -> FlatParams:
    """Structural passthrough for actions without a transform."""
    return {
        k: v for k, v in data.items()
        if k != ACTION_FIELD and v is not None and isinstance(v, (str, int, float, bool))
    }


class ActionDispatcher:
    """Routes tool calls to composite actions or standalone tools.

    The transport is injected; when omitted, *transport_factory* builds
    it on the first call that actually needs the registrar.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        transport: Transport | None = None,
        *,
        transport_factory: Callable[[], Transport] | None = None,
        audit: AuditLogger | None = None,
        redact_arguments: bool = False,
    ) -> None:
        self._registry = registry
        self._transport = transport
        self._transport_factory = transport_factory
        self._audit = audit
        self._redact = redact_arguments

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            if self._transport_factory is None:
                from registrar.client import get_client

                self._transport_factory = get_client
            self._transport = self._transport_factory()
        return self._transport

    # ── Pure steps ───────────────────────────────────────────────────

    def prepare(self, tool_name: str, data: dict[str, Any]) -> PreparedCall:
        """Resolve, validate and transform; raises ``ToolError``."""
        action = data.get(ACTION_FIELD)
        definition = self._registry.resolve_action(tool_name, action)
        validated = validate_input(definition.params, data, action=action, tool=tool_name)
        if definition.transform is not None:
            params = definition.transform(action, validated)
        else:
            params = passthrough(validated)
        return PreparedCall(tool=tool_name, action=action, command=definition.command, params=params)

    # ── Entry points ─────────────────────────────────────────────────

    async def dispatch(self, tool_name: str, data: dict[str, Any], *, request_id: str | None = None) -> dict[str, Any]:
        """Execute one composite-tool action; returns a normalized result or error payload."""
        rid = request_id or str(uuid.uuid4())
        token = current_request_id.set(rid)
        action = str(data.get(ACTION_FIELD) or "")
        self._log(rid, AuditEvent.TOOL_CALL, tool_name, action, {"arguments": self._arguments(data)})
        try:
            call = self.prepare(tool_name, data)
            raw = await self.transport.execute(call.command, call.params)
            result = normalize(call.command, raw)
        except ToolError as exc:
            return self._failure(rid, tool_name, action, exc)
        except ConfigError as exc:
            return self._failure(rid, tool_name, action, ApiError(str(exc), tool=tool_name))
        finally:
            current_request_id.reset(token)

        self._log(rid, AuditEvent.TOOL_RESULT, tool_name, action, {
            "command": call.command,
            "success": bool(result.get("success")),
        })
        return result

    async def call(self, tool_name: str, args: dict[str, Any], *, request_id: str | None = None) -> Any:
        """Invoke any registered tool by name.

        Composite tools go through ``dispatch``; standalone tools are
        validated against their own schema and run with a ``ToolContext``.
        """
        if self._registry.is_composite(tool_name):
            return await self.dispatch(tool_name, args, request_id=request_id)

        rid = request_id or str(uuid.uuid4())
        token = current_request_id.set(rid)
        self._log(rid, AuditEvent.TOOL_CALL, tool_name, "", {"arguments": self._arguments(args)})
        try:
            tool = self._registry.get_standalone(tool_name)
            if tool is None:
                # Raises UnknownToolError listing every registered name
                self._registry.get_composite(tool_name)
            definition = tool.definition()
            validated = validate_input(definition.input_schema, args, tool=tool_name)
            ctx = ToolContext(
                request_id=rid,
                transport=self._transport,
                transport_factory=lambda: self.transport,
            )
            output = await tool.run(ctx, validated)
        except ToolError as exc:
            return self._failure(rid, tool_name, "", exc)
        except ConfigError as exc:
            return self._failure(rid, tool_name, "", ApiError(str(exc), tool=tool_name))
        finally:
            current_request_id.reset(token)

        self._log(rid, AuditEvent.TOOL_RESULT, tool_name, "", {"success": output.success})
        if not output.success:
            return {"success": False, "error": output.error}
        return output.result

    # ── internal ────────────────────────────────────────────────────

    def _failure(self, rid: str, tool: str, action: str, exc: ToolError) -> dict[str, Any]:
        if not exc.tool:
            exc.tool = tool
        self._log(rid, AuditEvent.TOOL_ERROR, tool, action, {
            "kind": exc.kind.value,
            "message": exc.message,
        })
        return exc.to_payload().as_dict()

    def _arguments(self, data: dict[str, Any]) -> Any:
        if self._redact:
            return sorted(k for k in data if k != ACTION_FIELD)
        return {k: v for k, v in data.items() if k != ACTION_FIELD}

    def _log(self, rid: str, event: AuditEvent, tool: str, action: str, detail: dict[str, Any]) -> None:
        if self._audit is None:
            return
        self._audit.log(AuditEntry(request_id=rid, event=event, tool=tool, action=action, detail=detail))
