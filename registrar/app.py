"""domain-mcp FastAPI server — the registrar tools over plain HTTP."""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

from fastapi import Body, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from contracts.audit import AuditEntry
from contracts.errors import UnknownToolError

from registrar.audit.query import read_all
from registrar.bootstrap import RegistrarComponents, init_registrar
from registrar.discovery import describe_fields, list_actions


def create_app(components: RegistrarComponents | None = None) -> FastAPI:
    """Build the app.  Without *components*, they are loaded from config on startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.start_time = time.time()
        if getattr(app.state, "components", None) is None:
            app.state.components = init_registrar()
        yield

    app = FastAPI(title="domain-mcp", version="1.0.2", lifespan=lifespan)
    app.state.components = components
    app.state.start_time = time.time()

    def _components(request: Request) -> RegistrarComponents:
        c = getattr(request.app.state, "components", None)
        if c is None:
            raise HTTPException(status_code=503, detail="Runtime not initialised")
        return c

    # ── Endpoints ────────────────────────────────────────────────────

    @app.get("/v1/registrar/health")
    async def health(request: Request) -> dict[str, Any]:
        """Health check with config and audit summary."""
        c = _components(request)
        result: dict[str, Any] = {
            "status": "ok",
            "version": c.config.server.version,
            "uptime_seconds": round(time.time() - request.app.state.start_time, 1),
            "sandbox": c.config.api.sandbox,
            "api_base_url": c.config.api.base_url,
            "api_key_configured": bool(c.config.api.api_key),
            "tools": len(c.registry.list_tools()),
        }
        log_path = Path(c.config.audit.path)
        if c.config.audit.enabled and log_path.exists():
            result["audit_log_size_bytes"] = log_path.stat().st_size
            result["audit_log_entries"] = len(read_all(log_path))
        return result

    @app.get("/v1/tools")
    async def tools(request: Request) -> list[dict[str, Any]]:
        """Every tool with its advertised input schema."""
        c = _components(request)
        return [d.model_dump() for d in c.registry.definitions()]

    @app.get("/v1/tools/{tool}/actions")
    async def actions(tool: str, request: Request) -> Any:
        """Actions of one composite tool, with their fields."""
        c = _components(request)
        try:
            composite = c.registry.get_composite(tool)
        except UnknownToolError as exc:
            return JSONResponse(status_code=404, content=exc.to_payload().as_dict())
        return [
            {**summary.model_dump(), "params": describe_fields(composite.actions[summary.name].params)}
            for summary in list_actions(composite)
        ]

    @app.post("/v1/tools/{tool}")
    async def call_tool(tool: str, request: Request, payload: dict[str, Any] | None = Body(None)) -> Any:
        """Invoke a tool; failures return the structured error payload."""
        c = _components(request)
        if tool not in c.registry.list_tools():
            exc = UnknownToolError(tool, c.registry.list_tools())
            return JSONResponse(status_code=404, content=exc.to_payload().as_dict())
        return await c.dispatcher.call(tool, payload or {})

    @app.get("/v1/registrar/audit/{request_id}")
    async def audit_query(request_id: str, request: Request) -> list[AuditEntry]:
        """Audit entries for one request."""
        c = _components(request)
        if c.logger is None:
            raise HTTPException(status_code=404, detail="Audit logging is disabled")
        return c.logger.query_by_request(request_id)

    @app.get("/v1/registrar/audit")
    async def audit_tail(request: Request, limit: int = Query(20, ge=1, le=1000)) -> list[AuditEntry]:
        """Most recent audit entries."""
        c = _components(request)
        if c.logger is None:
            raise HTTPException(status_code=404, detail="Audit logging is disabled")
        return c.logger.tail(limit)

    return app


app = create_app()
