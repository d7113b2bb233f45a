"""domain-mcp MCP server — exposes registrar tools over stdio transport.

Composite tools carry a per-tool union input schema that only the
dispatcher can interpret, so the server is built on the low-level
``mcp.server.Server`` rather than on decorated Python signatures.
"""

from __future__ import annotations

import json
import uuid
from typing import Any

import mcp.types as types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server

from registrar.bootstrap import RegistrarComponents, init_registrar
from registrar.prompts import PROMPTS
from registrar.resources import JSON_MIME, RESOURCES, read_resource

# ── Initialisation ────────────────────────────────────────────────────

_components: RegistrarComponents | None = None


def _get_components() -> RegistrarComponents:
    """Return initialised components, lazily loading on first access."""
    global _components  # noqa: PLW0603
    if _components is None:
        _components = init_registrar()
    return _components


# ── Handlers (plain functions, independent of the SDK plumbing) ───────


def list_tool_definitions(components: RegistrarComponents) -> list[types.Tool]:
    return [
        types.Tool(name=d.name, description=d.description, inputSchema=d.input_schema)
        for d in components.registry.definitions()
    ]


def render_result(result: Any) -> str:
    if isinstance(result, str):
        return result
    return json.dumps(result, indent=2)


def is_failure(result: Any) -> bool:
    return isinstance(result, dict) and result.get("success") is False


async def run_tool(components: RegistrarComponents, name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
    """Dispatch one call; failures come back as ``isError`` results, never as exceptions."""
    result = await components.dispatcher.call(name, dict(arguments or {}), request_id=str(uuid.uuid4()))
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=render_result(result))],
        isError=is_failure(result),
    )


def list_resource_definitions() -> list[types.Resource]:
    return [
        types.Resource(uri=r.uri, name=r.name, description=r.description, mimeType=JSON_MIME)
        for r in RESOURCES
    ]


def list_prompt_definitions() -> list[types.Prompt]:
    return [
        types.Prompt(
            name=p.name,
            description=p.description,
            arguments=[
                types.PromptArgument(name=a.name, description=a.description, required=a.required)
                for a in p.arguments
            ],
        )
        for p in PROMPTS.values()
    ]


def get_prompt(name: str, arguments: dict[str, str] | None) -> types.GetPromptResult:
    try:
        spec = PROMPTS[name]
    except KeyError:
        raise ValueError(f"Unknown prompt: {name}") from None
    return types.GetPromptResult(
        description=spec.description,
        messages=[
            types.PromptMessage(
                role="user",
                content=types.TextContent(type="text", text=spec.render(arguments)),
            )
        ],
    )


# ── Server wiring ─────────────────────────────────────────────────────


def build_server(components: RegistrarComponents | None = None) -> Server:
    """Create the MCP server with every tool, resource and prompt registered."""
    c = components or _get_components()
    server = Server(c.config.server.name, version=c.config.server.version)

    @server.list_tools()
    async def _list_tools() -> list[types.Tool]:
        return list_tool_definitions(c)

    # Validation happens in the dispatcher so failures keep the structured payload
    @server.call_tool(validate_input=False)
    async def _call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        return await run_tool(c, name, arguments)

    @server.list_resources()
    async def _list_resources() -> list[types.Resource]:
        return list_resource_definitions()

    @server.read_resource()
    async def _read_resource(uri: Any) -> list[ReadResourceContents]:
        text = await read_resource(str(uri), c.dispatcher.transport)
        return [ReadResourceContents(content=text, mime_type=JSON_MIME)]

    @server.list_prompts()
    async def _list_prompts() -> list[types.Prompt]:
        return list_prompt_definitions()

    @server.get_prompt()
    async def _get_prompt(name: str, arguments: dict[str, str] | None) -> types.GetPromptResult:
        return get_prompt(name, arguments)

    return server


async def serve_stdio(components: RegistrarComponents | None = None) -> None:
    server = build_server(components)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


# ── Entry point ───────────────────────────────────────────────────────

if __name__ == "__main__":
    import asyncio

    asyncio.run(serve_stdio())
