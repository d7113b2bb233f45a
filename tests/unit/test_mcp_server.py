"""Unit tests for the MCP server handlers, resources and prompts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

from contracts.config import AuditConfig, RegistrarConfig
from contracts.errors import MissingParamError
from registrar.bootstrap import RegistrarComponents, init_registrar
from registrar.mcp_server import (
    build_server,
    get_prompt,
    is_failure,
    list_prompt_definitions,
    list_resource_definitions,
    list_tool_definitions,
    render_result,
    run_tool,
)
from registrar.resources import get_resource, read_resource


# ── helpers ─────────────────────────────────────────────────────────


def _components(tmp_path: Path, response: dict[str, Any] | None = None) -> tuple[RegistrarComponents, AsyncMock]:
    transport = AsyncMock()
    transport.execute = AsyncMock(
        return_value=response if response is not None else {"AccountInfoResponse": {"ResponseCode": "0"}}
    )
    config = RegistrarConfig(audit=AuditConfig(path=str(tmp_path / "audit.jsonl")))
    return init_registrar(config=config, transport=transport), transport


class TestTools:
    def test_definitions(self, tmp_path: Path) -> None:
        components, _ = _components(tmp_path)
        tools = list_tool_definitions(components)
        assert len(tools) == 14
        dns = next(t for t in tools if t.name == "dynadot_dns")
        assert dns.inputSchema["required"] == ["action"]
        assert "clear_dns" in dns.inputSchema["properties"]["action"]["enum"]

    @pytest.mark.asyncio
    async def test_run_tool_success(self, tmp_path: Path) -> None:
        components, transport = _components(tmp_path)
        result = await run_tool(components, "dynadot_account", {"action": "info"})
        assert result.isError is False
        payload = json.loads(result.content[0].text)
        assert payload["success"] is True
        transport.execute.assert_awaited_once_with("account_info", {})

    @pytest.mark.asyncio
    async def test_run_tool_failure_flagged(self, tmp_path: Path) -> None:
        components, _ = _components(tmp_path)
        result = await run_tool(components, "dynadot_domain", {"action": "locks"})
        assert result.isError is True
        payload = json.loads(result.content[0].text)
        assert payload["error"]["kind"] == "UnknownAction"

    @pytest.mark.asyncio
    async def test_run_tool_without_arguments(self, tmp_path: Path) -> None:
        components, _ = _components(tmp_path)
        result = await run_tool(components, "dynadot_domain", None)
        assert result.isError is True

    @pytest.mark.asyncio
    async def test_text_result_rendered_verbatim(self, tmp_path: Path) -> None:
        components, _ = _components(tmp_path, {"SearchResponse": {"SearchResults": []}})
        result = await run_tool(components, "generate_domain_ideas", {"keywords": ["task"], "maxToCheck": 10})
        assert result.isError is False
        assert result.content[0].text.startswith("No available domains found")

    def test_render_and_failure(self) -> None:
        assert render_result("plain") == "plain"
        assert json.loads(render_result({"success": True})) == {"success": True}
        assert is_failure({"success": False}) is True
        assert is_failure({"success": True}) is False
        assert is_failure("text") is False

    def test_build_server(self, tmp_path: Path) -> None:
        components, _ = _components(tmp_path)
        server = build_server(components)
        assert server.name == "domain-mcp"


class TestResources:
    def test_definitions(self) -> None:
        uris = [str(r.uri).rstrip("/") for r in list_resource_definitions()]
        assert uris == ["account://info", "domains://list", "contacts://list", "folders://list"]

    def test_unknown_resource(self) -> None:
        with pytest.raises(KeyError):
            get_resource("nope://x")

    @pytest.mark.asyncio
    async def test_read_resource_normalized(self) -> None:
        transport = AsyncMock()
        transport.execute = AsyncMock(return_value={"Status": "success", "FolderListResponse": {"FolderList": []}})
        text = await read_resource("folders://list", transport)
        transport.execute.assert_awaited_once_with("folder_list")
        assert json.loads(text) == {"success": True, "folderListResponse": {"folderList": []}}


class TestPrompts:
    def test_definitions(self) -> None:
        prompts = {p.name: p for p in list_prompt_definitions()}
        assert set(prompts) == {"domain-audit", "dns-setup", "bulk-renewal"}
        assert prompts["dns-setup"].arguments[0].name == "domain"
        assert prompts["dns-setup"].arguments[0].required is True

    def test_render_with_argument(self) -> None:
        result = get_prompt("dns-setup", {"domain": "example.com"})
        assert "Help me configure DNS for example.com" in result.messages[0].content.text

    def test_missing_argument(self) -> None:
        with pytest.raises(MissingParamError):
            get_prompt("dns-setup", {})

    def test_prompt_without_arguments(self) -> None:
        result = get_prompt("domain-audit", None)
        assert "domains://list" in result.messages[0].content.text

    def test_unknown_prompt(self) -> None:
        with pytest.raises(ValueError, match="Unknown prompt"):
            get_prompt("nope", None)
