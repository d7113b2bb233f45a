"""Unit tests for the standalone tools: check_domain, generate_domain_ideas, generate_domains, dynadot_help."""

from __future__ import annotations

import random
from typing import Any
from unittest.mock import AsyncMock

import pytest

from contracts.errors import ApiError
from contracts.tool_sdk import ToolContext
from registrar.registry import create_default_registry
from registrar.tools.check_domain import CheckDomainTool
from registrar.tools.domain_ideas import (
    DomainIdeasTool,
    clean_keywords,
    format_report,
    generate_hyphenated,
    generate_prefix,
    price_value,
    select_candidates,
)
from registrar.tools.generate_domains import GenerateDomainsTool, build_agent_prompt
from registrar.tools.help import EXAMPLES, HelpTool


# ── helpers ─────────────────────────────────────────────────────────


def _search_response(*rows: dict[str, Any]) -> dict[str, Any]:
    return {"SearchResponse": {"ResponseCode": "0", "SearchResults": list(rows)}}


def _ctx(response: dict[str, Any] | None = None) -> tuple[ToolContext, AsyncMock]:
    transport = AsyncMock()
    transport.execute = AsyncMock(return_value=response if response is not None else _search_response())
    return ToolContext(request_id="test-req-1", transport=transport), transport


# ── check_domain ────────────────────────────────────────────────────


class TestCheckDomain:
    @pytest.mark.asyncio
    async def test_available_with_price(self) -> None:
        ctx, transport = _ctx(_search_response({"Domain": "example.com", "Available": "yes", "Price": "9.99"}))
        output = await CheckDomainTool().run(ctx, {"domain": "example.com", "showPrice": True})
        transport.execute.assert_awaited_once_with("search", {"domain0": "example.com", "show_price": "1"})
        assert output.result == {"domain": "example.com", "available": True, "price": "9.99"}
        assert output.call_id == "test-req-1"

    @pytest.mark.asyncio
    async def test_unavailable_without_price(self) -> None:
        ctx, transport = _ctx(_search_response({"Domain": "taken.com", "Available": "no", "Price": "9.99"}))
        output = await CheckDomainTool().run(ctx, {"domain": "taken.com", "showPrice": False})
        transport.execute.assert_awaited_once_with("search", {"domain0": "taken.com"})
        assert output.result == {"domain": "taken.com", "available": False}

    @pytest.mark.asyncio
    async def test_empty_results(self) -> None:
        ctx, _ = _ctx()
        output = await CheckDomainTool().run(ctx, {"domain": "x.com", "showPrice": False})
        assert output.result == {"domain": "x.com", "available": False}


# ── generate_domain_ideas ───────────────────────────────────────────


class TestCandidateGeneration:
    def test_clean_keywords(self) -> None:
        assert clean_keywords(["A", "Hello-World", "x1", "Task!"]) == ["helloworld", "x1", "task"]

    def test_hyphenated_skips_self_pairs(self) -> None:
        assert generate_hyphenated(["a1", "b2"], ["com"]) == ["a1-b2.com", "b2-a1.com"]

    def test_label_length_cap(self) -> None:
        keyword = "abcdefghijklmnopq"  # 17 characters
        labels = {d.split(".")[0] for d in generate_prefix([keyword], ["com"])}
        assert f"go-{keyword}" in labels
        assert f"get-{keyword}" not in labels

    def test_exact_first_then_capped(self) -> None:
        candidates = select_candidates(["task", "flow"], ["com", "io"], ["exact", "suffix"], 10, random.Random(0))
        assert candidates[:4] == ["task.com", "task.io", "flow.com", "flow.io"]
        assert len(candidates) == 10
        assert len(set(candidates)) == 10

    def test_exact_only(self) -> None:
        candidates = select_candidates(["task"], ["com"], ["exact"], 100, random.Random(0))
        assert candidates == ["task.com"]

    def test_price_value(self) -> None:
        assert price_value("$1,299.00") == 1299.0
        assert price_value("9.99") == 9.99
        assert price_value(None) == 999.0
        assert price_value("n/a") == 999.0

    def test_format_report(self) -> None:
        assert format_report([], 12) == "No available domains found (checked 12 domains)"
        text = format_report([{"domain": "a.io", "price": "9.99"}], 3)
        assert text == "Found 1 available domains (checked 3):\n\na.io 9.99"


class TestDomainIdeas:
    @pytest.mark.asyncio
    async def test_available_sorted_by_price(self) -> None:
        ctx, transport = _ctx(_search_response(
            {"Domain": "task.com", "Available": "yes", "Price": "$12.99"},
            {"Domain": "task.io", "Available": "yes", "Price": "9.99"},
            {"Domain": "task-hq.com", "Available": "no"},
        ))
        tool = DomainIdeasTool(rng=random.Random(0))
        output = await tool.run(ctx, {
            "keywords": ["task"],
            "tlds": ["com", "io"],
            "patterns": ["exact", "suffix"],
            "maxToCheck": 10,
        })
        assert output.result == "Found 2 available domains (checked 10):\n\ntask.io 9.99\ntask.com $12.99"

        transport.execute.assert_awaited_once()
        command, params = transport.execute.await_args.args
        assert command == "search"
        assert params["show_price"] == "1"
        assert params["domain0"] == "task.com"
        assert params["domain1"] == "task.io"

    @pytest.mark.asyncio
    async def test_batches_of_one_hundred(self) -> None:
        ctx, transport = _ctx()
        output = await DomainIdeasTool(rng=random.Random(1)).run(ctx, {
            "keywords": ["alpha", "beta", "gamma"],
            "maxToCheck": 150,
        })
        assert transport.execute.await_count == 2
        sizes = [len([k for k in call.args[1] if k.startswith("domain")]) for call in transport.execute.await_args_list]
        assert sizes == [100, 50]
        assert output.result == "No available domains found (checked 150 domains)"

    @pytest.mark.asyncio
    async def test_failed_batch_propagates(self) -> None:
        ctx, transport = _ctx()
        transport.execute.side_effect = [_search_response(), ApiError("Dynadot API error: rate limited")]
        with pytest.raises(ApiError, match="rate limited"):
            await DomainIdeasTool(rng=random.Random(1)).run(ctx, {
                "keywords": ["alpha", "beta", "gamma"],
                "maxToCheck": 150,
            })
        assert transport.execute.await_count == 2

    @pytest.mark.asyncio
    async def test_no_keywords_survive_cleaning(self) -> None:
        ctx, transport = _ctx()
        output = await DomainIdeasTool().run(ctx, {"keywords": ["!", "a"], "maxToCheck": 10})
        transport.execute.assert_not_awaited()
        assert output.result == "No available domains found (checked 0 domains)"


# ── generate_domains ────────────────────────────────────────────────


class TestGenerateDomains:
    def test_agent_prompt(self) -> None:
        prompt = build_agent_prompt("task tool", 20, ["com"], 15)
        assert 'Generate 20 creative domain names for: "task tool"' in prompt

    @pytest.mark.asyncio
    async def test_returns_instructions_without_remote_call(self) -> None:
        ctx, transport = _ctx()
        output = await GenerateDomainsTool().run(
            ctx, {"prompt": "task tool", "count": 20, "tlds": ["com"], "maxLength": 15}
        )
        assert set(output.result) == {"instruction", "agentPrompt", "postProcess"}
        assert "task tool" in output.result["agentPrompt"]
        transport.execute.assert_not_awaited()


# ── dynadot_help ────────────────────────────────────────────────────


class TestHelp:
    @pytest.mark.asyncio
    async def test_tools(self) -> None:
        ctx, _ = _ctx()
        output = await HelpTool(create_default_registry()).run(ctx, {"query": "tools"})
        result = output.result
        assert result["success"] is True
        assert [t["name"] for t in result["tools"]][:2] == ["dynadot_domain", "dynadot_domain_settings"]
        assert result["tools"][0]["actionCount"] == 11
        assert {t["name"] for t in result["standalone"]} == {
            "check_domain",
            "generate_domain_ideas",
            "generate_domains",
            "dynadot_help",
        }

    @pytest.mark.asyncio
    async def test_actions_requires_tool(self) -> None:
        ctx, _ = _ctx()
        output = await HelpTool(create_default_registry()).run(ctx, {"query": "actions"})
        assert output.result == {
            "success": False,
            "error": 'Please specify a tool name with the "tool" parameter',
        }

    @pytest.mark.asyncio
    async def test_actions_unknown_tool(self) -> None:
        ctx, _ = _ctx()
        output = await HelpTool(create_default_registry()).run(ctx, {"query": "actions", "tool": "nope"})
        assert output.result["success"] is False
        assert output.result["error"] == 'Tool "nope" not found'
        assert "dynadot_dns" in output.result["availableTools"]

    @pytest.mark.asyncio
    async def test_actions_for_tool(self) -> None:
        ctx, _ = _ctx()
        output = await HelpTool(create_default_registry()).run(ctx, {"query": "actions", "tool": "dynadot_dns"})
        actions = {a["name"]: a for a in output.result["actions"]}
        assert actions["clear_dns"]["command"] == "set_dns2"
        assert actions["get"]["params"][0]["name"] == "domain"

    @pytest.mark.asyncio
    async def test_examples(self) -> None:
        ctx, _ = _ctx()
        output = await HelpTool(create_default_registry()).run(ctx, {"query": "examples"})
        assert output.result == {"success": True, "examples": EXAMPLES}
