"""Built-in check_domain tool — single-domain availability."""

from __future__ import annotations

from typing import Any

from contracts.tool_sdk import BaseTool, ToolContext, ToolDefinition, ToolOutput

from registrar import fields as f
from registrar.normalize import normalize
from registrar.transforms import compact, flag

SEARCH_COMMAND = "search"


class CheckDomainTool(BaseTool):
    """Check one domain through the ``search`` command."""

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="check_domain",
            description=(
                "Check if a single domain is available for registration. "
                "Designed for parallel execution: launch many calls at once to check many domains."
            ),
            input_schema=f.shape(
                domain=f.string("Domain to check (e.g., example.com)"),
                showPrice=f.boolean("Include pricing info").default(False),
            ),
        )

    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolOutput:
        domain = args["domain"]
        show_price = bool(args.get("showPrice"))

        params = compact({"domain0": domain, "show_price": flag(show_price)})
        raw = await ctx.require_transport().execute(SEARCH_COMMAND, params)
        results = normalize(SEARCH_COMMAND, raw).get("results") or []
        first = results[0] if results else {}

        result: dict[str, Any] = {"domain": domain, "available": bool(first.get("available"))}
        if show_price and first.get("price"):
            result["price"] = first["price"]
        return ToolOutput(call_id=ctx.request_id, tool_name="check_domain", result=result)
