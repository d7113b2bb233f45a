"""Built-in dynadot_help tool — tool and action discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contracts.tool_sdk import BaseTool, ToolContext, ToolDefinition, ToolOutput

from registrar import fields as f
from registrar.discovery import describe_fields, list_actions

if TYPE_CHECKING:
    from registrar.registry import ToolRegistry

QUERIES = ["tools", "actions", "examples"]

EXAMPLES = [
    {"description": "List all domains", "tool": "dynadot_domain", "input": {"action": "list"}},
    {
        "description": "Check domain availability",
        "tool": "check_domain",
        "input": {"domain": "example.com", "showPrice": True},
    },
    {
        "description": "Get domain DNS records",
        "tool": "dynadot_dns",
        "input": {"action": "get", "domain": "example.com"},
    },
    {
        "description": "Point a domain at a web server",
        "tool": "dynadot_dns",
        "input": {
            "action": "set",
            "domain": "example.com",
            "mainRecords": [{"type": "A", "value": "192.0.2.1"}],
            "subdomainRecords": [{"subdomain": "www", "type": "CNAME", "value": "example.com"}],
        },
    },
    {
        "description": "Lock a domain against transfers",
        "tool": "dynadot_domain",
        "input": {"action": "lock", "domain": "example.com", "lock": "lock"},
    },
]


class HelpTool(BaseTool):
    """Answers ``tools``, ``actions`` and ``examples`` queries from the registry."""

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="dynadot_help",
            description=(
                'Discover available tools and actions. Use query: "tools" to list all tools, '
                '"actions" with a tool name to list actions, "examples" for usage examples.'
            ),
            input_schema=f.shape(
                query=f.choice(QUERIES, "What to get help on"),
                tool=f.string("Specific tool name (for actions query)").optional(),
            ),
        )

    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolOutput:
        query = args["query"]
        if query == "tools":
            result = self._tools()
        elif query == "actions":
            result = self._actions(args.get("tool"))
        else:
            result = {"success": True, "examples": EXAMPLES}
        return ToolOutput(call_id=ctx.request_id, tool_name="dynadot_help", result=result)

    # ── internal ────────────────────────────────────────────────────

    def _tools(self) -> dict[str, Any]:
        composite = [
            {"name": t.name, "description": t.description, "actionCount": len(t.actions)}
            for t in self._registry.composite_tools()
        ]
        standalone = [
            {"name": d.name, "description": d.description}
            for d in self._registry.definitions()
            if not d.actions
        ]
        return {"success": True, "tools": composite, "standalone": standalone}

    def _actions(self, tool_name: str | None) -> dict[str, Any]:
        if not tool_name:
            return {"success": False, "error": 'Please specify a tool name with the "tool" parameter'}
        if not self._registry.is_composite(tool_name):
            return {
                "success": False,
                "error": f'Tool "{tool_name}" not found',
                "availableTools": [t.name for t in self._registry.composite_tools()],
            }

        tool = self._registry.get_composite(tool_name)
        summaries = {s.name: s for s in list_actions(tool)}
        actions = [
            {
                **summaries[name].model_dump(),
                "params": describe_fields(definition.params),
            }
            for name, definition in tool.actions.items()
        ]
        return {"success": True, "tool": tool_name, "actions": actions}
