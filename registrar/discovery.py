"""Discovery — tool schemas and help text derived from action shapes.

Reads the same declarative shapes ``registrar.validation`` checks
against, so advertised fields and accepted fields cannot drift apart.
"""

from __future__ import annotations

from typing import Any, Mapping

from contracts.tool_sdk import ActionSummary, CompositeTool, ToolDefinition

from registrar.validation import ACTION_FIELD


def action_enum_description(tool: CompositeTool) -> str:
    listing = " | ".join(f"{name}: {a.description}" for name, a in tool.actions.items())
    return f"Action to perform: {listing}"


def tool_input_schema(tool: CompositeTool) -> dict[str, Any]:
    """Union schema for a composite tool.

    ``action`` is the only required field; every action field is listed
    once (first declaration wins) and optional, since which of them
    apply depends on the chosen action.
    """
    properties: dict[str, Any] = {
        ACTION_FIELD: {
            "type": "string",
            "enum": tool.action_names(),
            "description": action_enum_description(tool),
        }
    }
    for action in tool.actions.values():
        for name, prop in (action.params or {}).get("properties", {}).items():
            properties.setdefault(name, dict(prop))
    return {"type": "object", "properties": properties, "required": [ACTION_FIELD]}


def tool_definition(tool: CompositeTool) -> ToolDefinition:
    return ToolDefinition(
        name=tool.name,
        description=tool.description,
        input_schema=tool_input_schema(tool),
        actions=tool.action_names(),
    )


def list_actions(tool: CompositeTool) -> list[ActionSummary]:
    return [
        ActionSummary(name=name, description=a.description, command=a.command)
        for name, a in tool.actions.items()
    ]


def describe_fields(params: Mapping[str, Any] | None) -> list[dict[str, Any]]:
    """Flatten a shape into ``{name, type, required, description}`` rows."""
    if not params:
        return []
    required = set(params.get("required", []))
    rows = []
    for name, prop in params.get("properties", {}).items():
        row: dict[str, Any] = {
            "name": name,
            "type": prop.get("type", "any"),
            "required": name in required,
        }
        if "enum" in prop:
            row["enum"] = list(prop["enum"])
        if "description" in prop:
            row["description"] = prop["description"]
        rows.append(row)
    return rows
