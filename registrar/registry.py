"""Tool registry — composite declarations plus standalone tools.

Composite tools are pure data resolved by name; standalone tools are
``BaseTool`` instances.  Both share one namespace and one advertisement
order.
"""

from __future__ import annotations

from contracts.errors import UnknownActionError, UnknownToolError
from contracts.tool_sdk import ActionDefinition, BaseTool, CompositeTool, ToolDefinition

from registrar.discovery import tool_definition


class ToolRegistry:
    """In-memory registry.  Lookups are pure; registration happens at startup."""

    def __init__(self) -> None:
        self._composite: dict[str, CompositeTool] = {}
        self._standalone: dict[str, BaseTool] = {}

    def register_composite(self, tool: CompositeTool) -> None:
        """Register a composite tool.  Duplicate names and empty tools are rejected."""
        self._check_free(tool.name)
        if not tool.actions:
            raise ValueError(f"Composite tool {tool.name!r} declares no actions")
        self._composite[tool.name] = tool

    def register(self, tool: BaseTool) -> None:
        """Register a standalone tool instance."""
        name = tool.definition().name
        self._check_free(name)
        self._standalone[name] = tool

    def list_tools(self) -> list[str]:
        """Tool names in registration order, composite tools first."""
        return [*self._composite, *self._standalone]

    def composite_tools(self) -> list[CompositeTool]:
        return list(self._composite.values())

    def definitions(self) -> list[ToolDefinition]:
        defs = [tool_definition(t) for t in self._composite.values()]
        defs.extend(t.definition() for t in self._standalone.values())
        return defs

    def get_composite(self, name: str) -> CompositeTool:
        """Return a composite tool or raise ``UnknownToolError``."""
        try:
            return self._composite[name]
        except KeyError:
            raise UnknownToolError(name, self.list_tools()) from None

    def get_standalone(self, name: str) -> BaseTool | None:
        return self._standalone.get(name)

    def is_composite(self, name: str) -> bool:
        return name in self._composite

    def resolve_action(self, tool_name: str, action: object) -> ActionDefinition:
        """Return the action definition for ``tool_name.action``.

        Raises ``UnknownToolError`` or ``UnknownActionError``; the latter
        carries the tool's valid actions and a "did you mean" hint.
        """
        tool = self.get_composite(tool_name)
        if not isinstance(action, str):
            shown = "" if action is None else repr(action)
            raise UnknownActionError(shown, tool.action_names(), tool=tool_name)
        definition = tool.actions.get(action)
        if definition is None:
            raise UnknownActionError(action, tool.action_names(), tool=tool_name)
        return definition

    # ── internal ────────────────────────────────────────────────────

    def _check_free(self, name: str) -> None:
        if name in self._composite or name in self._standalone:
            raise ValueError(f"Tool {name!r} is already registered")


def create_default_registry() -> ToolRegistry:
    """Create a registry pre-loaded with every built-in tool."""
    from registrar.catalog.account import account_tool
    from registrar.catalog.aftermarket import aftermarket_tool
    from registrar.catalog.contact import contact_tool
    from registrar.catalog.dns import dns_tool
    from registrar.catalog.domain import domain_tool
    from registrar.catalog.domain_settings import domain_settings_tool
    from registrar.catalog.folder import folder_tool
    from registrar.catalog.nameserver import nameserver_tool
    from registrar.catalog.order import order_tool
    from registrar.catalog.transfer import transfer_tool
    from registrar.tools.check_domain import CheckDomainTool
    from registrar.tools.domain_ideas import DomainIdeasTool
    from registrar.tools.generate_domains import GenerateDomainsTool
    from registrar.tools.help import HelpTool

    registry = ToolRegistry()
    for tool in (
        domain_tool,
        domain_settings_tool,
        dns_tool,
        nameserver_tool,
        transfer_tool,
        contact_tool,
        folder_tool,
        account_tool,
        aftermarket_tool,
        order_tool,
    ):
        registry.register_composite(tool)

    registry.register(CheckDomainTool())
    registry.register(DomainIdeasTool())
    registry.register(GenerateDomainsTool())
    registry.register(HelpTool(registry))
    return registry
