"""dynadot_nameserver — registered nameservers (glue records)."""

from __future__ import annotations

from contracts.tool_sdk import ActionDefinition, CompositeTool

from registrar import fields as f

nameserver_tool = CompositeTool(
    name="dynadot_nameserver",
    description="Manage registered nameservers (glue records): register, update IP, delete, list",
    actions={
        "list": ActionDefinition(command="server_list", description="List all registered nameservers"),
        "register": ActionDefinition(
            command="register_ns",
            description="Register a custom nameserver",
            params=f.shape(host=f.HOST, ip=f.IP),
        ),
        "add": ActionDefinition(
            command="add_ns",
            description="Add a nameserver",
            params=f.shape(host=f.HOST),
        ),
        "set_ip": ActionDefinition(
            command="set_ns_ip",
            description="Update nameserver IP",
            params=f.shape(host=f.HOST, ip=f.IP),
        ),
        "delete": ActionDefinition(
            command="delete_ns",
            description="Delete a nameserver",
            params=f.shape(host=f.HOST),
        ),
        "delete_by_domain": ActionDefinition(
            command="delete_ns_by_domain",
            description="Delete all nameservers for a domain",
            params=f.shape(domain=f.DOMAIN),
        ),
    },
)
