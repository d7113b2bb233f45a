"""dynadot_contact — WHOIS contacts and registry-specific contact settings."""

from __future__ import annotations

from contracts.tool_sdk import ActionDefinition, CompositeTool

from registrar import fields as f
from registrar import transforms as tx

_CONTACT_SCOPE = {"contactId": "contact_id"}

_edit_fields = {name: field.optional() for name, field in f.CONTACT_FIELDS.items()}

contact_tool = CompositeTool(
    name="dynadot_contact",
    description="WHOIS contact management: create, edit, delete, list, regional settings",
    actions={
        "list": ActionDefinition(command="contact_list", description="List all contacts"),
        "get": ActionDefinition(
            command="get_contact",
            description="Get contact details",
            params=f.shape(contactId=f.CONTACT_ID),
            transform=tx.rename(_CONTACT_SCOPE),
        ),
        "create": ActionDefinition(
            command="create_contact",
            description="Create new contact",
            params=f.shape(**f.CONTACT_FIELDS),
            transform=tx.contact,
        ),
        "edit": ActionDefinition(
            command="edit_contact",
            description="Update contact",
            params=f.shape(contactId=f.CONTACT_ID, **_edit_fields),
            transform=tx.rename({**_CONTACT_SCOPE, **tx.CONTACT_KEYS}),
        ),
        "delete": ActionDefinition(
            command="delete_contact",
            description="Delete contact",
            params=f.shape(contactId=f.CONTACT_ID),
            transform=tx.rename(_CONTACT_SCOPE),
        ),
        "create_cn_audit": ActionDefinition(
            command="create_cn_audit",
            description="Create .CN domain audit",
            params=f.shape(contactId=f.CONTACT_ID, auditDetails=f.string_map("Audit details")),
            transform=tx.with_map("auditDetails", _CONTACT_SCOPE),
        ),
        "get_cn_audit_status": ActionDefinition(
            command="get_cn_audit_status",
            description="Get .CN audit status",
            params=f.shape(contactId=f.CONTACT_ID),
            transform=tx.rename(_CONTACT_SCOPE),
        ),
        "set_eu_setting": ActionDefinition(
            command="set_contact_eu_setting",
            description="Set EU contact settings",
            params=f.shape(contactId=f.CONTACT_ID, settings=f.SETTINGS),
            transform=tx.with_map("settings", _CONTACT_SCOPE),
        ),
        "set_lv_setting": ActionDefinition(
            command="set_contact_lv_setting",
            description="Set Latvia contact settings",
            params=f.shape(contactId=f.CONTACT_ID, settings=f.SETTINGS),
            transform=tx.with_map("settings", _CONTACT_SCOPE),
        ),
        "set_lt_setting": ActionDefinition(
            command="set_contact_lt_setting",
            description="Set Lithuania contact settings",
            params=f.shape(contactId=f.CONTACT_ID, settings=f.SETTINGS),
            transform=tx.with_map("settings", _CONTACT_SCOPE),
        ),
    },
)
