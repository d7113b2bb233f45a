"""dynadot_account — account info and defaults applied to new domains."""

from __future__ import annotations

from contracts.tool_sdk import ActionDefinition, CompositeTool

from registrar import fields as f
from registrar import transforms as tx
from registrar.constants import DYNADOT_URLS

account_tool = CompositeTool(
    name="dynadot_account",
    description=(
        "Account info, balance, and default settings for new domains. "
        f"Manage API keys: {DYNADOT_URLS['api_key']}"
    ),
    actions={
        "info": ActionDefinition(command="account_info", description="Get account information"),
        "balance": ActionDefinition(
            command="get_account_balance",
            description="Get account balance",
            params=f.shape(currency=f.CURRENCY.optional()),
        ),
        "set_default_whois": ActionDefinition(
            command="set_default_whois",
            description="Set default WHOIS contact",
            params=f.shape(contactId=f.CONTACT_ID),
            transform=tx.rename({"contactId": "contact_id"}),
        ),
        "set_default_ns": ActionDefinition(
            command="set_default_ns",
            description="Set default nameservers",
            params=f.shape(nameservers=f.NAMESERVERS),
            transform=tx.with_list("nameservers", "ns"),
        ),
        "set_default_parking": ActionDefinition(
            command="set_default_parking",
            description="Set default parking",
        ),
        "set_default_forwarding": ActionDefinition(
            command="set_default_forwarding",
            description="Set default forwarding",
            params=f.shape(forwardUrl=f.URL),
            transform=tx.rename({"forwardUrl": "forward_url"}),
        ),
        "set_default_stealth": ActionDefinition(
            command="set_default_stealth",
            description="Set default stealth forwarding",
            params=f.shape(stealthUrl=f.URL),
            transform=tx.rename({"stealthUrl": "stealth_url"}),
        ),
        "set_default_hosting": ActionDefinition(
            command="set_default_hosting",
            description="Set default hosting",
            params=f.shape(options=f.string_map("Hosting options")),
            transform=tx.with_map("options"),
        ),
        "set_default_dns": ActionDefinition(
            command="set_default_dns",
            description="Set default DNS",
            params=f.shape(mainRecords=f.MAIN_RECORDS, subdomainRecords=f.SUBDOMAIN_RECORDS),
            transform=tx.with_dns(),
        ),
        "set_default_dns2": ActionDefinition(
            command="set_default_dns2",
            description="Set default DNS2",
            params=f.shape(mainRecords=f.MAIN_RECORDS, subdomainRecords=f.SUBDOMAIN_RECORDS),
            transform=tx.with_dns(),
        ),
        "set_default_email_forward": ActionDefinition(
            command="set_default_email_forward",
            description="Set default email forwarding",
            params=f.shape(email=f.EMAIL),
        ),
        "set_default_renew_option": ActionDefinition(
            command="set_default_renew_option",
            description="Set default renewal option",
            params=f.shape(renewOption=f.choice(["auto", "donot"], "Renewal option")),
            transform=tx.rename({"renewOption": "renew_option"}),
        ),
        "clear_defaults": ActionDefinition(
            command="set_clear_default_setting",
            description="Clear all default settings",
        ),
    },
)
