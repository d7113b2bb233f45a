"""dynadot_domain_settings — per-domain configuration."""

from __future__ import annotations

from contracts.tool_sdk import ActionDefinition, CompositeTool

from registrar import fields as f
from registrar import transforms as tx

domain_settings_tool = CompositeTool(
    name="dynadot_domain_settings",
    description="Configure domain settings: nameservers, privacy, renewal, forwarding, parking, WHOIS",
    actions={
        "set_ns": ActionDefinition(
            command="set_ns",
            description="Set nameservers",
            params=f.shape(domain=f.DOMAIN, nameservers=f.NAMESERVERS),
            transform=tx.with_list("nameservers", "ns", scope={"domain": "domain"}),
        ),
        "get_ns": ActionDefinition(
            command="get_ns",
            description="Get current nameservers",
            params=f.shape(domain=f.DOMAIN),
        ),
        "set_renew_option": ActionDefinition(
            command="set_renew_option",
            description="Set auto-renewal option",
            params=f.shape(domain=f.DOMAIN, renewOption=f.RENEW_OPTION),
            transform=tx.rename({"domain": "domain", "renewOption": "renew_option"}),
        ),
        "set_privacy": ActionDefinition(
            command="set_privacy",
            description="Set WHOIS privacy",
            params=f.shape(domains=f.DOMAINS, option=f.PRIVACY_OPTION),
            transform=tx.with_list("domains", "domain", scope={"option": "option"}),
        ),
        "set_whois": ActionDefinition(
            command="set_whois",
            description="Set WHOIS contact",
            params=f.shape(
                domain=f.DOMAIN,
                registrantContact=f.CONTACT_ID,
                adminContact=f.CONTACT_ID.optional(),
                techContact=f.CONTACT_ID.optional(),
                billingContact=f.CONTACT_ID.optional(),
            ),
            transform=tx.rename({
                "domain": "domain",
                "registrantContact": "registrant_contact",
                "adminContact": "admin_contact",
                "techContact": "tech_contact",
                "billingContact": "billing_contact",
            }),
        ),
        "set_forwarding": ActionDefinition(
            command="set_forwarding",
            description="Set URL forwarding",
            params=f.shape(
                domain=f.DOMAIN,
                forwardUrl=f.URL,
                forwardType=f.choice(["temporary", "permanent"], "Redirect type").optional(),
            ),
            transform=tx.rename({"domain": "domain", "forwardUrl": "forward_url", "forwardType": "forward_type"}),
        ),
        "set_stealth": ActionDefinition(
            command="set_stealth",
            description="Set stealth/masked forwarding",
            params=f.shape(
                domain=f.DOMAIN,
                stealthUrl=f.URL,
                stealthTitle=f.string("Page title").optional(),
            ),
            transform=tx.rename({"domain": "domain", "stealthUrl": "stealth_url", "stealthTitle": "stealth_title"}),
        ),
        "set_parking": ActionDefinition(
            command="set_parking",
            description="Enable parking page",
            params=f.shape(domain=f.DOMAIN),
        ),
        "set_hosting": ActionDefinition(
            command="set_hosting",
            description="Set hosting settings",
            params=f.shape(domain=f.DOMAIN, options=f.string_map("Hosting options")),
            transform=tx.with_map("options", {"domain": "domain"}),
        ),
        "set_email_forward": ActionDefinition(
            command="set_email_forward",
            description="Set email forwarding",
            params=f.shape(
                domain=f.DOMAIN,
                forwardTo=f.EMAIL,
                username=f.string("Email username (default: *)").optional(),
            ),
            transform=tx.rename(
                {"domain": "domain", "forwardTo": "forward_to", "username": "username"},
                defaults={"username": "*"},
            ),
        ),
        "set_folder": ActionDefinition(
            command="set_folder",
            description="Move domain to folder",
            params=f.shape(domain=f.DOMAIN, folderId=f.FOLDER_ID),
            transform=tx.rename({"domain": "domain", "folderId": "folder_id"}),
        ),
        "set_note": ActionDefinition(
            command="set_note",
            description="Set domain note",
            params=f.shape(domain=f.DOMAIN, note=f.NOTE),
        ),
        "clear_settings": ActionDefinition(
            command="set_clear_domain_setting",
            description="Clear all custom settings",
            params=f.shape(domain=f.DOMAIN),
        ),
    },
)
