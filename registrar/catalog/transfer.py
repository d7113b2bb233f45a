"""dynadot_transfer — inbound/outbound transfers and push requests."""

from __future__ import annotations

from contracts.tool_sdk import ActionDefinition, CompositeTool

from registrar import fields as f
from registrar import transforms as tx

transfer_tool = CompositeTool(
    name="dynadot_transfer",
    description="Domain transfers: initiate, check status, manage auth codes, push requests",
    actions={
        "initiate": ActionDefinition(
            command="transfer",
            description="Initiate domain transfer",
            params=f.shape(domain=f.DOMAIN, authCode=f.AUTH_CODE),
            transform=tx.rename({"domain": "domain", "authCode": "auth"}),
        ),
        "status": ActionDefinition(
            command="get_transfer_status",
            description="Check transfer status",
            params=f.shape(domain=f.DOMAIN),
        ),
        "cancel": ActionDefinition(
            command="cancel_transfer",
            description="Cancel pending transfer",
            params=f.shape(domain=f.DOMAIN),
        ),
        "get_auth_code": ActionDefinition(
            command="get_transfer_auth_code",
            description="Get transfer auth code",
            params=f.shape(domain=f.DOMAIN),
        ),
        "set_auth_code": ActionDefinition(
            command="set_transfer_auth_code",
            description="Set custom auth code",
            params=f.shape(domain=f.DOMAIN, authCode=f.AUTH_CODE),
            transform=tx.rename({"domain": "domain", "authCode": "auth_code"}),
        ),
        "authorize_away": ActionDefinition(
            command="authorize_transfer_away",
            description="Authorize transfer to another registrar",
            params=f.shape(domain=f.DOMAIN),
        ),
        "get_push_request": ActionDefinition(
            command="get_domain_push_request",
            description="Get pending push request",
            params=f.shape(domain=f.DOMAIN),
        ),
        "set_push_request": ActionDefinition(
            command="set_domain_push_request",
            description="Accept or decline push request",
            params=f.shape(domain=f.DOMAIN, pushAction=f.PUSH_ACTION),
            transform=tx.rename({"domain": "domain", "pushAction": "action"}),
        ),
    },
)
