"""dynadot_order — orders, coupons and reseller operations."""

from __future__ import annotations

from contracts.tool_sdk import ActionDefinition, CompositeTool

from registrar import fields as f
from registrar import transforms as tx

order_tool = CompositeTool(
    name="dynadot_order",
    description="Orders, coupons, processing status, reseller operations",
    actions={
        "list": ActionDefinition(command="order_list", description="List recent orders"),
        "status": ActionDefinition(
            command="get_order_status",
            description="Get order status",
            params=f.shape(orderId=f.ORDER_ID),
            transform=tx.rename({"orderId": "order_id"}),
        ),
        "is_processing": ActionDefinition(command="is_processing", description="Check if operations pending"),
        "coupons": ActionDefinition(command="list_coupons", description="List available coupons"),
        "reseller_verification": ActionDefinition(
            command="set_reseller_contact_whois_verification_status",
            description="Set reseller WHOIS verification status",
            params=f.shape(
                contactId=f.CONTACT_ID,
                status=f.choice(["verified", "unverified"], "Verification status"),
            ),
            transform=tx.rename({"contactId": "contact_id", "status": "status"}),
        ),
    },
)
