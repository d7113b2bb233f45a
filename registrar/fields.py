"""Declarative field vocabulary for action input shapes.

An action's shape is a plain JSON Schema object assembled from the
``Field`` constants below.  The same dict is read by
``registrar.validation`` (input checking) and ``registrar.discovery``
(tool schemas and help text); neither mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from registrar.constants import BATCH_LIMIT


@dataclass(frozen=True)
class Field:
    """One named input field: its JSON Schema plus whether it is required."""

    schema: dict[str, Any]
    required: bool = True

    def optional(self) -> Field:
        return replace(self, required=False)

    def describe(self, description: str) -> Field:
        return replace(self, schema={**self.schema, "description": description})

    def default(self, value: Any) -> Field:
        return replace(self, schema={**self.schema, "default": value}, required=False)


def shape(**fields: Field) -> dict[str, Any]:
    """Build a JSON Schema object from keyword ``Field`` arguments."""
    schema: dict[str, Any] = {
        "type": "object",
        "properties": {name: dict(f.schema) for name, f in fields.items()},
    }
    required = [name for name, f in fields.items() if f.required]
    if required:
        schema["required"] = required
    return schema


# ── Primitive builders ───────────────────────────────────────────────


def string(description: str = "") -> Field:
    return Field(_with_description({"type": "string"}, description))


def integer(description: str = "", *, minimum: int | None = None, maximum: int | None = None) -> Field:
    schema: dict[str, Any] = {"type": "integer"}
    if minimum is not None:
        schema["minimum"] = minimum
    if maximum is not None:
        schema["maximum"] = maximum
    return Field(_with_description(schema, description))


def number(description: str = "") -> Field:
    return Field(_with_description({"type": "number"}, description))


def boolean(description: str = "") -> Field:
    return Field(_with_description({"type": "boolean"}, description))


def choice(values: list[str], description: str = "") -> Field:
    return Field(_with_description({"type": "string", "enum": list(values)}, description))


def array(items: Field | dict[str, Any], description: str = "", *, min_items: int | None = None,
          max_items: int | None = None) -> Field:
    item_schema = items.schema if isinstance(items, Field) else items
    schema: dict[str, Any] = {"type": "array", "items": dict(item_schema)}
    if min_items is not None:
        schema["minItems"] = min_items
    if max_items is not None:
        schema["maxItems"] = max_items
    return Field(_with_description(schema, description))


def string_map(description: str = "") -> Field:
    """Free-form ``{name: value}`` map flattened key-by-key into the request."""
    schema = {"type": "object", "additionalProperties": {"type": "string"}}
    return Field(_with_description(schema, description))


def _with_description(schema: dict[str, Any], description: str) -> dict[str, Any]:
    if description:
        schema["description"] = description
    return schema


# ── Shared vocabulary ───────────────────────────────────────────────

DOMAIN = string("Domain name (e.g., example.com)")
DOMAINS = array(string(), "List of domain names", min_items=1, max_items=BATCH_LIMIT)
DURATION = integer("Duration in years (1-10)", minimum=1, maximum=10)
CURRENCY = string("Currency code (default: USD)")
CONTACT_ID = string("Contact ID")
FOLDER_ID = string("Folder ID")
AUCTION_ID = string("Auction ID")
ORDER_ID = string("Order ID")
NAMESERVERS = array(string(), "List of nameservers", min_items=1)
HOST = string("Nameserver hostname")
IP = string("IP address")
URL = string("URL")
EMAIL = string("Email address")
NOTE = string("Note text")
AUTH_CODE = string("Authorization code")
AMOUNT = number("Amount")
NAME = string("Name")
RENEW_OPTION = choice(["auto", "donot", "reset"], "Renewal option")
PRIVACY_OPTION = choice(["full", "partial", "off"], "Privacy level")
LOCK_ACTION = choice(["lock", "unlock"], "Lock action")
CONFIRM_ACTION = choice(["confirm", "decline"], "Confirm or decline the marketplace action")
PUSH_ACTION = choice(["accept", "decline"], "Accept or decline the push request")
SETTINGS = string_map("Setting name/value pairs sent verbatim")

DNS_RECORD = shape(
    type=string("Record type (A, AAAA, CNAME, MX, TXT)"),
    value=string("Record value"),
    ttl=integer("TTL in seconds").optional(),
    priority=integer("Priority (for MX)").optional(),
)

SUBDOMAIN_RECORD = shape(
    subdomain=string("Subdomain name"),
    type=string("Record type"),
    value=string("Record value"),
    ttl=integer("TTL in seconds").optional(),
    priority=integer("Priority (for MX)").optional(),
)

MAIN_RECORDS = array(DNS_RECORD, "Main domain records").optional()
SUBDOMAIN_RECORDS = array(SUBDOMAIN_RECORD, "Subdomain records").optional()

CONTACT_FIELDS: dict[str, Field] = {
    "name": string("Contact name"),
    "email": string("Email"),
    "phoneCc": string('Phone country code (e.g., "1" for US, "33" for France)'),
    "phoneNum": string('Phone number without country code (e.g., "5551234567")'),
    "address1": string("Address line 1"),
    "city": string("City"),
    "state": string("State/Province"),
    "zipCode": string("Postal code"),
    "country": string("Country code (2-letter)"),
    "organization": string("Organization").optional(),
    "address2": string("Address line 2").optional(),
}
