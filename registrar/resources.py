"""Read-only MCP resources backed by the registrar's list commands."""

from __future__ import annotations

import json
from dataclasses import dataclass

from contracts.transport import Transport

from registrar.normalize import normalize

JSON_MIME = "application/json"


@dataclass(frozen=True)
class ResourceSpec:
    uri: str
    name: str
    description: str
    command: str


RESOURCES: list[ResourceSpec] = [
    ResourceSpec("account://info", "Account Information",
                 "Current Dynadot account info: balance, email, limits", "account_info"),
    ResourceSpec("domains://list", "My Domains",
                 "All domains in your Dynadot account with expiry dates", "list_domain"),
    ResourceSpec("contacts://list", "My Contacts",
                 "All WHOIS contacts in your Dynadot account", "contact_list"),
    ResourceSpec("folders://list", "My Folders",
                 "All folders in your Dynadot account", "folder_list"),
]

_BY_URI = {r.uri: r for r in RESOURCES}


def get_resource(uri: str) -> ResourceSpec:
    """Return the resource for *uri* or raise ``KeyError``."""
    try:
        return _BY_URI[str(uri).rstrip("/")]
    except KeyError:
        raise KeyError(f"Unknown resource: {uri}") from None


async def read_resource(uri: str, transport: Transport) -> str:
    """Fetch *uri* and return the normalized response as JSON text."""
    spec = get_resource(uri)
    raw = await transport.execute(spec.command)
    return json.dumps(normalize(spec.command, raw), indent=2)
