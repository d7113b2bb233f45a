"""Registrar URLs used in tool descriptions and help output."""

from __future__ import annotations

import re

DYNADOT_DOMAIN = "https://www.dynadot.com"
REFERRAL_PARAM = "s9F6L9F7U8Q9U8Z8v"
GITHUB_URL = "https://github.com/joachimBrindeau/domain-mcp"

# Remote limit on indexed targets per search / bulk call
BATCH_LIMIT = 100

EXAMPLE_CONFIG = {
    "mcpServers": {
        "domain-mcp": {
            "command": "domain-mcp",
            "args": ["mcp"],
            "env": {"DYNADOT_API_KEY": "your-api-key-here"},
        }
    }
}


def build_dynadot_url(path: str = "") -> str:
    """Return a registrar URL for *path* carrying the referral parameter."""
    if path.startswith(("http://", "https://")):
        raise ValueError("build_dynadot_url expects a path, not an absolute URL")

    clean = re.sub(r"/+", "/", f"/{path.strip()}").rstrip("/")
    if not clean:
        return f"{DYNADOT_DOMAIN}/?{REFERRAL_PARAM}"

    separator = "&" if "?" in clean else "?"
    return f"{DYNADOT_DOMAIN}{clean}{separator}{REFERRAL_PARAM}"


DYNADOT_URLS = {
    "home": build_dynadot_url(),
    "api_key": build_dynadot_url("/account/domain/setting/api.html"),
    "api_commands": build_dynadot_url("/domain/api-commands"),
    "api_help": build_dynadot_url("/community/help/api"),
    "domain_search": build_dynadot_url("/domain/search.html"),
    "pricing": build_dynadot_url("/domain/pricing"),
}
