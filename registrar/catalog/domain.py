"""dynadot_domain — core domain lifecycle."""

from __future__ import annotations

from typing import Any

from contracts.tool_sdk import ActionDefinition, CompositeTool, FlatParams

from registrar import fields as f
from registrar import transforms as tx
from registrar.constants import DYNADOT_URLS


def _search(action: str, data: dict[str, Any]) -> FlatParams:
    # Accepts a single ``domain`` or a ``domains`` list
    if data.get("domain"):
        targets = [data["domain"]]
    else:
        targets = tx.require_targets(data.get("domains"), "domains", action)
    params = tx.indexed(targets, "domain")
    params.update(tx.compact({"show_price": tx.flag(data.get("showPrice")), "currency": data.get("currency")}))
    return params


_renew_scalars = tx.rename(
    {"domain": "domain", "duration": "duration", "currency": "currency"},
    defaults={"currency": "USD"},
)


def _renew(action: str, data: dict[str, Any]) -> FlatParams:
    params = _renew_scalars(action, data)
    params.update(tx.compact({"price_check": tx.flag(data.get("priceCheck"))}))
    return params


domain_tool = CompositeTool(
    name="dynadot_domain",
    description=(
        "Core domain operations: list, search, register, renew, delete, info, lock, pricing. "
        f"Search domains: {DYNADOT_URLS['domain_search']}"
    ),
    actions={
        "list": ActionDefinition(
            command="list_domain",
            description="List all domains in your account",
        ),
        "info": ActionDefinition(
            command="domain_info",
            description="Get detailed info about a domain",
            params=f.shape(domain=f.DOMAIN),
        ),
        "search": ActionDefinition(
            command="search",
            description=(
                "Check domain availability (with optional pricing). "
                f"Search manually: {DYNADOT_URLS['domain_search']}"
            ),
            params=f.shape(
                domain=f.string("Single domain name (e.g., example.com)").optional(),
                domains=f.DOMAINS.optional(),
                showPrice=f.boolean("Include pricing").optional(),
                currency=f.CURRENCY.optional(),
            ),
            transform=_search,
        ),
        "register": ActionDefinition(
            command="register",
            description=f"Register a new domain. View pricing: {DYNADOT_URLS['pricing']}",
            params=f.shape(domain=f.DOMAIN, duration=f.DURATION, currency=f.CURRENCY.optional()),
        ),
        "bulk_register": ActionDefinition(
            command="bulk_register",
            description=f"Register multiple domains at once. View pricing: {DYNADOT_URLS['pricing']}",
            params=f.shape(domains=f.DOMAINS, duration=f.DURATION, currency=f.CURRENCY.optional()),
            transform=tx.with_list(
                "domains",
                "domain",
                extra=tx.rename({"duration": "duration", "currency": "currency"}, defaults={"currency": "USD"}),
            ),
        ),
        "renew": ActionDefinition(
            command="renew",
            description="Renew a domain or check renewal price",
            params=f.shape(
                domain=f.DOMAIN,
                duration=f.DURATION,
                currency=f.CURRENCY.optional(),
                priceCheck=f.boolean("Only check price").optional(),
            ),
            transform=_renew,
        ),
        "delete": ActionDefinition(
            command="delete",
            description="Delete a domain",
            params=f.shape(domain=f.DOMAIN),
        ),
        "restore": ActionDefinition(
            command="restore",
            description="Restore a deleted/expired domain",
            params=f.shape(domain=f.DOMAIN),
        ),
        "lock": ActionDefinition(
            command="lock_domain",
            description="Lock or unlock a domain",
            params=f.shape(domain=f.DOMAIN, lock=f.LOCK_ACTION),
        ),
        "tld_price": ActionDefinition(
            command="tld_price",
            description="Get TLD pricing",
            params=f.shape(tld=f.string("TLD (e.g., com, net)"), currency=f.CURRENCY.optional()),
        ),
        "push": ActionDefinition(
            command="push",
            description="Push domain to another Dynadot account",
            params=f.shape(domain=f.DOMAIN, username=f.string("Target username")),
        ),
    },
)
