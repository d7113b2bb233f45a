"""Built-in generate_domain_ideas tool — keyword combinations checked in bulk.

Candidates come from four patterns (exact, hyphenated, prefix, suffix).
Exact matches are always checked; the remaining capacity is filled with
a shuffled sample of the other patterns.  Availability is checked with
the ``search`` command, one call per batch of ``BATCH_LIMIT`` names.
"""

from __future__ import annotations

import random
import re
from typing import Any, Callable

from contracts.tool_sdk import BaseTool, ToolContext, ToolDefinition, ToolOutput

from registrar import fields as f
from registrar.constants import BATCH_LIMIT
from registrar.normalize import normalize
from registrar.transforms import indexed

PATTERNS = ("exact", "hyphenated", "prefix", "suffix")
DEFAULT_TLDS = ["com", "io", "co", "app", "dev", "ai"]
PREFIXES = ["get", "try", "use", "go", "my", "the", "hey", "meet"]
SUFFIXES = ["app", "hq", "io", "ai", "hub", "lab", "dev", "now"]
MAX_LABEL = 20
UNPRICED = 999.0


# ── Candidate generation ─────────────────────────────────────────────


def clean_keywords(keywords: list[str]) -> list[str]:
    """Lower-case, strip to ``[a-z0-9]``, drop anything shorter than two characters."""
    cleaned = (re.sub(r"[^a-z0-9]", "", k.lower()) for k in keywords)
    return [k for k in cleaned if len(k) >= 2]


def generate_exact(keywords: list[str], tlds: list[str]) -> list[str]:
    return [f"{k}.{tld}" for k in clean_keywords(keywords) for tld in tlds]


def generate_hyphenated(keywords: list[str], tlds: list[str]) -> list[str]:
    cleaned = clean_keywords(keywords)
    return [
        f"{first}-{second}.{tld}"
        for first in cleaned
        for second in cleaned
        if first != second
        for tld in tlds
    ]


def generate_prefix(keywords: list[str], tlds: list[str]) -> list[str]:
    labels = [f"{p}-{k}" for k in clean_keywords(keywords) for p in PREFIXES]
    return [f"{label}.{tld}" for label in labels if len(label) <= MAX_LABEL for tld in tlds]


def generate_suffix(keywords: list[str], tlds: list[str]) -> list[str]:
    labels = [f"{k}-{s}" for k in clean_keywords(keywords) for s in SUFFIXES]
    return [f"{label}.{tld}" for label in labels if len(label) <= MAX_LABEL for tld in tlds]


GENERATORS: dict[str, Callable[[list[str], list[str]], list[str]]] = {
    "exact": generate_exact,
    "hyphenated": generate_hyphenated,
    "prefix": generate_prefix,
    "suffix": generate_suffix,
}


def select_candidates(
    keywords: list[str],
    tlds: list[str],
    patterns: list[str],
    max_to_check: int,
    rng: random.Random,
) -> list[str]:
    """Exact matches first, then a shuffled sample of the rest up to *max_to_check*."""
    exact = generate_exact(keywords, tlds) if "exact" in patterns else []
    others: dict[str, None] = {}
    for pattern in patterns:
        if pattern == "exact":
            continue
        for domain in GENERATORS[pattern](keywords, tlds):
            others.setdefault(domain, None)

    pool = list(others)
    rng.shuffle(pool)
    return exact + pool[: max(0, max_to_check - len(exact))]


def price_value(price: Any) -> float:
    """Numeric part of a registrar price string; unpriced names sort last."""
    digits = re.sub(r"[^0-9.]", "", str(price)) if price is not None else ""
    try:
        return float(digits)
    except ValueError:
        return UNPRICED


def format_report(available: list[dict[str, Any]], checked: int) -> str:
    if not available:
        return f"No available domains found (checked {checked} domains)"
    lines = [f"{d['domain']} {d.get('price') or ''}".rstrip() for d in available]
    return f"Found {len(available)} available domains (checked {checked}):\n\n" + "\n".join(lines)


# ── Tool ─────────────────────────────────────────────────────────────


class DomainIdeasTool(BaseTool):
    """Generate names from keywords and return only the available ones, cheapest first."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="generate_domain_ideas",
            description=(
                "Generate domain name ideas from keywords and automatically check availability. "
                f"Returns ONLY available domains with prices. One API call checks up to {BATCH_LIMIT} domains."
            ),
            input_schema=f.shape(
                keywords=f.array(
                    f.string(),
                    'Core keywords extracted from product/tool description (e.g., ["task", "flow", "automate"])',
                    min_items=1,
                    max_items=10,
                ),
                tlds=f.array(f.string(), "TLDs to check (default: com, io, co, app, dev, ai)").optional(),
                patterns=f.array(
                    f.choice(list(PATTERNS)),
                    "Generation patterns: exact, hyphenated, prefix, suffix (default: all)",
                ).optional(),
                maxToCheck=f.integer(
                    "Maximum domains to check for availability (default: 100)", minimum=10, maximum=500
                ).default(100),
            ),
        )

    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolOutput:
        tlds = list(args.get("tlds") or DEFAULT_TLDS)
        patterns = list(args.get("patterns") or PATTERNS)
        candidates = select_candidates(args["keywords"], tlds, patterns, args["maxToCheck"], self._rng)

        transport = ctx.require_transport() if candidates else None
        available: list[dict[str, Any]] = []
        for start in range(0, len(candidates), BATCH_LIMIT):
            batch = candidates[start : start + BATCH_LIMIT]
            params = {"show_price": "1", **indexed(batch, "domain")}
            normalized = normalize("search", await transport.execute("search", params))
            available.extend(
                {"domain": r["domain"], "price": r.get("price")}
                for r in normalized.get("results", [])
                if r.get("available")
            )

        available.sort(key=lambda d: price_value(d.get("price")))
        return ToolOutput(
            call_id=ctx.request_id,
            tool_name="generate_domain_ideas",
            result=format_report(available, len(candidates)),
        )
