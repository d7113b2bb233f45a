"""Canned MCP prompts for common registrar workflows."""

from __future__ import annotations

from dataclasses import dataclass, field

from contracts.errors import MissingParamError


@dataclass(frozen=True)
class PromptArgument:
    name: str
    description: str
    required: bool = True


@dataclass(frozen=True)
class PromptSpec:
    name: str
    description: str
    template: str
    arguments: list[PromptArgument] = field(default_factory=list)

    def render(self, arguments: dict[str, str] | None = None) -> str:
        values = dict(arguments or {})
        for arg in self.arguments:
            if arg.required and not values.get(arg.name):
                raise MissingParamError(arg.name, action=self.name)
        return self.template.format(**values)


DOMAIN_AUDIT = PromptSpec(
    name="domain-audit",
    description="Audit all domains for expiration, DNS, and security settings",
    template="""Please audit my domain portfolio:

1. First, read the domains://list resource to get all my domains
2. For each domain, check:
   - Expiration date (flag if < 30 days)
   - Lock status (flag if unlocked)
   - Auto-renewal setting
   - DNS configuration
3. Create a summary table with status indicators
4. Recommend actions for any issues found""",
)

DNS_SETUP = PromptSpec(
    name="dns-setup",
    description="Interactive DNS configuration for a domain",
    arguments=[PromptArgument("domain", "Domain to configure DNS for")],
    template="""Help me configure DNS for {domain}:

1. First, get current DNS records using dynadot_dns with action: get
2. Ask me what I want to set up:
   - Website hosting (A/AAAA records)
   - Email (MX records)
   - Domain verification (TXT records)
   - Subdomain (CNAME records)
3. Guide me through the configuration
4. Apply changes using dynadot_dns with action: set
5. Verify the changes were applied""",
)

BULK_RENEWAL = PromptSpec(
    name="bulk-renewal",
    description="Review and manage domain renewals",
    template="""Help me manage domain renewals:

1. Read the domains://list resource
2. Group domains by expiration:
   - Expiring in 30 days (urgent)
   - Expiring in 90 days (soon)
   - Expiring in 1 year (upcoming)
3. Read account://info for current balance
4. Calculate total renewal cost for urgent domains
5. Present options:
   - Enable auto-renewal for specific domains
   - Manually renew now
   - Let domains expire""",
)

PROMPTS: dict[str, PromptSpec] = {p.name: p for p in (DOMAIN_AUDIT, DNS_SETUP, BULK_RENEWAL)}
