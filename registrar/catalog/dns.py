"""dynadot_dns — DNS records and DNSSEC."""

from __future__ import annotations

from contracts.tool_sdk import ActionDefinition, CompositeTool

from registrar import fields as f
from registrar import transforms as tx

dns_tool = CompositeTool(
    name="dynadot_dns",
    description="DNS management: get/set DNS records, DNSSEC configuration",
    actions={
        "get": ActionDefinition(
            command="get_dns",
            description="Get current DNS records",
            params=f.shape(domain=f.DOMAIN),
        ),
        "set": ActionDefinition(
            command="set_dns2",
            description="Set DNS records",
            params=f.shape(
                domain=f.DOMAIN,
                mainRecords=f.MAIN_RECORDS,
                subdomainRecords=f.SUBDOMAIN_RECORDS,
            ),
            transform=tx.with_dns({"domain": "domain"}),
        ),
        # Same remote command with no records: the registrar replaces the zone with nothing
        "clear_dns": ActionDefinition(
            command="set_dns2",
            description="Remove all DNS records from a domain",
            params=f.shape(domain=f.DOMAIN),
        ),
        "set_dnssec": ActionDefinition(
            command="set_dnssec",
            description="Enable DNSSEC",
            params=f.shape(
                domain=f.DOMAIN,
                keyTag=f.integer("Key tag"),
                algorithm=f.integer("Algorithm"),
                digestType=f.integer("Digest type"),
                digest=f.string("DS record digest"),
            ),
            transform=tx.rename({
                "domain": "domain",
                "keyTag": "key_tag",
                "algorithm": "algorithm",
                "digestType": "digest_type",
                "digest": "digest",
            }),
        ),
        "get_dnssec": ActionDefinition(
            command="get_dnssec",
            description="Get DNSSEC settings",
            params=f.shape(domain=f.DOMAIN),
        ),
        "clear_dnssec": ActionDefinition(
            command="clear_dnssec",
            description="Remove DNSSEC",
            params=f.shape(domain=f.DOMAIN),
        ),
    },
)
