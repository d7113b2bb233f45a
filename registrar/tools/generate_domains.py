"""Built-in generate_domains tool — hands name generation back to the agent."""

from __future__ import annotations

from typing import Any

from contracts.tool_sdk import BaseTool, ToolContext, ToolDefinition, ToolOutput

from registrar import fields as f

SYSTEM_PROMPT = """You are a creative domain name generator. Generate short, memorable domain names.

Rules:
- Keep names SHORT (under maxLength characters before TLD)
- Be CREATIVE: use wordplay, portmanteaus, invented words
- Make them MEMORABLE and easy to spell
- Avoid hyphens and numbers
- Return ONLY the domain names, one per line
- No explanations, just the domains"""


def build_agent_prompt(prompt: str, count: int, tlds: list[str], max_length: int) -> str:
    return (
        f"{SYSTEM_PROMPT}\n\n"
        f'Generate {count} creative domain names for: "{prompt}"\n'
        f"TLDs to use: {', '.join(tlds)}\n"
        f"Max length before TLD: {max_length} characters\n\n"
        "Output format: one domain per line (e.g., taskly.com)"
    )


class GenerateDomainsTool(BaseTool):
    """No registrar call; returns instructions for out-of-band generation."""

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="generate_domains",
            description=(
                "Generate creative domain name suggestions. Returns a prompt for generating "
                "domains; check availability afterwards with check_domain."
            ),
            input_schema=f.shape(
                prompt=f.string('Description of what the domains should convey (e.g., "task breakdown tool")'),
                count=f.integer("Number of suggestions to generate", minimum=1).default(20),
                tlds=f.array(f.string(), "Preferred TLDs").default(["com"]),
                maxLength=f.integer("Maximum domain length", minimum=1).default(15),
            ),
        )

    async def run(self, ctx: ToolContext, args: dict[str, Any]) -> ToolOutput:
        agent_prompt = build_agent_prompt(
            args["prompt"], args["count"], list(args["tlds"]), args["maxLength"]
        )
        return ToolOutput(
            call_id=ctx.request_id,
            tool_name="generate_domains",
            result={
                "instruction": "Launch parallel agents to generate domains. Each agent should use this prompt:",
                "agentPrompt": agent_prompt,
                "postProcess": "Collect all suggestions, deduplicate, write to CSV with columns: domain,available",
            },
        )
