"""domain-mcp CLI — validate config, inspect tools, call them, and run the servers."""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from pathlib import Path

# Ensure project root is importable when running as script
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def _load_config_or_exit(path: str | None):
    from contracts.errors import ConfigError
    from registrar.config_loader import load_config

    try:
        return load_config(path)
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except ConfigError as exc:
        print(f"Error: invalid config: {exc}", file=sys.stderr)
        sys.exit(1)


def cmd_validate(args: argparse.Namespace) -> None:
    """Validate the config file and the built-in tool catalogue."""
    config = _load_config_or_exit(args.config)

    print(f"Config OK: {config.server.name} v{config.server.version}")
    print(f"  API endpoint: {config.api.base_url}{' (sandbox)' if config.api.sandbox else ''}")
    print(f"  API key:      {'configured' if config.api.api_key else f'missing (set {config.api.api_key_env})'}")
    print(f"  Timeout:      {config.api.timeout}s, {config.api.max_retries} retries")
    print(f"  Audit path:   {config.audit.path if config.audit.enabled else '(disabled)'}")

    from registrar.registry import create_default_registry

    registry = create_default_registry()
    composite = registry.composite_tools()
    commands = {a.command for t in composite for a in t.actions.values()}
    actions = sum(len(t.actions) for t in composite)
    print(f"  Tools:        {len(registry.list_tools())} ({len(composite)} composite, {actions} actions, "
          f"{len(commands)} registrar commands)")

    if not config.api.api_key:
        print(f"  Warning: no API key; registrar calls will fail until {config.api.api_key_env} is set")


def cmd_tools(args: argparse.Namespace) -> None:
    """List tools, or the actions of one tool."""
    from contracts.errors import UnknownToolError
    from registrar.discovery import describe_fields
    from registrar.registry import create_default_registry

    registry = create_default_registry()

    if not args.tool:
        defs = registry.definitions()
        if args.json:
            print(json.dumps([d.model_dump() for d in defs], indent=2))
            return
        for d in defs:
            suffix = f"  ({len(d.actions)} actions)" if d.actions else ""
            print(f"{d.name:26s}{suffix}")
        return

    try:
        tool = registry.get_composite(args.tool)
    except UnknownToolError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        rows = [
            {"name": name, "command": a.command, "description": a.description, "params": describe_fields(a.params)}
            for name, a in tool.actions.items()
        ]
        print(json.dumps(rows, indent=2))
        return
    for name, a in tool.actions.items():
        fields = ", ".join(
            f"{row['name']}{'' if row['required'] else '?'}" for row in describe_fields(a.params)
        )
        print(f"{name:32s}{a.command:48s}{fields}")


def cmd_call(args: argparse.Namespace) -> None:
    """Invoke one tool and print the result."""
    from registrar.bootstrap import init_registrar
    from registrar.mcp_server import is_failure, render_result

    try:
        payload = json.loads(args.args) if args.args else {}
    except json.JSONDecodeError as exc:
        print(f"Error: --args is not valid JSON: {exc}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(payload, dict):
        print("Error: --args must be a JSON object", file=sys.stderr)
        sys.exit(1)
    if args.action:
        payload["action"] = args.action

    components = init_registrar(config=_load_config_or_exit(args.config))
    result = asyncio.run(components.dispatcher.call(args.tool, payload))
    print(render_result(result))
    if is_failure(result):
        sys.exit(1)


def cmd_mcp(args: argparse.Namespace) -> None:
    """Serve MCP over stdio.  Refuses to start on an interactive terminal."""
    from registrar.constants import EXAMPLE_CONFIG, GITHUB_URL

    if sys.stdin.isatty() and not args.force:
        print("domain-mcp is an MCP server, not an interactive tool.", file=sys.stderr)
        print("", file=sys.stderr)
        print("To use it, add this configuration to your MCP client:", file=sys.stderr)
        print("", file=sys.stderr)
        print(json.dumps(EXAMPLE_CONFIG, indent=2), file=sys.stderr)
        print("", file=sys.stderr)
        print("For more information, visit:", file=sys.stderr)
        print(GITHUB_URL, file=sys.stderr)
        sys.exit(1)

    from registrar.bootstrap import init_registrar
    from registrar.mcp_server import serve_stdio

    components = init_registrar(config=_load_config_or_exit(args.config))
    asyncio.run(serve_stdio(components))


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the HTTP server."""
    config = _load_config_or_exit(args.config)
    if args.config:
        os.environ["DOMAIN_MCP_CONFIG"] = args.config

    host = args.host or config.server.host
    port = args.port or config.server.port
    print(f"Starting {config.server.name} HTTP server...")
    print(f"  Host:     {host}")
    print(f"  Port:     {port}")
    print(f"  Endpoint: {config.api.base_url}")
    print()

    import uvicorn

    uvicorn.run(
        "registrar.app:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level="info",
    )


def cmd_logs(args: argparse.Namespace) -> None:
    """Query audit logs."""
    from contracts.audit import AuditEvent
    from registrar.audit.query import query_by_event, query_by_request, query_by_tool, tail

    log_path = args.log_path

    if not Path(log_path).exists():
        print(f"No audit log found at {log_path}", file=sys.stderr)
        sys.exit(1)

    if args.request_id:
        entries = query_by_request(log_path, args.request_id)
    elif args.event:
        try:
            event = AuditEvent(args.event)
        except ValueError:
            valid = ", ".join(e.value for e in AuditEvent)
            print(f"Unknown event type: {args.event}", file=sys.stderr)
            print(f"Valid events: {valid}", file=sys.stderr)
            sys.exit(1)
        entries = query_by_event(log_path, event, limit=args.limit)
    elif args.tool:
        entries = query_by_tool(log_path, args.tool, limit=args.limit)
    else:
        entries = tail(log_path, n=args.limit)

    if not entries:
        print("No matching audit entries.")
        return

    for entry in entries:
        record = json.loads(entry.model_dump_json())
        if args.json:
            print(json.dumps(record))
        else:
            ts = record["ts"][:19]
            where = f"{record['tool']}.{record['action']}" if record["action"] else record["tool"]
            rid = record["request_id"][:8]
            detail = json.dumps(record.get("detail", {}))
            print(f"{ts}  [{record['event']:11s}]  {rid:8s}  {where}  {detail}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="domain-mcp",
        description="domain-mcp — Dynadot registrar tools for MCP agents",
    )
    sub = parser.add_subparsers(dest="command")

    # validate
    p_val = sub.add_parser("validate", help="Validate domain-mcp.yaml and the tool catalogue")
    p_val.add_argument("config", nargs="?", default=None, help="Path to config")
    p_val.set_defaults(func=cmd_validate)

    # tools
    p_tools = sub.add_parser("tools", help="List tools or one tool's actions")
    p_tools.add_argument("tool", nargs="?", help="Composite tool name")
    p_tools.add_argument("--json", action="store_true", help="Output JSON")
    p_tools.set_defaults(func=cmd_tools)

    # call
    p_call = sub.add_parser("call", help="Invoke a tool once")
    p_call.add_argument("tool", help="Tool name")
    p_call.add_argument("action", nargs="?", help="Action (composite tools)")
    p_call.add_argument("--args", "-a", help="Tool input as a JSON object")
    p_call.add_argument("--config", "-c", help="Path to config")
    p_call.set_defaults(func=cmd_call)

    # mcp
    p_mcp = sub.add_parser("mcp", help="Serve MCP over stdio")
    p_mcp.add_argument("--config", "-c", help="Path to config")
    p_mcp.add_argument("--force", action="store_true", help="Start even on an interactive terminal")
    p_mcp.set_defaults(func=cmd_mcp)

    # serve
    p_serve = sub.add_parser("serve", help="Start the HTTP server")
    p_serve.add_argument("--config", "-c", help="Path to config")
    p_serve.add_argument("--host", default=None, help="Bind address")
    p_serve.add_argument("--port", type=int, default=None, help="Port")
    p_serve.add_argument("--reload", action="store_true", help="Enable auto-reload")
    p_serve.set_defaults(func=cmd_serve)

    # logs
    p_logs = sub.add_parser("logs", help="Query audit logs")
    p_logs.add_argument("log_path", help="Path to audit JSONL file")
    p_logs.add_argument("--request-id", "-r", help="Filter by request ID")
    p_logs.add_argument("--event", "-e", help="Filter by event type")
    p_logs.add_argument("--tool", "-t", help="Filter by tool name")
    p_logs.add_argument("--limit", "-n", type=int, default=20, help="Max entries")
    p_logs.add_argument("--json", action="store_true", help="Output raw JSON")
    p_logs.set_defaults(func=cmd_logs)

    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)
    args.func(args)


if __name__ == "__main__":
    main()
