"""Read-only audit log queries, usable without a logger instance (CLI ``logs``)."""

from __future__ import annotations

import json
from pathlib import Path

from contracts.audit import AuditEntry, AuditEvent


def query_by_request(log_path: str | Path, request_id: str) -> list[AuditEntry]:
    """Return all audit entries for a given request_id."""
    return [e for e in read_all(log_path) if e.request_id == request_id]


def query_by_event(log_path: str | Path, event: AuditEvent, limit: int = 100) -> list[AuditEntry]:
    """Return the most recent *limit* entries of one event type."""
    matches = [e for e in read_all(log_path) if e.event == event]
    return matches[-limit:]


def query_by_tool(log_path: str | Path, tool: str, limit: int = 100) -> list[AuditEntry]:
    """Return the most recent *limit* entries recorded for *tool*."""
    matches = [e for e in read_all(log_path) if e.tool == tool]
    return matches[-limit:]


def tail(log_path: str | Path, n: int = 20) -> list[AuditEntry]:
    """Return the last N entries from the audit log."""
    return read_all(log_path)[-n:]


def read_all(log_path: str | Path) -> list[AuditEntry]:
    p = Path(log_path)
    if not p.exists():
        return []
    entries: list[AuditEntry] = []
    with p.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            entries.append(AuditEntry(**json.loads(line)))
    return entries
