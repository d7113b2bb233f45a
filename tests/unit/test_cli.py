"""Unit tests for the domain-mcp CLI."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from cli.domain_mcp import main
from contracts.audit import AuditEntry, AuditEvent
from registrar.audit.logger import JsonlAuditLogger


# ── helpers ─────────────────────────────────────────────────────────


def _config(tmp_path: Path) -> Path:
    p = tmp_path / "domain-mcp.yaml"
    p.write_text(f"audit:\n  path: {tmp_path / 'audit.jsonl'}\n")
    return p


class _Terminal(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestValidate:
    def test_reports_catalogue(self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
                               monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DYNADOT_API_KEY", raising=False)
        main(["validate", str(_config(tmp_path))])
        out = capsys.readouterr().out
        assert "Config OK: domain-mcp" in out
        assert "14 (10 composite, 108 actions, 107 registrar commands)" in out
        assert "Warning: no API key" in out

    def test_missing_file_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["validate", str(tmp_path / "nope.yaml")])
        assert exc_info.value.code == 1


class TestTools:
    def test_list_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["tools", "--json"])
        defs = json.loads(capsys.readouterr().out)
        assert len(defs) == 14

    def test_actions_of_tool(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["tools", "dynadot_dns", "--json"])
        rows = json.loads(capsys.readouterr().out)
        assert {r["name"] for r in rows} >= {"get", "set", "clear_dns"}

    def test_unknown_tool_exits(self) -> None:
        with pytest.raises(SystemExit):
            main(["tools", "dynadot_nope"])


class TestCall:
    def test_help_without_credentials(self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
                                      monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DYNADOT_API_KEY", raising=False)
        main(["call", "dynadot_help", "--args", '{"query": "examples"}', "--config", str(_config(tmp_path))])
        assert json.loads(capsys.readouterr().out)["success"] is True

    def test_failure_exits_nonzero(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["call", "dynadot_domain", "locks", "--config", str(_config(tmp_path))])
        assert exc_info.value.code == 1
        assert json.loads(capsys.readouterr().out)["error"]["kind"] == "UnknownAction"

    def test_bad_json_exits(self) -> None:
        with pytest.raises(SystemExit):
            main(["call", "dynadot_help", "--args", "{not json"])


class TestMcp:
    def test_refuses_interactive_terminal(self, capsys: pytest.CaptureFixture[str],
                                          monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", _Terminal())
        with pytest.raises(SystemExit) as exc_info:
            main(["mcp"])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "not an interactive tool" in err
        assert '"mcpServers"' in err


class TestLogs:
    def test_filter_by_request(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        log_file = tmp_path / "audit.jsonl"
        logger = JsonlAuditLogger(log_file)
        logger.log(AuditEntry(request_id="r1", event=AuditEvent.TOOL_CALL, tool="dynadot_dns", action="get"))
        logger.log(AuditEntry(request_id="r2", event=AuditEvent.TOOL_CALL, tool="dynadot_dns", action="set"))

        main(["logs", str(log_file), "-r", "r1", "--json"])
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["action"] == "get"

    def test_unknown_event_exits(self, tmp_path: Path) -> None:
        log_file = tmp_path / "audit.jsonl"
        JsonlAuditLogger(log_file).log(AuditEntry(request_id="r1", event=AuditEvent.TOOL_CALL))
        with pytest.raises(SystemExit):
            main(["logs", str(log_file), "-e", "policy.block"])

    def test_missing_log_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            main(["logs", str(tmp_path / "none.jsonl")])
