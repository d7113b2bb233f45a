"""Unit tests for the structured error taxonomy."""

from __future__ import annotations

from contracts.errors import (
    DOCS_BASE,
    ApiError,
    MissingParamError,
    UnknownActionError,
    UnknownToolError,
    docs_url,
    find_similar,
)


class TestFindSimilar:
    def test_prefix_match(self) -> None:
        assert find_similar("locks", ["lock", "unlock", "list"]) == "lock"

    def test_reverse_prefix_match(self) -> None:
        assert find_similar("gogo", ["list", "go"]) == "go"

    def test_case_insensitive(self) -> None:
        assert find_similar("REG", ["list", "register"]) == "register"

    def test_first_candidate_wins(self) -> None:
        assert find_similar("set", ["set_ns", "set_note"]) == "set_ns"

    def test_no_match(self) -> None:
        assert find_similar("xyz", ["lock", "unlock"]) is None


class TestDocsUrl:
    def test_anchor_strips_prefix(self) -> None:
        assert docs_url("dynadot_dns") == f"{DOCS_BASE}#dns"

    def test_empty_tool(self) -> None:
        assert docs_url("") == DOCS_BASE


class TestPayloads:
    def test_unknown_action_payload(self) -> None:
        err = UnknownActionError("locks", ["lock", "unlock", "list"], tool="dynadot_domain")
        assert err.to_payload().as_dict() == {
            "success": False,
            "error": {
                "kind": "UnknownAction",
                "message": "Unknown action: locks. Valid actions: lock, unlock, list",
                "suggestions": ["Did you mean 'lock'?"],
                "validActions": ["lock", "unlock", "list"],
                "docsUrl": f"{DOCS_BASE}#domain",
            },
        }

    def test_unknown_action_without_suggestion(self) -> None:
        payload = UnknownActionError("xyz", ["lock"], tool="dynadot_domain").to_payload().as_dict()
        assert "suggestions" not in payload["error"]
        assert payload["error"]["validActions"] == ["lock"]

    def test_unknown_tool_lists_available(self) -> None:
        err = UnknownToolError("dynadot_nope", ["dynadot_domain", "dynadot_dns"])
        assert err.message == "Unknown tool: dynadot_nope. Available tools: dynadot_domain, dynadot_dns"
        assert err.to_payload().as_dict()["error"]["kind"] == "UnknownTool"

    def test_unknown_tool_links_docs_root(self) -> None:
        payload = UnknownToolError("not_a_tool", ["dynadot_domain"]).to_payload().as_dict()
        assert payload["error"]["docsUrl"] == DOCS_BASE

    def test_missing_param_message(self) -> None:
        err = MissingParamError("domain", action="info", tool="dynadot_domain")
        assert err.message == "Missing required parameter 'domain' for action 'info'"
        assert err.to_payload().as_dict()["error"]["kind"] == "MissingParam"

    def test_api_error_keeps_remote_text(self) -> None:
        err = ApiError("Domain not available", command="register", tool="dynadot_domain")
        payload = err.to_payload().as_dict()
        assert payload["error"]["message"] == "Domain not available"
        assert payload["error"]["kind"] == "ApiError"
        assert "validActions" not in payload["error"]
