"""Unit tests for the transform library (structured input -> flat registrar params)."""

from __future__ import annotations

import pytest

from contracts.errors import ParamValidationError
from registrar.transforms import (
    compact,
    contact,
    dns_records,
    flag,
    flatten_map,
    indexed,
    rename,
    require_targets,
    with_dns,
    with_list,
    with_map,
)


# ── primitives ──────────────────────────────────────────────────────


class TestPrimitives:
    def test_compact_drops_none_only(self) -> None:
        assert compact({"a": None, "b": 0, "c": "", "d": False}) == {"b": 0, "c": "", "d": False}

    def test_flag(self) -> None:
        assert flag(True) == "1"
        assert flag(False) is None
        assert flag(None) is None

    def test_indexed_preserves_order(self) -> None:
        assert indexed(["ns1.x.com", "ns2.x.com"], "ns") == {"ns0": "ns1.x.com", "ns1": "ns2.x.com"}

    def test_indexed_empty(self) -> None:
        assert indexed([], "domain") == {}
        assert indexed(None, "domain") == {}

    def test_flatten_map(self) -> None:
        assert flatten_map({"b": "2", "a": "1", "skip": None}) == {"b": "2", "a": "1"}
        assert flatten_map(None) == {}


class TestRequireTargets:
    def test_returns_items(self) -> None:
        assert require_targets(["a.com"], "domains", "bulk_register") == ["a.com"]

    def test_empty_rejected(self) -> None:
        with pytest.raises(ParamValidationError, match="at least one entry for action 'bulk_register'"):
            require_targets([], "domains", "bulk_register")

    def test_over_limit_rejected(self) -> None:
        with pytest.raises(ParamValidationError, match="accepts at most 100 per call"):
            require_targets([f"d{i}.com" for i in range(101)], "domains", "search")

    def test_exact_limit_accepted(self) -> None:
        assert len(require_targets([f"d{i}.com" for i in range(100)], "domains", "search")) == 100


# ── DNS ─────────────────────────────────────────────────────────────


class TestDnsRecords:
    def test_main_and_subdomain_records(self) -> None:
        transform = with_dns({"domain": "domain"})
        params = transform("set", {
            "domain": "example.com",
            "mainRecords": [{"type": "A", "value": "192.0.2.1"}],
            "subdomainRecords": [{"subdomain": "www", "type": "CNAME", "value": "example.com"}],
        })
        assert params == {
            "domain": "example.com",
            "main_record_type0": "A",
            "main_record0": "192.0.2.1",
            "subdomain0": "www",
            "sub_record_type0": "CNAME",
            "sub_record0": "example.com",
        }

    def test_zero_ttl_omitted(self) -> None:
        params = dns_records([{"type": "A", "value": "192.0.2.1", "ttl": 0}])
        assert "main_record_ttl0" not in params

    def test_ttl_sent_when_set(self) -> None:
        params = dns_records([{"type": "A", "value": "192.0.2.1", "ttl": 300}])
        assert params["main_record_ttl0"] == 300

    def test_priority_maps_to_distance(self) -> None:
        params = dns_records(
            [{"type": "MX", "value": "mx.example.com", "priority": 10}],
            [{"subdomain": "mail", "type": "MX", "value": "mx2.example.com", "priority": 0}],
        )
        assert params["main_record_distance0"] == 10
        assert params["sub_record_distance0"] == 0

    def test_indices_follow_record_order(self) -> None:
        params = dns_records([
            {"type": "A", "value": "192.0.2.1"},
            {"type": "TXT", "value": "v=spf1 -all"},
        ])
        assert params["main_record_type0"] == "A"
        assert params["main_record_type1"] == "TXT"
        assert params["main_record1"] == "v=spf1 -all"

    def test_no_records(self) -> None:
        assert with_dns({"domain": "domain"})("set", {"domain": "example.com"}) == {"domain": "example.com"}

    def test_folder_scope(self) -> None:
        transform = with_dns({"folderId": "folder_id"})
        params = transform("set_dns2", {"folderId": "7", "mainRecords": [{"type": "A", "value": "192.0.2.9"}]})
        assert params == {"folder_id": "7", "main_record_type0": "A", "main_record0": "192.0.2.9"}


# ── factories ───────────────────────────────────────────────────────


class TestRename:
    def test_renames_and_drops_absent(self) -> None:
        transform = rename({"authCode": "auth", "domain": "domain"})
        assert transform("initiate", {"domain": "example.com", "authCode": "XYZ"}) == {
            "domain": "example.com",
            "auth": "XYZ",
        }
        assert transform("initiate", {"domain": "example.com"}) == {"domain": "example.com"}

    def test_default_fills_missing_and_empty(self) -> None:
        transform = rename({"currency": "currency"}, {"currency": "USD"})
        assert transform("renew", {}) == {"currency": "USD"}
        assert transform("renew", {"currency": ""}) == {"currency": "USD"}
        assert transform("renew", {"currency": "EUR"}) == {"currency": "EUR"}


class TestWithList:
    def test_bulk_register(self) -> None:
        transform = with_list(
            "domains",
            "domain",
            scope={"duration": "duration", "currency": "currency"},
        )
        params = transform("bulk_register", {"domains": ["a.com", "b.com"], "duration": 2})
        assert params == {"duration": 2, "domain0": "a.com", "domain1": "b.com"}

    def test_required_list_empty_rejected(self) -> None:
        transform = with_list("domains", "domain")
        with pytest.raises(ParamValidationError):
            transform("bulk_register", {"domains": []})

    def test_optional_list_may_be_absent(self) -> None:
        transform = with_list("domains", "domain", required=False, scope={"folderId": "folder_id"})
        assert transform("set_folder", {"folderId": "3"}) == {"folder_id": "3"}

    def test_extra_contributes_keys(self) -> None:
        transform = with_list("domains", "domain", extra=lambda _a, d: {"option": d.get("option")})
        params = transform("set_privacy", {"domains": ["a.com"], "option": "full"})
        assert params == {"option": "full", "domain0": "a.com"}


class TestWithMap:
    def test_flattens_alongside_scope(self) -> None:
        transform = with_map("settings", {"contactId": "contact_id"})
        params = transform("set_eu_setting", {"contactId": "9", "settings": {"country_of_citizenship": "FR"}})
        assert params == {"contact_id": "9", "country_of_citizenship": "FR"}


class TestContact:
    def test_contact_field_names(self) -> None:
        params = contact("create", {
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "phoneCc": "44",
            "phoneNum": "2071234567",
            "address1": "1 Analytical Way",
            "city": "London",
            "state": "London",
            "zipCode": "N1",
            "country": "GB",
        })
        assert params["phonecc"] == "44"
        assert params["phonenum"] == "2071234567"
        assert params["zip"] == "N1"
        assert "organization" not in params
        assert "address2" not in params
