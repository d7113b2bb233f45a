"""Unit tests for registrar URL construction."""

from __future__ import annotations

import pytest

from registrar.constants import DYNADOT_URLS, REFERRAL_PARAM, build_dynadot_url


class TestBuildDynadotUrl:
    def test_home(self) -> None:
        assert build_dynadot_url() == f"https://www.dynadot.com/?{REFERRAL_PARAM}"
        assert build_dynadot_url("/") == f"https://www.dynadot.com/?{REFERRAL_PARAM}"

    def test_path_normalised(self) -> None:
        assert build_dynadot_url("domain//search.html/") == (
            f"https://www.dynadot.com/domain/search.html?{REFERRAL_PARAM}"
        )

    def test_existing_query(self) -> None:
        assert build_dynadot_url("/search?q=x") == f"https://www.dynadot.com/search?q=x&{REFERRAL_PARAM}"

    def test_absolute_url_rejected(self) -> None:
        with pytest.raises(ValueError):
            build_dynadot_url("https://evil.example.com/")

    def test_named_urls_carry_referral(self) -> None:
        assert all(url.endswith(REFERRAL_PARAM) for url in DYNADOT_URLS.values())
        assert set(DYNADOT_URLS) == {"home", "api_key", "api_commands", "api_help", "domain_search", "pricing"}
