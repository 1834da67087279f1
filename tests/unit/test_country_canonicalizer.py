"""Unit tests for country alias canonicalization."""

from __future__ import annotations

import pytest

from src.utils.country_canonicalizer import canonicalize_country, country_key


class TestCanonicalizeCountry:
    @pytest.mark.parametrize(
        "raw",
        ["UAE", "uae", "U.A.E.", "u.a.e.", "U A E", "  u   a  e  "],
    )
    def test_uae_aliases(self, raw: str) -> None:
        assert canonicalize_country(raw) == "United Arab Emirates"

    def test_palestine(self) -> None:
        assert canonicalize_country("Palestine") == "State of Palestine"

    def test_kurdistan_maps_to_iraq(self) -> None:
        assert canonicalize_country("Kurdistan") == "Iraq"

    def test_unknown_returns_trimmed_original(self) -> None:
        assert canonicalize_country("  Germany ") == "Germany"

    def test_unknown_keeps_original_case(self) -> None:
        assert canonicalize_country("fRANCE") == "fRANCE"

    @pytest.mark.parametrize("raw", ["", None])
    def test_empty_input(self, raw: str | None) -> None:
        assert canonicalize_country(raw) == ""


class TestCountryKey:
    def test_strips_periods_and_collapses_whitespace(self) -> None:
        assert country_key("  U.S.   A. ") == "us a"
