"""Tests for keyword, URL and weight sanitization."""

import pytest

from random_redirect.core.exceptions import EmptyListError, InvalidKeywordError
from random_redirect.core.types import RedirectEntry, RedirectList
from random_redirect.core.validators import is_valid_url, parse_weight
from random_redirect.services.sanitizer import (
    build_list,
    sanitize_keyword,
    sanitize_list,
    sanitize_urls,
    sanitize_weights,
)


class TestSanitizeKeyword:
    """Test keyword normalization."""

    def test_strips_and_collapses_slashes(self):
        assert sanitize_keyword("//foo//bar/") == "foo/bar"
        assert sanitize_keyword("a///b////c") == "a/b/c"

    def test_trims_whitespace(self):
        assert sanitize_keyword("  promo \n") == "promo"
        assert sanitize_keyword(" /promo/ ") == "promo"

    def test_accepts_allowed_characters(self):
        assert sanitize_keyword("Summer_Sale-2024/eu") == "Summer_Sale-2024/eu"

    @pytest.mark.parametrize("raw", [
        "bad keyword!",
        "foo bar",
        "émoji",
        "a.b",
        "",
        "   ",
        "///",
        None,
        42,
    ])
    def test_rejects_invalid(self, raw):
        with pytest.raises(InvalidKeywordError):
            sanitize_keyword(raw)

    def test_is_idempotent(self):
        once = sanitize_keyword("//foo//bar/")
        assert sanitize_keyword(once) == once


class TestURLValidation:
    """Test URL validation helper."""

    def test_valid_urls(self):
        valid_urls = [
            "http://example.com",
            "https://www.example.com/path/to/page",
            "http://subdomain.example.com:8080/path?query=value#frag",
            "http://localhost:8000/landing",
            "ftp://files.example.com/pub",
        ]
        for url in valid_urls:
            assert is_valid_url(url), f"Should be valid: {url}"

    def test_invalid_urls(self):
        invalid_urls = [
            "not-a-url",
            "example.com",  # Missing scheme
            "//example.com",  # Scheme-relative
            "",
            "http://",  # Missing host
            "mailto:someone@example.com",  # No authority
            "javascript:alert(1)",
            "https://example.com/with space",
            "http://example.com:99999",  # Port out of range
            None,
        ]
        for url in invalid_urls:
            assert not is_valid_url(url), f"Should be invalid: {url}"

    def test_length_limit(self):
        url = "https://example.com/" + "a" * 100
        assert is_valid_url(url)
        assert not is_valid_url(url, max_length=50)


class TestSanitizeUrls:
    """Test URL list sanitization."""

    def test_drops_empty_and_invalid(self):
        raw = ["https://a.com", "", "not-a-url", "http://b.com"]
        assert sanitize_urls(raw) == ["https://a.com", "http://b.com"]

    def test_trims_entries(self):
        assert sanitize_urls(["  https://a.com  "]) == ["https://a.com"]

    def test_keeps_order_and_duplicates(self):
        raw = ["https://b.com", "https://a.com", "https://b.com"]
        assert sanitize_urls(raw) == raw

    def test_ignores_non_string_entries(self):
        assert sanitize_urls([None, 3, "https://a.com"]) == ["https://a.com"]

    def test_non_list_input(self):
        assert sanitize_urls(None) == []
        assert sanitize_urls("https://a.com") == []


class TestSanitizeWeights:
    """Test weight parsing and length fitting."""

    def test_invalid_and_empty_become_zero(self):
        assert sanitize_weights(["50", "", "abc"], target_length=3) == [50.0, 0.0, 0.0]

    def test_negatives_floored(self):
        assert sanitize_weights(["-5", -1, "10"], target_length=3) == [0.0, 0.0, 10.0]

    def test_pads_short_lists(self):
        assert sanitize_weights(["25"], target_length=3) == [25.0, 0.0, 0.0]
        assert sanitize_weights([], target_length=2) == [0.0, 0.0]
        assert sanitize_weights(None, target_length=2) == [0.0, 0.0]

    def test_truncates_long_lists(self):
        assert sanitize_weights(["1", "2", "3"], target_length=2) == [1.0, 2.0]

    def test_accepts_numbers(self):
        assert sanitize_weights([12.5, 3], target_length=2) == [12.5, 3.0]

    def test_parse_weight_edge_cases(self):
        assert parse_weight(" 7.5 ") == 7.5
        assert parse_weight("1e2") == 100.0
        assert parse_weight("nan") == 0.0
        assert parse_weight("inf") == 0.0
        assert parse_weight(True) == 0.0
        assert parse_weight(None) == 0.0
        assert parse_weight([1]) == 0.0


class TestBuildList:
    """Test combining sanitized URLs and weights."""

    def test_builds_entries(self):
        redirect_list = build_list(
            ["https://a.com", "bogus", "https://b.com"],
            ["70", "30"],
            enabled=False,
        )
        assert redirect_list.enabled is False
        # Weights are matched to the surviving URLs by position
        assert redirect_list.entries == (
            RedirectEntry("https://a.com", 70.0),
            RedirectEntry("https://b.com", 30.0),
        )
        assert redirect_list.target_url == "https://a.com"

    def test_weights_match_url_count(self):
        redirect_list = build_list(["https://a.com", "https://b.com", "https://c.com"], ["10"])
        assert redirect_list.weights == [10.0, 0.0, 0.0]

    def test_empty_list_rejected(self):
        with pytest.raises(EmptyListError) as exc_info:
            build_list(["", "nope"], ["100"], keyword="promo")
        assert exc_info.value.keyword == "promo"

    def test_sanitizing_sanitized_list_is_noop(self):
        redirect_list = build_list(
            [" https://a.com ", "", "https://b.com", "x"],
            ["-3", "40", "abc", "9"],
        )
        assert sanitize_list(redirect_list) == redirect_list

    def test_redirect_list_requires_entries(self):
        with pytest.raises(ValueError):
            RedirectList(enabled=True, entries=())

    def test_sanitize_list_keeps_configured_length_limit(self):
        long_url = "https://example.com/" + "a" * 3000
        redirect_list = build_list([long_url], ["1"], max_length=4096)

        assert sanitize_list(redirect_list, max_length=4096) == redirect_list
        with pytest.raises(EmptyListError):
            sanitize_list(redirect_list)
