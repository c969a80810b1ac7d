"""Tests for link target sanitization."""

import pytest

from mdnote.sanitize import ALLOWED_SCHEMES, SAFE_PLACEHOLDER, sanitize_url

ORIGIN = "https://notes.example"


class TestResolution:
    def test_absolute_path(self) -> None:
        assert sanitize_url("/path", ORIGIN) == "https://notes.example/path"

    def test_relative_path(self) -> None:
        assert sanitize_url("path", ORIGIN) == "https://notes.example/path"

    def test_query_only(self) -> None:
        assert sanitize_url("?q=1", ORIGIN) == "https://notes.example/?q=1"

    def test_fragment_only(self) -> None:
        assert sanitize_url("#top", ORIGIN) == "https://notes.example/#top"

    def test_protocol_relative(self) -> None:
        assert sanitize_url("//other.example/x", ORIGIN) == "https://other.example/x"

    def test_normalizes_scheme_and_host(self) -> None:
        assert sanitize_url("HTTPS://Example.COM/Path", ORIGIN) == "https://example.com/Path"

    def test_bare_host_gets_root_path(self) -> None:
        assert sanitize_url("http://example.com", ORIGIN) == "http://example.com/"

    def test_same_scheme_relative(self) -> None:
        assert sanitize_url("https:foo", ORIGIN) == "https://notes.example/foo"


class TestAllowedSchemes:
    def test_allowed_set(self) -> None:
        assert ALLOWED_SCHEMES == frozenset({"http", "https", "mailto", "tel"})

    def test_mailto(self) -> None:
        assert sanitize_url("mailto:me@notes.example", ORIGIN) == "mailto:me@notes.example"

    def test_tel(self) -> None:
        assert sanitize_url("tel:+15551234", ORIGIN) == "tel:+15551234"

    @pytest.mark.parametrize(
        "url",
        [
            "javascript:alert(1)",
            "JaVaScRiPt:alert(1)",
            " javascript:alert(1)",
            "\x01javascript:alert(1)",
            "java\tscript:alert(1)",
            "java\nscript:alert(1)",
            "data:text/html,<script>alert(1)</script>",
            "vbscript:msgbox(1)",
            "ftp://files.example/x",
            "file:///etc/passwd",
        ],
    )
    def test_rejected(self, url: str) -> None:
        assert sanitize_url(url, ORIGIN) == SAFE_PLACEHOLDER

    def test_cross_scheme_without_host(self) -> None:
        assert sanitize_url("http:foo", ORIGIN) == SAFE_PLACEHOLDER


class TestMalformed:
    @pytest.mark.parametrize(
        "url",
        [
            "http://[::1",
            "http://example.com:99999/",
            "http://example.com:port/",
        ],
    )
    def test_malformed_becomes_placeholder(self, url: str) -> None:
        assert sanitize_url(url, ORIGIN) == SAFE_PLACEHOLDER

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("DEBUG", logger="mdnote.sanitize"):
            sanitize_url("javascript:alert(1)", ORIGIN)
        assert any("javascript" in r.getMessage() for r in caplog.records)
