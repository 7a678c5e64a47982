"""Tests for crumb.header: Cookie request header and bulk Set-Cookie parsing."""

import logging

import pytest

from crumb.cookie import Cookie
from crumb.header import build_cookie_header, parse_cookie_header, parse_set_cookie_headers


class TestParseCookieHeader:
    def test_empty_string(self) -> None:
        assert parse_cookie_header("") == {}

    def test_single_cookie(self) -> None:
        assert parse_cookie_header("session=abc123") == {"session": "abc123"}

    def test_multiple_cookies(self) -> None:
        result = parse_cookie_header("session=abc; theme=dark; lang=en")
        assert result == {"session": "abc", "theme": "dark", "lang": "en"}

    def test_whitespace_handling(self) -> None:
        result = parse_cookie_header("  session = abc ;  theme = dark  ")
        assert result == {"session": "abc", "theme": "dark"}

    def test_value_with_equals(self) -> None:
        """Values can contain '=' (e.g. base64)."""
        assert parse_cookie_header("token=abc=def=") == {"token": "abc=def="}

    def test_no_equals_ignored(self) -> None:
        result = parse_cookie_header("session=abc; broken; theme=dark")
        assert result == {"session": "abc", "theme": "dark"}

    def test_empty_name_ignored(self) -> None:
        assert parse_cookie_header("=orphan; a=1") == {"a": "1"}

    def test_duplicate_keys_last_wins(self) -> None:
        assert parse_cookie_header("a=1; a=2") == {"a": "2"}


class TestBuildCookieHeader:
    def test_pairs_only(self) -> None:
        cookies = [Cookie.parse("a=1; Path=/; Secure"), Cookie.parse("b=2; HttpOnly")]
        assert build_cookie_header(cookies) == "a=1; b=2"

    def test_empty(self) -> None:
        assert build_cookie_header([]) == ""

    def test_round_trip_with_parse(self) -> None:
        header = build_cookie_header([Cookie.from_parts("x", "1"), Cookie.from_parts("y", "")])
        assert parse_cookie_header(header) == {"x": "1", "y": ""}


class TestParseSetCookieHeaders:
    def test_parses_all(self) -> None:
        cookies = parse_set_cookie_headers(["a=1; Secure", "b=2; Path=/"])
        assert [c.to_string() for c in cookies] == ["a=1; Secure", "b=2; Path=/"]

    def test_malformed_skipped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="crumb.header"):
            cookies = parse_set_cookie_headers(["=1", "ok=1", "noequals"])
        assert [c.name for c in cookies] == ["ok"]
        assert len(caplog.records) == 2
        assert all(r.levelno == logging.WARNING for r in caplog.records)
