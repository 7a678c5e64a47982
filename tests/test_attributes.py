"""Tests for crumb.attributes: recognition and value normalization."""

import pytest

from crumb.attributes import FLAG_KINDS, AttributeKind, is_flag, normalize_value, recognize


class TestRecognize:
    @pytest.mark.parametrize(
        ("name", "kind"),
        [
            ("Expires", AttributeKind.EXPIRES),
            ("max-age", AttributeKind.MAX_AGE),
            ("MAX-AGE", AttributeKind.MAX_AGE),
            ("domain", AttributeKind.DOMAIN),
            (" Path ", AttributeKind.PATH),
            ("secure", AttributeKind.SECURE),
            ("HTTPONLY", AttributeKind.HTTPONLY),
            ("samesite", AttributeKind.SAMESITE),
        ],
    )
    def test_case_insensitive(self, name: str, kind: AttributeKind) -> None:
        assert recognize(name) is kind

    @pytest.mark.parametrize("name", ["Foo", "", "MaxAge", "Priority", "Partitioned", "name"])
    def test_unrecognized_is_none(self, name: str) -> None:
        assert recognize(name) is None

    def test_kind_passes_through(self) -> None:
        assert recognize(AttributeKind.PATH) is AttributeKind.PATH

    def test_enum_values_are_wire_names(self) -> None:
        assert [k.value for k in AttributeKind] == [
            "Expires",
            "Max-Age",
            "Domain",
            "Path",
            "Secure",
            "HttpOnly",
            "SameSite",
        ]


class TestFlags:
    def test_flag_kinds(self) -> None:
        assert frozenset({AttributeKind.SECURE, AttributeKind.HTTPONLY}) == FLAG_KINDS

    def test_is_flag(self) -> None:
        assert is_flag(AttributeKind.SECURE)
        assert not is_flag(AttributeKind.PATH)

    def test_flag_value_discarded(self) -> None:
        assert normalize_value(AttributeKind.SECURE, "yes") == ""
        assert normalize_value(AttributeKind.HTTPONLY, None) == ""


class TestNormalizeValue:
    def test_missing_value_ignored(self) -> None:
        assert normalize_value(AttributeKind.PATH, None) is None

    def test_empty_value_kept_as_empty(self) -> None:
        assert normalize_value(AttributeKind.DOMAIN, "   ") == ""

    def test_trimmed(self) -> None:
        assert normalize_value(AttributeKind.PATH, "  /app ") == "/app"

    def test_semicolon_ignored(self) -> None:
        assert normalize_value(AttributeKind.PATH, "/a;b") is None

    @pytest.mark.parametrize("raw", ["/a\r\nb", "/a\x00", "ex\x7fample.com"])
    def test_control_chars_ignored(self, raw: str) -> None:
        assert normalize_value(AttributeKind.DOMAIN, raw) is None

    @pytest.mark.parametrize(("raw", "expected"), [("3600", "3600"), ("0", "0"), ("-1", "-1")])
    def test_max_age_numeric(self, raw: str, expected: str) -> None:
        assert normalize_value(AttributeKind.MAX_AGE, raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "1.5", "+5", "10s", "-"])
    def test_max_age_non_numeric_ignored(self, raw: str) -> None:
        assert normalize_value(AttributeKind.MAX_AGE, raw) is None

    @pytest.mark.parametrize(("raw", "expected"), [("strict", "Strict"), ("LAX", "Lax"), ("None", "None")])
    def test_samesite_canonical(self, raw: str, expected: str) -> None:
        assert normalize_value(AttributeKind.SAMESITE, raw) == expected

    def test_samesite_unknown_ignored(self) -> None:
        assert normalize_value(AttributeKind.SAMESITE, "sometimes") is None

    def test_expires_valid(self) -> None:
        value = "Thu, 22 Mar 2012 14:53:18 GMT"
        assert normalize_value(AttributeKind.EXPIRES, value) == value

    def test_expires_unparseable_ignored(self) -> None:
        assert normalize_value(AttributeKind.EXPIRES, "next tuesday") is None
