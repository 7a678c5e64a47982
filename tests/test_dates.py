"""Tests for crumb._internal.dates: Expires formatting and parsing."""

from datetime import UTC, datetime, timedelta, timezone

from crumb._internal.dates import EPOCH, format_cookie_date, parse_cookie_date


class TestFormat:
    def test_aware_utc(self) -> None:
        dt = datetime(2012, 3, 22, 14, 53, 18, tzinfo=UTC)
        assert format_cookie_date(dt) == "Thu, 22 Mar 2012 14:53:18 GMT"

    def test_naive_taken_as_utc(self) -> None:
        assert format_cookie_date(datetime(2012, 3, 22, 14, 53, 18)) == "Thu, 22 Mar 2012 14:53:18 GMT"

    def test_other_timezone_converted(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        dt = datetime(2012, 3, 22, 16, 53, 18, tzinfo=plus_two)
        assert format_cookie_date(dt) == "Thu, 22 Mar 2012 14:53:18 GMT"

    def test_epoch(self) -> None:
        assert format_cookie_date(EPOCH) == "Thu, 01 Jan 1970 00:00:00 GMT"


class TestParse:
    def test_rfc1123(self) -> None:
        assert parse_cookie_date("Thu, 22 Mar 2012 14:53:18 GMT") == datetime(
            2012, 3, 22, 14, 53, 18, tzinfo=UTC
        )

    def test_asctime(self) -> None:
        assert parse_cookie_date("Thu Mar 22 14:53:18 2012") == datetime(2012, 3, 22, 14, 53, 18, tzinfo=UTC)

    def test_result_is_aware(self) -> None:
        dt = parse_cookie_date("Thu, 22 Mar 2012 14:53:18 GMT")
        assert dt is not None
        assert dt.utcoffset() == timedelta(0)

    def test_garbage(self) -> None:
        assert parse_cookie_date("not a date") is None

    def test_empty(self) -> None:
        assert parse_cookie_date("") is None
