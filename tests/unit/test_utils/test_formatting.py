"""Tests for formatting utilities."""

from datetime import datetime, timedelta, timezone

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def test_format_timestamp_recent():
    from repocleaner.utils.formatting import format_timestamp

    assert format_timestamp(NOW - timedelta(seconds=30), NOW) == "Just now"
    assert format_timestamp(NOW - timedelta(minutes=5), NOW) == "5m ago"
    assert format_timestamp(NOW - timedelta(hours=3), NOW) == "3h ago"


def test_format_timestamp_days():
    from repocleaner.utils.formatting import format_timestamp

    assert format_timestamp(NOW - timedelta(days=1), NOW) == "Yesterday"
    assert format_timestamp(NOW - timedelta(days=4), NOW) == "4d ago"


def test_format_timestamp_older():
    from repocleaner.utils.formatting import format_timestamp

    assert format_timestamp(datetime(2024, 2, 3, tzinfo=timezone.utc), NOW) == "Feb 03"
    assert format_timestamp(datetime(2022, 11, 20, tzinfo=timezone.utc), NOW) == "Nov 20, 2022"


def test_format_timestamp_future_and_naive():
    from repocleaner.utils.formatting import format_timestamp

    assert format_timestamp(NOW + timedelta(minutes=2), NOW) == "Just now"
    assert format_timestamp(datetime(2024, 6, 15, 11, 0), NOW) == "1h ago"


def test_format_count():
    from repocleaner.utils.formatting import format_count

    assert format_count(0) == "0"
    assert format_count(999) == "999"
    assert format_count(1234) == "1.2k"
    assert format_count(12_345) == "12k"
    assert format_count(1_500_000) == "1.5M"


def test_format_result_count():
    from repocleaner.utils.formatting import format_result_count

    assert format_result_count(42, 42, searching=False) == "42"
    assert format_result_count(7, 42, searching=True) == "7 of 42"
