from __future__ import annotations

from datetime import datetime

import pytest

from newsarchive.core.snapshot_ids import decode, encode, format_display


def test_encode_zero_pads_every_field() -> None:
    assert encode(datetime(2024, 1, 2, 3, 4, 5)) == "news-data-2024-01-02-03-04-05"


def test_encode_drops_microseconds() -> None:
    assert encode(datetime(2024, 12, 31, 23, 59, 59, 999999)) == "news-data-2024-12-31-23-59-59"


@pytest.mark.parametrize(
    "timestamp",
    [
        datetime(2024, 1, 1, 0, 0, 0),
        datetime(2024, 2, 29, 12, 30, 45),
        datetime(1999, 12, 31, 23, 59, 59),
        datetime(2030, 7, 15, 9, 5, 1),
        datetime(1, 1, 1, 0, 0, 0),
        datetime(9999, 12, 31, 23, 59, 59),
    ],
)
def test_decode_reverses_encode(timestamp: datetime) -> None:
    ident = decode(encode(timestamp))
    assert ident is not None
    assert ident.timestamp == timestamp

    from_file = decode(encode(timestamp) + ".json")
    assert from_file == ident


def test_decode_exposes_slug_filename_and_day() -> None:
    ident = decode("news-data-2024-01-15-10-30-00.json")
    assert ident is not None
    assert ident.slug == "news-data-2024-01-15-10-30-00"
    assert ident.filename == "news-data-2024-01-15-10-30-00.json"
    assert ident.day.isoformat() == "2024-01-15"


@pytest.mark.parametrize(
    "name",
    [
        "",
        "not-a-snapshot.txt",
        "news-data.json",
        "news-data-2024-01-15.json",
        "news-data-2024-01-15-10-30.json",
        "news-data-2024-1-15-10-30-00.json",
        "news-data-2024-01-15-10-30-00.txt",
        "news-data-2024-01-15-10-30-00.json.bak",
        "xnews-data-2024-01-15-10-30-00.json",
        "news-data-2024-13-01-00-00-00.json",
        "news-data-2023-02-29-00-00-00",
        "news-data-2024-01-15-24-00-00",
        "news-data-2024-01-15-10-60-00",
        "news-data-abcd-01-15-10-30-00",
        "news-data-\u0662\u0660\u0662\u0664-01-01-00-00-00.json",
        "news-data-\uff12\uff10\uff12\uff14-01-01-00-00-00.json",
        "news-data-2024-01-01-00-00-\u0660\u0660",
    ],
)
def test_decode_returns_none_for_non_snapshots(name: str) -> None:
    assert decode(name) is None


def test_format_display_includes_all_components() -> None:
    text = format_display(datetime(2024, 1, 15, 14, 7, 9))
    assert text.startswith("Monday, January 15, 2024 at 2:07:09 PM")


@pytest.mark.parametrize(
    "timestamp, expected",
    [
        (datetime(1, 1, 1, 0, 0, 0), "Monday, January 1, 1 at 12:00:00 AM"),
        (datetime(9999, 12, 31, 23, 59, 59), "Friday, December 31, 9999 at 11:59:59 PM"),
    ],
)
def test_format_display_handles_calendar_limits(timestamp: datetime, expected: str) -> None:
    assert format_display(timestamp).startswith(expected)
