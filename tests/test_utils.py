from __future__ import annotations

import pytest

from newsarchive.utils import join_url_path, normalize_base_path, parse_local_datetime


def test_parse_local_datetime_converts_to_local() -> None:
    parsed = parse_local_datetime("2024-01-15T12:00:00Z")
    assert parsed is not None
    assert parsed.tzinfo is not None


@pytest.mark.parametrize(
    "value",
    [None, "", "not a date", "0001-01-01T00:00:00+14:00", "9999-12-31T23:59:59-12:00"],
)
def test_parse_local_datetime_unrepresentable_is_none(value) -> None:
    assert parse_local_datetime(value) is None


@pytest.mark.parametrize("base_path, expected", [(None, ""), ("", ""), ("/", ""), ("app/", "/app"), ("/a/b/", "/a/b")])
def test_normalize_base_path(base_path, expected: str) -> None:
    assert normalize_base_path(base_path) == expected


def test_join_url_path() -> None:
    assert join_url_path("/app", "/images/a.jpg") == "/app/images/a.jpg"
    assert join_url_path("", "images/a.jpg") == "/images/a.jpg"
