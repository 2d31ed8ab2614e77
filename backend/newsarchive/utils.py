"""
Shared utility functions for the news archive application.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as dateparser


def now_utc() -> datetime:
    """
    Get current UTC datetime with timezone information.

    Returns:
        Current UTC datetime
    """
    return datetime.now(timezone.utc)


def now_local() -> datetime:
    """
    Get the current naive local time.

    Snapshot names carry naive local timestamps, so relative ages are
    computed against the same clock.
    """
    return datetime.now()


def parse_local_datetime(date_string: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 (or similar) string and convert it to local time.

    Args:
        date_string: Date string such as a payload's lastUpdated value

    Returns:
        Timezone-aware local datetime, or None if missing or unparseable
    """
    if not date_string:
        return None
    try:
        parsed = dateparser.parse(date_string)
    except (ValueError, OverflowError):
        return None
    try:
        return parsed.astimezone()
    except (OverflowError, ValueError, OSError):
        return None


def normalize_base_path(base_path: str | None) -> str:
    """
    Normalize a deployment path prefix.

    ``""``, ``"/"`` and None all mean the site root; anything else gets a
    single leading slash and no trailing slash.
    """
    cleaned = (base_path or "").strip().strip("/")
    return f"/{cleaned}" if cleaned else ""


def join_url_path(base_path: str | None, path: str) -> str:
    """Join a base path and a relative path into an absolute URL path."""
    return f"{normalize_base_path(base_path)}/{path.strip().lstrip('/')}"
