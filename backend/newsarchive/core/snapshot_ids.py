"""
Snapshot identifier codec.

Snapshot files are named ``news-data-YYYY-MM-DD-HH-MM-SS.json``. The route
slug is the same name without the ``.json`` suffix. Both decode to a
``SnapshotIdentifier``; anything else is simply not a snapshot.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from newsarchive.models import SNAPSHOT_PREFIX, SNAPSHOT_SUFFIX, SnapshotIdentifier

_SNAPSHOT_RE = re.compile(
    re.escape(SNAPSHOT_PREFIX)
    + r"(\d{4})-(\d{2})-(\d{2})-(\d{2})-(\d{2})-(\d{2})"
    + r"(?:" + re.escape(SNAPSHOT_SUFFIX) + r")?",
    re.ASCII,
)


def encode(timestamp: datetime) -> str:
    """
    Encode a timestamp as a snapshot filename stem.

    Args:
        timestamp: Local timestamp; microseconds and tzinfo are ignored

    Returns:
        Stem such as ``news-data-2024-01-15-10-30-00``
    """
    return SnapshotIdentifier(timestamp.replace(microsecond=0, tzinfo=None)).slug


def decode(name: str) -> Optional[SnapshotIdentifier]:
    """
    Decode a snapshot filename or route slug.

    Args:
        name: ``news-data-...`` with or without the ``.json`` suffix

    Returns:
        SnapshotIdentifier, or None when the name is not a snapshot
    """
    match = _SNAPSHOT_RE.fullmatch(name or "")
    if not match:
        return None

    year, month, day, hour, minute, second = (int(g) for g in match.groups())
    try:
        timestamp = datetime(year, month, day, hour, minute, second)
    except ValueError:
        # Matches the shape but is not a real calendar time (month 13, Feb 30 ...)
        return None
    return SnapshotIdentifier(timestamp)


def format_display(timestamp: datetime) -> str:
    """
    Long human-readable form, e.g. ``Monday, January 15, 2024 at 10:30:05 AM CET``.

    Naive timestamps are interpreted as local time for the zone abbreviation.
    """
    local = timestamp
    if timestamp.tzinfo is None:
        try:
            local = timestamp.astimezone()
        except (OverflowError, ValueError, OSError):
            # Near datetime.min/max the local offset cannot be applied; show wall time only
            local = timestamp
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    zone = local.strftime("%Z")
    text = (
        f"{local.strftime('%A')}, {local.strftime('%B')} {local.day}, {local.year}"
        f" at {hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
    )
    return f"{text} {zone}" if zone else text
