"""
Archive index view model: day grouping and relative-age labels.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List

from newsarchive.core.snapshot_ids import format_display
from newsarchive.models import ArchiveGroup, SnapshotIdentifier
from newsarchive.schemas import ArchiveDayGroup, ArchiveEntry, ArchiveIndexResponse
from newsarchive.utils import join_url_path

LESS_THAN_AN_HOUR = "Less than an hour ago"


def group_by_day(identifiers: Iterable[SnapshotIdentifier]) -> List[ArchiveGroup]:
    """
    Partition identifiers by calendar date.

    Args:
        identifiers: Identifiers already sorted newest first

    Returns:
        One ArchiveGroup per day, in first-seen order, entries in input order
    """
    groups: Dict[date, ArchiveGroup] = {}
    for ident in identifiers:
        group = groups.get(ident.day)
        if group is None:
            group = groups[ident.day] = ArchiveGroup(day=ident.day)
        group.entries.append(ident)
    return list(groups.values())


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count != 1 else ''} ago"


def relative_age(timestamp: datetime, now: datetime) -> str:
    """
    Human-readable age of a snapshot.

    Args:
        timestamp: When the snapshot was taken
        now: Reference time (same timezone convention as timestamp)

    Returns:
        "N days ago", "N hours ago" or "Less than an hour ago"
    """
    hours = (now - timestamp) // timedelta(hours=1)
    if hours >= 24:
        return _plural(hours // 24, "day")
    if hours >= 1:
        return _plural(hours, "hour")
    return LESS_THAN_AN_HOUR


def day_label(group: ArchiveGroup) -> str:
    # e.g. "Mon Jan 15 2024"
    d = group.day
    return f"{d.strftime('%a')} {d.strftime('%b')} {d.day:02d} {d.year}"


def build_archive_index(
    identifiers: List[SnapshotIdentifier],
    now: datetime,
    base_path: str = "",
) -> ArchiveIndexResponse:
    """
    Build the archive index response for the presentation layer.

    Args:
        identifiers: Identifiers sorted newest first (as returned by the repository)
        now: Reference time for relative-age labels
        base_path: Deployment path prefix for entry links

    Returns:
        ArchiveIndexResponse with one group per day
    """
    groups = [
        ArchiveDayGroup(
            day=group.day.isoformat(),
            label=day_label(group),
            entries=[
                ArchiveEntry(
                    slug=ident.slug,
                    timestamp=ident.timestamp.isoformat(),
                    display=format_display(ident.timestamp),
                    time_ago=relative_age(ident.timestamp, now),
                    href=join_url_path(base_path, f"archive/{ident.slug}"),
                )
                for ident in group.entries
            ],
        )
        for group in group_by_day(identifiers)
    ]
    return ArchiveIndexResponse(as_of=now.isoformat(), total=len(identifiers), groups=groups)
