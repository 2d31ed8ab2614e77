"""
File: newsarchive/models.py
Internal data structures used while listing and grouping snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List

SNAPSHOT_PREFIX = "news-data-"
SNAPSHOT_SUFFIX = ".json"


@dataclass(frozen=True)
class SnapshotIdentifier:
    """Filename-derived name of one snapshot.

    The timestamp is naive local time with second precision; no timezone
    is stored in the filename.
    """

    timestamp: datetime

    @property
    def slug(self) -> str:
        ts = self.timestamp
        return (
            f"{SNAPSHOT_PREFIX}{ts.year:04d}-{ts.month:02d}-{ts.day:02d}"
            f"-{ts.hour:02d}-{ts.minute:02d}-{ts.second:02d}"
        )

    @property
    def filename(self) -> str:
        return f"{self.slug}{SNAPSHOT_SUFFIX}"

    @property
    def day(self) -> date:
        return self.timestamp.date()


@dataclass
class ArchiveGroup:
    """Snapshots sharing one calendar day, most recent first."""

    day: date
    entries: List[SnapshotIdentifier] = field(default_factory=list)


__all__ = ["SnapshotIdentifier", "ArchiveGroup", "SNAPSHOT_PREFIX", "SNAPSHOT_SUFFIX"]
