"""
Snapshot repository backed by a directory of timestamp-named JSON files.
"""
from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import List, Optional, Protocol

from newsarchive.core.snapshot_ids import decode
from newsarchive.models import SnapshotIdentifier
from newsarchive.schemas import SnapshotPayload
from newsarchive.sources.loader import SnapshotLoader

logger = logging.getLogger(__name__)


class SnapshotRepository(Protocol):
    """Keyed, sorted snapshot storage."""

    async def list(self) -> List[SnapshotIdentifier]:
        ...

    async def load(self, identifier: SnapshotIdentifier) -> Optional[SnapshotPayload]:
        ...


def _list_file_names(directory: Path) -> List[str]:
    with os.scandir(directory) as entries:
        return [entry.name for entry in entries if entry.is_file()]


def sort_identifiers(identifiers: List[SnapshotIdentifier]) -> List[SnapshotIdentifier]:
    """
    Sort identifiers most recent first.

    Identical timestamps fall back to the filename so the order does not
    depend on directory enumeration.
    """
    return sorted(identifiers, key=lambda ident: (ident.timestamp, ident.filename), reverse=True)


class FilesystemSnapshotRepository:
    """Lists and loads snapshots from ``snapshot_dir``."""

    def __init__(self, snapshot_dir: Path, loader: SnapshotLoader | None = None) -> None:
        self.snapshot_dir = Path(snapshot_dir)
        self.loader = loader or SnapshotLoader()

    async def list(self) -> List[SnapshotIdentifier]:
        """
        List every snapshot in the storage directory.

        Returns:
            Identifiers sorted by timestamp (newest first); empty if the
            directory is missing or unreadable
        """
        try:
            names = await asyncio.to_thread(_list_file_names, self.snapshot_dir)
        except OSError as e:
            logger.warning("Error reading archive directory %s: %s", self.snapshot_dir, e)
            return []

        identifiers: List[SnapshotIdentifier] = []
        for name in names:
            ident = decode(name)
            # Only actual files count; a bare slug without .json is not a snapshot file
            if ident is None or name != ident.filename:
                continue
            identifiers.append(ident)

        return sort_identifiers(identifiers)

    async def load(self, identifier: SnapshotIdentifier) -> Optional[SnapshotPayload]:
        """Load one snapshot; None when it has no usable payload."""
        return await self.loader.load_path(self.snapshot_dir / identifier.filename)
