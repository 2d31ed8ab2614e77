"""
Snapshot payload loader.
"""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from newsarchive.schemas import SnapshotPayload

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


class SnapshotLoader:
    """Reads snapshot JSON files into SnapshotPayload objects.

    Missing, unreadable and malformed files all come back as None so the
    caller has a single "not found" outcome to handle.
    """

    async def load_path(self, path: Path) -> Optional[SnapshotPayload]:
        """
        Load and parse one snapshot file.

        Args:
            path: Location of the JSON file

        Returns:
            Parsed payload, or None if it is absent or malformed
        """
        try:
            raw = await asyncio.to_thread(_read_text, path)
        except FileNotFoundError:
            logger.debug("Snapshot file not found: %s", path)
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Error reading snapshot file %s: %s", path, e)
            return None

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Snapshot file %s is not valid JSON: %s", path, e)
            return None

        if not isinstance(data, dict):
            logger.warning("Snapshot file %s does not contain a JSON object", path)
            return None

        try:
            return SnapshotPayload.model_validate(data)
        except ValidationError as e:
            logger.warning("Snapshot file %s has an unexpected shape: %s", path, e.error_count())
            return None

    async def load_current(self, path: Path) -> Optional[SnapshotPayload]:
        """Load the well-known "current" snapshot consumed by the home page."""
        return await self.load_path(path)
