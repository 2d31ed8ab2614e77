"""
Image asset resolution for snapshot payloads.

An image reference is only rendered when the file it points to exists under
the asset root. Anything else degrades to a text-only news item.
"""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from newsarchive.schemas import (
    ImageRef,
    NewsItem,
    ResolvedImage,
    ResolvedNewsItem,
    SnapshotPayload,
)
from newsarchive.utils import join_url_path

logger = logging.getLogger(__name__)


class AssetResolver:
    """Checks image references against ``asset_root`` and builds public URLs."""

    def __init__(self, asset_root: Path, base_path: str = "") -> None:
        self.asset_root = Path(asset_root).resolve()
        self.base_path = base_path

    def _locate(self, src: str) -> Optional[Path]:
        """Return the asset file for ``src``, or None if it is outside the root or missing.

        Makes filesystem calls; run it off the event loop.
        """
        relative = src.strip().lstrip("/")
        if not relative:
            return None
        candidate = (self.asset_root / relative).resolve()
        # Reject references that escape the asset root
        if candidate != self.asset_root and self.asset_root not in candidate.parents:
            return None
        if not candidate.is_file():
            return None
        return candidate

    async def resolve(self, image: Optional[ImageRef]) -> Optional[ResolvedImage]:
        """
        Resolve an image reference to a servable image.

        Args:
            image: Image reference from a news item, or None

        Returns:
            ResolvedImage, or None if there is no usable asset
        """
        if image is None:
            return None

        try:
            path = await asyncio.to_thread(self._locate, image.src)
        except (OSError, ValueError) as e:
            logger.debug("Image probe failed for %s: %s", image.src, e)
            return None

        if path is None:
            logger.debug("Image not found or outside asset root: %s", image.src)
            return None

        return ResolvedImage(
            src=image.src,
            url=join_url_path(self.base_path, image.src),
            alt=image.alt,
            width=image.width,
            height=image.height,
        )

    async def resolve_item(self, item: NewsItem) -> ResolvedNewsItem:
        return ResolvedNewsItem(text=item.text, url=item.url, image=await self.resolve(item.image))

    async def resolve_items(self, items: List[NewsItem]) -> List[ResolvedNewsItem]:
        """Resolve a column of items concurrently, keeping display order."""
        return list(await asyncio.gather(*(self.resolve_item(item) for item in items)))

    async def resolve_payload(self, payload: SnapshotPayload) -> dict:
        """
        Resolve every image in a payload.

        Returns:
            Keyword arguments for SnapshotResponse (field names, not aliases)
        """
        headline, top, left, center, right = await asyncio.gather(
            self.resolve_item(payload.main_headline),
            self.resolve_items(payload.top_stories),
            self.resolve_items(payload.left_column),
            self.resolve_items(payload.center_column),
            self.resolve_items(payload.right_column),
        )
        return {
            "main_headline": headline,
            "top_stories": top,
            "left_column": left,
            "center_column": center,
            "right_column": right,
            "last_updated": payload.last_updated,
        }
