"""
Main FastAPI application and routing layer.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from newsarchive.config import Settings, get_settings
from newsarchive.core.archive_view import build_archive_index
from newsarchive.core.snapshot_ids import decode, format_display
from newsarchive.schemas import ArchiveIndexResponse, SnapshotPayload, SnapshotResponse
from newsarchive.services.assets import AssetResolver
from newsarchive.sources.loader import SnapshotLoader
from newsarchive.sources.repository import FilesystemSnapshotRepository
from newsarchive.utils import now_local, now_utc, parse_local_datetime

_settings = get_settings()
logging.basicConfig(level=_settings.LOG_LEVEL, format=_settings.LOG_FORMAT)

# Configure logging
logger = logging.getLogger("uvicorn")


def get_repository(settings: Settings = Depends(get_settings)) -> FilesystemSnapshotRepository:
    return FilesystemSnapshotRepository(settings.SNAPSHOT_DIR, SnapshotLoader())


def get_asset_resolver(settings: Settings = Depends(get_settings)) -> AssetResolver:
    return AssetResolver(settings.ASSET_DIR, settings.BASE_PATH)


async def build_snapshot_response(
    payload: SnapshotPayload,
    resolver: AssetResolver,
    slug: Optional[str] = None,
    archive_date: Optional[str] = None,
) -> SnapshotResponse:
    """
    Build the API response for one snapshot, with images resolved.

    Args:
        payload: Parsed snapshot payload
        resolver: Asset resolver for image references
        slug: Archive slug, None for the current snapshot
        archive_date: Display form of the archive timestamp

    Returns:
        SnapshotResponse object
    """
    resolved = await resolver.resolve_payload(payload)
    last_updated = parse_local_datetime(payload.last_updated)
    return SnapshotResponse(
        slug=slug,
        archive_date=archive_date,
        last_updated_display=format_display(last_updated) if last_updated else None,
        **resolved,
    )


# Initialize FastAPI app
app = FastAPI(
    title="News Snapshot Archive API",
    version="0.1.0",
    description="Serves the current news front page and its archive of timestamped snapshots",
)


@app.on_event("startup")
async def log_storage_layout():
    """Report where snapshots are read from."""
    settings = get_settings()
    if not settings.SNAPSHOT_DIR.is_dir():
        logger.warning("Snapshot directory %s does not exist; archive will be empty", settings.SNAPSHOT_DIR)
    logger.info(
        "Serving snapshots from %s (assets: %s, base path: %r)",
        settings.SNAPSHOT_DIR,
        settings.ASSET_DIR,
        settings.BASE_PATH,
    )


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "as_of": now_utc().isoformat(),
        "service": "news-archive-api",
    }


@app.get("/api/archive", response_model=ArchiveIndexResponse)
async def get_archive_index(
    repository: FilesystemSnapshotRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    """
    List available snapshots grouped by day, newest first.

    Storage problems yield an empty index rather than an error.
    """
    try:
        identifiers = await repository.list()
        logger.info("Archive index: %d snapshots", len(identifiers))
        return build_archive_index(identifiers, now_local(), settings.BASE_PATH)
    except Exception as e:
        logger.error(f"Error building archive index: {e}")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@app.get("/api/archive/slugs", response_model=List[str])
async def get_archive_slugs(repository: FilesystemSnapshotRepository = Depends(get_repository)):
    """Flat list of snapshot slugs, newest first (for static page generation)."""
    return [ident.slug for ident in await repository.list()]


@app.get("/api/archive/{slug}", response_model=SnapshotResponse)
async def get_archive_snapshot(
    slug: str,
    repository: FilesystemSnapshotRepository = Depends(get_repository),
    resolver: AssetResolver = Depends(get_asset_resolver),
):
    """
    Load one archived snapshot by slug.

    Args:
        slug: Snapshot slug, e.g. news-data-2024-01-15-10-30-00

    Returns:
        SnapshotResponse with unusable images removed
    """
    identifier = decode(slug)
    if identifier is None or identifier.slug != slug:
        raise HTTPException(status_code=404, detail="Snapshot not found")

    try:
        payload = await repository.load(identifier)
        if payload is None:
            logger.warning(f"Snapshot not found: {slug}")
            raise HTTPException(status_code=404, detail="Snapshot not found")

        return await build_snapshot_response(
            payload,
            resolver,
            slug=identifier.slug,
            archive_date=format_display(identifier.timestamp),
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error loading snapshot {slug}: {e}")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@app.get("/api/current", response_model=SnapshotResponse)
async def get_current_snapshot(
    settings: Settings = Depends(get_settings),
    resolver: AssetResolver = Depends(get_asset_resolver),
):
    """Load the current front-page snapshot."""
    try:
        payload = await SnapshotLoader().load_current(settings.CURRENT_SNAPSHOT_FILE)
        if payload is None:
            raise HTTPException(status_code=404, detail="Current snapshot not available")
        return await build_snapshot_response(payload, resolver)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error loading current snapshot: {e}")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


if __name__ == "__main__":
    # For development
    import uvicorn
    uvicorn.run("newsarchive.main:app", host="0.0.0.0", port=_settings.PORT, reload=True)
