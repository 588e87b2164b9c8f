"""Snapshot Routes - read-only snapshot history for renderers.

Invariants:
    - Nothing here mutates the album; every handler goes through AlbumReader
    - /ids and /text are text/plain and byte-identical to the core text forms
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from photoalbum.api.routes.album import get_album
from photoalbum.core.album import PhotoAlbum
from photoalbum.schemas.snapshot import SnapshotListResponse, SnapshotResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/snapshots", tags=["snapshots"])


@router.get("", response_model=SnapshotListResponse)
async def list_snapshots(album: PhotoAlbum = Depends(get_album)):
    """Snapshot summaries, oldest first."""
    return SnapshotListResponse.from_snapshots(album.reader().get_snapshots())


@router.get("/ids", response_class=PlainTextResponse)
async def snapshot_ids(album: PhotoAlbum = Depends(get_album)):
    """Ids as `[id1, id2, ...]`."""
    return album.reader().get_snapshot_ids()


@router.get("/text", response_class=PlainTextResponse)
async def print_snapshots(album: PhotoAlbum = Depends(get_album)):
    """Canonical text dump of the whole history."""
    return album.reader().print_snapshots()


@router.get("/{snapshot_id}", response_model=SnapshotResponse)
async def get_snapshot(snapshot_id: str, album: PhotoAlbum = Depends(get_album)):
    return SnapshotResponse.from_snapshot(album.reader().get_snapshot(snapshot_id))
