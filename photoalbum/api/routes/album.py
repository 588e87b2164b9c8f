"""Album Routes - live shapes, command batches and reset.

Invariants:
    - One PhotoAlbum per process (module-level), reached only via get_album
    - Shape reads return ShapeState-based views; no route hands out a live handle
    - A halted batch answers 422 with the BatchResult body; nothing is rolled back

Design Decisions:
    - _album as module-level state: single-process server, album lives in
      memory and is lost on restart
    - get_album is a dependency so tests swap in a fresh album per test
    - Handlers are `async def`: they run on the event loop thread, so core
      calls never overlap
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from photoalbum.config import Settings, get_settings
from photoalbum.core.album import PhotoAlbum
from photoalbum.core.command_interpreter import CommandInterpreter
from photoalbum.core.errors import CommandFormatError
from photoalbum.schemas.command import BatchResultResponse, CommandScript
from photoalbum.schemas.shape import ShapeListResponse, ShapeResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/album", tags=["album"])

_album: PhotoAlbum | None = None


def get_album() -> PhotoAlbum:
    """Process-wide album, created on first use with configured settings."""
    global _album
    if _album is None:
        _album = PhotoAlbum(
            timestamp_format=get_settings().snapshot_timestamp_format,
        )
    return _album


@router.get("/shapes", response_model=ShapeListResponse)
async def list_shapes(album: PhotoAlbum = Depends(get_album)):
    """Live shapes in insertion order."""
    reader = album.reader()
    return ShapeListResponse(
        shapes=[ShapeResponse.from_state(s) for s in reader.shapes()],
    )


@router.get("/shapes/{name}", response_model=ShapeResponse)
async def get_shape(name: str, album: PhotoAlbum = Depends(get_album)):
    """One live shape; 404 if no shape has this name."""
    return ShapeResponse.from_state(album.reader().get_shape(name))


@router.post("/commands", response_model=BatchResultResponse)
async def run_commands(
    body: CommandScript,
    album: PhotoAlbum = Depends(get_album),
    settings: Settings = Depends(get_settings),
):
    """Run a command script. Halts at the first failing line."""
    lines = body.script.splitlines()
    max_lines = settings.max_script_lines
    if len(lines) > max_lines:
        raise CommandFormatError(
            f"Script has {len(lines)} lines (limit {max_lines})",
        )
    result = CommandInterpreter(album).run(lines)
    response = BatchResultResponse.from_result(result)
    if not result.ok:
        return JSONResponse(
            status_code=422,
            content=response.model_dump(),
        )
    return response


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def reset_album(album: PhotoAlbum = Depends(get_album)):
    """Drop every shape and snapshot."""
    album.reset()
