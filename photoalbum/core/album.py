"""Photo Album - facade over one AlbumStore and its SnapshotEngine.

Invariants:
    - The engine always snapshots this album's own store
    - reset() empties shapes AND history in one call; nothing survives it
    - AlbumReader exposes no method that can change shapes or history

Design Decisions:
    - Facade instead of merging store and engine: each stays small and
      testable alone, the facade owns only the cross-cutting reset
    - Reader returns ShapeState values, not live Shape handles, so a
      renderer cannot mutate through it
"""

import logging
from collections.abc import Callable
from datetime import datetime

from photoalbum.core.album_store import AlbumStore
from photoalbum.core.domain_types import DEFAULT_TIMESTAMP_FORMAT, ShapeKind
from photoalbum.core.shape import Shape, ShapeState
from photoalbum.core.snapshot_engine import Snapshot, SnapshotEngine

logger = logging.getLogger(__name__)


class PhotoAlbum:
    """Live shapes plus their snapshot history."""

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    ) -> None:
        self.store = AlbumStore()
        self.snapshots = SnapshotEngine(
            self.store, clock=clock, timestamp_format=timestamp_format,
        )

    # --- shapes ----------------------------------------------------------------

    def add_shape(self, name: str, shape_type: str | ShapeKind) -> Shape:
        return self.store.add_shape(name, shape_type)

    def get_shape(self, name: str) -> Shape:
        """Live handle; changes made through it show up in later snapshots."""
        return self.store.get_shape(name)

    def remove_shape(self, name: str) -> None:
        self.store.remove_shape(name)

    def move(self, name: str, x: float, y: float) -> None:
        self.store.move(name, x, y)

    def set_color(self, name: str, r: float, g: float, b: float) -> None:
        self.store.set_color(name, r, g, b)

    def resize(self, name: str, first: float, second: float) -> None:
        self.store.resize(name, first, second)

    # --- snapshots -------------------------------------------------------------

    def take_snapshot(self, description: str = "") -> str:
        """Capture now; returns the new snapshot's id."""
        return self.snapshots.take_snapshot(description).id

    def get_snapshot(self, snapshot_id: str) -> Snapshot:
        return self.snapshots.get_snapshot(snapshot_id)

    def get_snapshots(self) -> list[Snapshot]:
        return self.snapshots.get_snapshots()

    def get_snapshot_ids(self) -> str:
        return self.snapshots.format_snapshot_ids()

    def print_snapshots(self) -> str:
        return self.snapshots.print_snapshots()

    def reset(self) -> None:
        """Drop every live shape and every snapshot. Irreversible."""
        dropped_shapes, dropped_snapshots = len(self.store), len(self.snapshots)
        self.store.reset()
        self.snapshots.clear()
        logger.info(
            "Album reset (%d shapes, %d snapshots dropped)",
            dropped_shapes, dropped_snapshots,
        )

    def reader(self) -> "AlbumReader":
        return AlbumReader(self)


class AlbumReader:
    """Read-only view handed to renderers."""

    __slots__ = ("_album",)

    def __init__(self, album: PhotoAlbum):
        self._album = album

    def get_shape(self, name: str) -> ShapeState:
        return self._album.store.get_shape(name).state

    def shapes(self) -> list[ShapeState]:
        return [shape.state for shape in self._album.store.shapes()]

    def get_snapshot(self, snapshot_id: str) -> Snapshot:
        return self._album.get_snapshot(snapshot_id)

    def get_snapshots(self) -> list[Snapshot]:
        return self._album.get_snapshots()

    def snapshot_ids(self) -> list[str]:
        return self._album.snapshots.snapshot_ids()

    def get_snapshot_ids(self) -> str:
        return self._album.get_snapshot_ids()

    def print_snapshots(self) -> str:
        return self._album.print_snapshots()
