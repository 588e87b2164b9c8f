"""Snapshot Engine - frozen, timestamped captures of the live registry.

Invariants:
    - A snapshot holds ShapeState values captured at creation; nothing done to
      live shapes afterwards (mutate, remove, reset) reaches them
    - Shapes inside a snapshot keep the registry's insertion order
    - Ids are unique for the life of the engine, even for captures taken
      within the same clock tick (sequence counter suffix)
    - Ids sort as strings in capture order: UTC time that never steps back,
      then a zero-padded sequence
    - History is append-only; only clear() empties it
    - get_snapshots() returns a new list every call

Design Decisions:
    - Snapshot is a frozen dataclass with a tuple of shapes: immutable end to
      end, so it is safe to hand to any renderer
    - Clock is injected: tests pin timestamps without patching datetime
    - Sequence counter survives clear(): an id is never handed out twice
"""

import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from photoalbum.core.album_store import AlbumStore
from photoalbum.core.domain_types import DEFAULT_TIMESTAMP_FORMAT, SnapshotId
from photoalbum.core.errors import UnknownSnapshotError
from photoalbum.core.shape import ShapeState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """One immutable capture of every live shape."""
    id: SnapshotId
    timestamp: str
    description: str
    shapes: tuple[ShapeState, ...] = ()
    taken_at: datetime | None = field(default=None, compare=False)

    def to_text(self) -> str:
        """Canonical text block: header lines, then every shape's serialize()."""
        header = (
            f"Snapshot ID: {self.id}\n"
            f"Timestamp: {self.timestamp}\n"
            f"Description: {self.description}\n"
            f"Shape Information:\n"
        )
        return header + "\n\n".join(s.serialize() for s in self.shapes)

    def __str__(self) -> str:
        return self.to_text()


def format_id_list(ids: list[str]) -> str:
    """`[id1, id2, ...]`; `[]` when empty."""
    return "[" + ", ".join(ids) + "]"


class SnapshotEngine:
    """Owns the ordered snapshot history of one album store."""

    def __init__(
        self,
        store: AlbumStore,
        clock: Callable[[], datetime] = datetime.now,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    ) -> None:
        self._store = store
        self._clock = clock
        self._timestamp_format = timestamp_format
        self._sequence = itertools.count(1)
        self._history: list[Snapshot] = []
        self._last_id_time: datetime | None = None

    def take_snapshot(self, description: str = "") -> Snapshot:
        """Capture every live shape now. Succeeds for an empty registry too."""
        taken_at = self._clock()
        snapshot_id = self._next_id(taken_at)
        snapshot = Snapshot(
            id=snapshot_id,
            timestamp=taken_at.strftime(self._timestamp_format),
            description=description,
            shapes=tuple(shape.state for shape in self._store.shapes()),
            taken_at=taken_at,
        )
        self._history.append(snapshot)
        logger.info(
            "Snapshot taken (%d shapes)", len(snapshot.shapes),
            extra={"snapshot_id": snapshot_id},
        )
        return snapshot

    def _next_id(self, taken_at: datetime) -> SnapshotId:
        # Naive clock values are local time; UTC removes DST rollbacks
        id_time = taken_at.astimezone(timezone.utc)
        if self._last_id_time is not None and id_time < self._last_id_time:
            id_time = self._last_id_time
        self._last_id_time = id_time
        return SnapshotId(
            f"{id_time:%Y-%m-%dT%H:%M:%S.%fZ}-{next(self._sequence):06d}"
        )

    def get_snapshot(self, snapshot_id: str) -> Snapshot:
        for snapshot in self._history:
            if snapshot.id == snapshot_id:
                return snapshot
        raise UnknownSnapshotError(snapshot_id)

    def get_snapshots(self) -> list[Snapshot]:
        """Oldest first. The list is a copy; editing it changes nothing here."""
        return list(self._history)

    def snapshot_ids(self) -> list[str]:
        return [snapshot.id for snapshot in self._history]

    def format_snapshot_ids(self) -> str:
        return format_id_list(self.snapshot_ids())

    def print_snapshots(self) -> str:
        """Every snapshot's text block in history order, blank-line separated."""
        return "\n\n".join(snapshot.to_text() for snapshot in self._history)

    def clear(self) -> None:
        self._history.clear()

    def __len__(self) -> int:
        return len(self._history)
