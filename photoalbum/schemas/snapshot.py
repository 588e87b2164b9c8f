"""Snapshot Schemas - snapshot history as served to renderers.

Invariants:
    - Shapes listed in capture order
    - Summaries list snapshots oldest first
"""

from pydantic import BaseModel

from photoalbum.core.snapshot_engine import Snapshot
from photoalbum.schemas.shape import ShapeResponse


class SnapshotSummary(BaseModel):
    id: str
    timestamp: str
    description: str
    shape_count: int


class SnapshotResponse(BaseModel):
    """A full snapshot with its frozen shapes."""
    id: str
    timestamp: str
    description: str
    shapes: list[ShapeResponse] = []

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> "SnapshotResponse":
        return cls(
            id=snapshot.id,
            timestamp=snapshot.timestamp,
            description=snapshot.description,
            shapes=[ShapeResponse.from_state(s) for s in snapshot.shapes],
        )


class SnapshotListResponse(BaseModel):
    snapshots: list[SnapshotSummary] = []

    @classmethod
    def from_snapshots(cls, snapshots: list[Snapshot]) -> "SnapshotListResponse":
        return cls(snapshots=[
            SnapshotSummary(
                id=s.id, timestamp=s.timestamp,
                description=s.description, shape_count=len(s.shapes),
            )
            for s in snapshots
        ])
