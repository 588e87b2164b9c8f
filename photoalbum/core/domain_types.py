"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - ShapeKind is the only source of valid shape type names
    - RGB components are bounded 0.0-1.0
    - Defaults for new shapes defined once here (rectangle 50x50, oval 25/25, red)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType

from photoalbum.core.errors import UnknownShapeTypeError


# ─── Identity Types ──────────────────────────────────────────────

ShapeName = NewType("ShapeName", str)
SnapshotId = NewType("SnapshotId", str)


# ─── Value Types ─────────────────────────────────────────────────

RGB = tuple[float, float, float]    # each component 0.0-1.0


# ─── Enums ───────────────────────────────────────────────────────

class ShapeKind(str, Enum):
    """Shape variant tag. Values are the wire names used in commands and text."""
    RECTANGLE = "rectangle"
    OVAL = "oval"

    @classmethod
    def parse(cls, text: str) -> "ShapeKind":
        """Resolve a type name; raises UnknownShapeTypeError for anything else."""
        for kind in cls:
            if kind.value == text:
                return kind
        raise UnknownShapeTypeError(text)


class BatchStatus(str, Enum):
    """Terminal states of a command batch."""
    COMPLETED = "completed"
    HALTED = "halted"


# ─── Defaults ────────────────────────────────────────────────────

DEFAULT_COLOR: RGB = (1.0, 0.0, 0.0)
DEFAULT_RECTANGLE_SIZE: tuple[float, float] = (50.0, 50.0)
DEFAULT_OVAL_RADII: tuple[float, float] = (25.0, 25.0)
DEFAULT_TIMESTAMP_FORMAT = "%d-%m-%Y %H:%M:%S"

# Integer color channels on the command protocol are divided by this value
COLOR_CHANNEL_MAX = 255
