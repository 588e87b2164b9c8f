"""Album Store - the live name -> Shape registry.

Invariants:
    - Names are unique among live shapes
    - Iteration order is insertion order (snapshots depend on it)
    - get_shape returns the stored object itself: no copy-on-read
    - A rejected call (duplicate, unknown type, unknown name, bad value)
      leaves the registry exactly as it was

Design Decisions:
    - Plain dict as the backing map: insertion order is a language guarantee
    - Album-level move/set_color/resize alongside get_shape, so callers that
      should not hold a mutable handle can still drive a shape by name
"""

import logging
from collections.abc import Iterator

from photoalbum.core.domain_types import ShapeKind
from photoalbum.core.errors import DuplicateNameError, UnknownShapeError
from photoalbum.core.shape import Shape

logger = logging.getLogger(__name__)


class AlbumStore:
    """Exclusive owner of every live shape."""

    def __init__(self) -> None:
        self._shapes: dict[str, Shape] = {}

    def add_shape(self, name: str, shape_type: str | ShapeKind) -> Shape:
        """Create a default shape of `shape_type` under `name` and return it."""
        if name in self._shapes:
            raise DuplicateNameError(name)
        kind = shape_type if isinstance(shape_type, ShapeKind) else ShapeKind.parse(shape_type)
        shape = Shape.create(name, kind)
        self._shapes[name] = shape
        logger.debug("Shape added", extra={"shape_name": name})
        return shape

    def get_shape(self, name: str) -> Shape:
        try:
            return self._shapes[name]
        except KeyError:
            raise UnknownShapeError(name) from None

    def remove_shape(self, name: str) -> None:
        if name not in self._shapes:
            raise UnknownShapeError(name)
        del self._shapes[name]
        logger.debug("Shape removed", extra={"shape_name": name})

    # --- album-level commands -------------------------------------------------

    def move(self, name: str, x: float, y: float) -> None:
        self.get_shape(name).move(x, y)

    def set_color(self, name: str, r: float, g: float, b: float) -> None:
        self.get_shape(name).set_color(r, g, b)

    def resize(self, name: str, first: float, second: float) -> None:
        self.get_shape(name).resize(first, second)

    # --- queries ---------------------------------------------------------------

    def shapes(self) -> list[Shape]:
        """Live handles in insertion order (a new list each call)."""
        return list(self._shapes.values())

    def names(self) -> list[str]:
        return list(self._shapes)

    def reset(self) -> None:
        self._shapes.clear()

    def __len__(self) -> int:
        return len(self._shapes)

    def __contains__(self, name: object) -> bool:
        return name in self._shapes

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes())
