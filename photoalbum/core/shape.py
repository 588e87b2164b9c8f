"""Shape - tagged 2D primitive (rectangle | oval) with position, extent and color.

Invariants:
    - Color components always in [0, 1]; both extents always > 0
    - A shape's name never changes after creation
    - Every mutation swaps in a complete new ShapeState: a rejected call
      leaves the previous state untouched
    - serialize() output is a wire contract parsed by renderers: labels,
      comma placement and one-decimal precision are fixed

Design Decisions:
    - ShapeState is a frozen dataclass: snapshots store it directly, so a
      captured copy can never drift from what was captured
    - Kind-specific behavior dispatched with `match` on ShapeKind instead of
      a subclass per kind
    - Numbers rounded half-up from their shortest repr, matching the text
      produced by the renderers' existing fixtures
"""

import math
from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Context, Decimal

from photoalbum.core.domain_types import (
    DEFAULT_COLOR,
    DEFAULT_OVAL_RADII,
    DEFAULT_RECTANGLE_SIZE,
    RGB,
    ShapeKind,
)
from photoalbum.core.errors import InvalidColorError, InvalidDimensionError

_ONE_DECIMAL = Decimal("0.1")
# Wide enough for any finite float written out in full
_FORMAT_CONTEXT = Context(prec=400)


def format_number(value: float) -> str:
    """Format with exactly one decimal digit (half-up on the shortest repr)."""
    if not math.isfinite(value):
        return str(value)
    return str(Decimal(repr(float(value))).quantize(
        _ONE_DECIMAL, ROUND_HALF_UP, _FORMAT_CONTEXT,
    ))


# ─── Structured Views ────────────────────────────────────────────

@dataclass(frozen=True)
class RectangleGeometry:
    """Rectangle placement: top-left corner plus width/height."""
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class OvalGeometry:
    """Oval placement: center plus the two radii."""
    cx: float
    cy: float
    x_radius: float
    y_radius: float


Geometry = RectangleGeometry | OvalGeometry


# ─── Frozen Value ────────────────────────────────────────────────

@dataclass(frozen=True)
class ShapeState:
    """Immutable value of a shape at one point in time.

    `x`/`y` hold the corner (rectangle) or center (oval); `first`/`second`
    hold width/height or x/y radius.
    """
    name: str
    kind: ShapeKind
    x: float
    y: float
    first: float
    second: float
    color: RGB = DEFAULT_COLOR

    @property
    def geometry(self) -> Geometry:
        match self.kind:
            case ShapeKind.RECTANGLE:
                return RectangleGeometry(self.x, self.y, self.first, self.second)
            case ShapeKind.OVAL:
                return OvalGeometry(self.x, self.y, self.first, self.second)
        raise ValueError(f"Unhandled shape kind: {self.kind!r}")

    def position_line(self) -> str:
        x, y = format_number(self.x), format_number(self.y)
        first, second = format_number(self.first), format_number(self.second)
        match self.kind:
            case ShapeKind.RECTANGLE:
                return f"Min corner: ({x},{y}), Width: {first}, Height: {second}"
            case ShapeKind.OVAL:
                return f"Center: ({x},{y}), X radius: {first}, Y radius: {second}"
        raise ValueError(f"Unhandled shape kind: {self.kind!r}")

    def color_text(self) -> str:
        return "(" + ",".join(format_number(c) for c in self.color) + ")"

    def serialize(self) -> str:
        """Canonical three-line text form consumed by renderers."""
        return (
            f"Name: {self.name}\n"
            f"Type: {self.kind.value}\n"
            f"{self.position_line()}, Color: {self.color_text()}"
        )

    def __str__(self) -> str:
        return self.serialize()


def validate_color(r: float, g: float, b: float) -> RGB:
    """Return the color as floats; raises InvalidColorError if any is outside [0, 1]."""
    if not all(0.0 <= c <= 1.0 for c in (r, g, b)):
        raise InvalidColorError(r, g, b)
    return (float(r), float(g), float(b))


def validate_dimensions(first: float, second: float) -> tuple[float, float]:
    """Return both extents as floats; raises InvalidDimensionError unless both > 0."""
    if not (first > 0 and second > 0):
        raise InvalidDimensionError(first, second)
    return (float(first), float(second))


# ─── Live Handle ─────────────────────────────────────────────────

class Shape:
    """Live, mutable shape owned by the album store.

    Holders of a Shape share it: a mutation through any reference is
    visible everywhere the same object is reachable.
    """

    __slots__ = ("_state",)

    def __init__(self, state: ShapeState):
        self._state = state

    @classmethod
    def create(cls, name: str, kind: ShapeKind) -> "Shape":
        """New shape at the origin with the kind's default extent, colored red."""
        match kind:
            case ShapeKind.RECTANGLE:
                first, second = DEFAULT_RECTANGLE_SIZE
            case ShapeKind.OVAL:
                first, second = DEFAULT_OVAL_RADII
            case _:
                raise ValueError(f"Unhandled shape kind: {kind!r}")
        return cls(ShapeState(name, kind, 0.0, 0.0, first, second, DEFAULT_COLOR))

    @property
    def name(self) -> str:
        return self._state.name

    @property
    def kind(self) -> ShapeKind:
        return self._state.kind

    @property
    def color(self) -> RGB:
        return self._state.color

    @property
    def geometry(self) -> Geometry:
        return self._state.geometry

    @property
    def state(self) -> ShapeState:
        """Current frozen value. Later mutations never change a returned state."""
        return self._state

    def move(self, x: float, y: float) -> None:
        self._state = replace(self._state, x=float(x), y=float(y))

    def set_color(self, r: float, g: float, b: float) -> None:
        self._state = replace(self._state, color=validate_color(r, g, b))

    def resize(self, first: float, second: float) -> None:
        """Width/height for rectangles, x/y radius for ovals."""
        first, second = validate_dimensions(first, second)
        self._state = replace(self._state, first=first, second=second)

    def copy(self) -> "Shape":
        return Shape(self._state)

    def serialize(self) -> str:
        return self._state.serialize()

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"Shape({self.kind.value} {self.name!r})"
