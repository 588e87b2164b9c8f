"""Shape Schemas - structured shape views for renderers.

Invariants:
    - geometry is discriminated by `type` (rectangle | oval)
    - `text` is the canonical serialize() output, unchanged
    - Color components reported as stored: floats in [0, 1]

Design Decisions:
    - Structured fields alongside the text form: renderers read numbers
      directly instead of re-parsing the text contract
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from photoalbum.core.shape import OvalGeometry, RectangleGeometry, ShapeState


class ColorModel(BaseModel):
    r: float = Field(ge=0.0, le=1.0)
    g: float = Field(ge=0.0, le=1.0)
    b: float = Field(ge=0.0, le=1.0)


class RectangleGeometryModel(BaseModel):
    """Top-left corner plus width/height."""
    type: Literal["rectangle"] = "rectangle"
    x: float
    y: float
    width: float
    height: float


class OvalGeometryModel(BaseModel):
    """Center plus both radii."""
    type: Literal["oval"] = "oval"
    cx: float
    cy: float
    x_radius: float
    y_radius: float


GeometryModel = Annotated[
    RectangleGeometryModel | OvalGeometryModel, Field(discriminator="type"),
]


class ShapeResponse(BaseModel):
    """One shape, live or captured in a snapshot."""
    name: str
    type: Literal["rectangle", "oval"]
    geometry: GeometryModel
    color: ColorModel
    text: str

    @classmethod
    def from_state(cls, state: ShapeState) -> "ShapeResponse":
        geometry = state.geometry
        if isinstance(geometry, RectangleGeometry):
            geometry_model = RectangleGeometryModel(
                x=geometry.x, y=geometry.y,
                width=geometry.width, height=geometry.height,
            )
        elif isinstance(geometry, OvalGeometry):
            geometry_model = OvalGeometryModel(
                cx=geometry.cx, cy=geometry.cy,
                x_radius=geometry.x_radius, y_radius=geometry.y_radius,
            )
        else:
            raise TypeError(f"Unhandled geometry: {geometry!r}")
        r, g, b = state.color
        return cls(
            name=state.name,
            type=state.kind.value,
            geometry=geometry_model,
            color=ColorModel(r=r, g=g, b=b),
            text=state.serialize(),
        )


class ShapeListResponse(BaseModel):
    """Live shapes in insertion order."""
    shapes: list[ShapeResponse] = []
