"""Value types describing a superellipse and its sampled outline.

This module defines the immutable inputs and outputs of the engine:
- Point: A 2D point in the shape's local frame
- CornerExponents: One exponent per corner of the bounding box
- ShapeSpec: Width, height and either a uniform exponent or corner exponents
- SampleOptions: Sample count and coordinate precision for path output
- Metrics: Estimated perimeter and area
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in the shape's local coordinate frame.

    The origin is the top-left corner of the bounding box, so a shape of
    width w and height h spans [0, w] x [0, h].

    Attributes:
        x: Horizontal coordinate, growing to the right
        y: Vertical coordinate, growing downwards (screen convention)
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class CornerExponents:
    """Independent exponents for the four corners of the bounding box.

    Small values pull a corner towards a point or star tip, large values
    square it off. All four must be strictly positive.
    """

    top_left: float
    top_right: float
    bottom_right: float
    bottom_left: float

    @classmethod
    def uniform(cls, exponent: float) -> "CornerExponents":
        """Create corner exponents that all share one value."""
        return cls(
            top_left=exponent,
            top_right=exponent,
            bottom_right=exponent,
            bottom_left=exponent,
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return (top_left, top_right, bottom_right, bottom_left)."""
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)

    def is_uniform(self) -> bool:
        """Check whether all four corners use the same exponent."""
        return len(set(self.as_tuple())) == 1

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "top_left": self.top_left,
            "top_right": self.top_right,
            "bottom_right": self.bottom_right,
            "bottom_left": self.bottom_left,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CornerExponents":
        """Deserialize from dictionary."""
        return cls(
            top_left=data["top_left"],
            top_right=data["top_right"],
            bottom_right=data["bottom_right"],
            bottom_left=data["bottom_left"],
        )


@dataclass(frozen=True, slots=True)
class ShapeSpec:
    """Dimensions and exponent(s) of a superellipse.

    Exactly one of ``exponent`` (uniform mode) or ``corners`` (per-corner
    mode) is expected. The engine validates this when the shape is used.

    Attributes:
        width: Bounding box width
        height: Bounding box height
        exponent: Uniform shape exponent (2 gives an ellipse)
        corners: Per-corner exponents
    """

    width: float
    height: float
    exponent: float | None = None
    corners: CornerExponents | None = None

    @property
    def is_per_corner(self) -> bool:
        """Whether this spec uses per-corner exponents."""
        return self.corners is not None

    def scaled(self, factor: float) -> "ShapeSpec":
        """Return a copy with both dimensions multiplied by factor."""
        return ShapeSpec(
            width=self.width * factor,
            height=self.height * factor,
            exponent=self.exponent,
            corners=self.corners,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "width": self.width,
            "height": self.height,
            "exponent": self.exponent,
            "corners": self.corners.to_dict() if self.corners else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShapeSpec":
        """Deserialize from dictionary."""
        corners = data.get("corners")
        return cls(
            width=data["width"],
            height=data["height"],
            exponent=data.get("exponent"),
            corners=CornerExponents.from_dict(corners) if corners else None,
        )


@dataclass(frozen=True, slots=True)
class SampleOptions:
    """Sampling options for path generation.

    Attributes:
        steps: Number of angular steps; the path holds steps + 1 points
        precision: Decimal digits kept per coordinate
    """

    steps: int = 360
    precision: int = 2

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"steps": self.steps, "precision": self.precision}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SampleOptions":
        """Deserialize from dictionary, falling back to defaults."""
        defaults = cls()
        return cls(
            steps=data.get("steps", defaults.steps),
            precision=data.get("precision", defaults.precision),
        )


@dataclass(frozen=True, slots=True)
class Metrics:
    """Numerically estimated measurements of a superellipse outline.

    Both values are polygon approximations that converge to the true
    values as the sample count grows; neither is exact.
    """

    perimeter: float
    area: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"perimeter": self.perimeter, "area": self.area}
