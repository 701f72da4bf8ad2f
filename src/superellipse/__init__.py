"""Superellipse - Geometry engine for superellipse (Lamé curve) shapes.

Turns a width, height and one or more shape exponents into a closed path
descriptor usable as a clip path, and estimates the perimeter and area of
the same outline.

Example:
    >>> from superellipse import generate_symmetric_path, estimate_area
    >>> path = generate_symmetric_path(320, 400, 4)
    >>> area = estimate_area(320, 400, 4)

Exponent 2 gives an ellipse, larger exponents approach a rectangle, and
exponents below 2 pinch towards a diamond or star.
"""

__version__ = "0.1.0"

from superellipse.core import (
    estimate_area,
    estimate_metrics,
    estimate_perimeter,
    generate_asymmetric_path,
    generate_path,
    generate_per_corner_path,
    generate_symmetric_path,
)
from superellipse.domain import CornerExponents, Metrics, SampleOptions, ShapeSpec
from superellipse.exceptions import InvalidGeometryError, SuperellipseError

__all__ = [
    "CornerExponents",
    "InvalidGeometryError",
    "Metrics",
    "SampleOptions",
    "ShapeSpec",
    "SuperellipseError",
    "__version__",
    "estimate_area",
    "estimate_metrics",
    "estimate_perimeter",
    "generate_asymmetric_path",
    "generate_path",
    "generate_per_corner_path",
    "generate_symmetric_path",
]
