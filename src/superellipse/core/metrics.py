"""Numerical perimeter and area estimates.

Both estimates walk the same sampled outline as path generation, using a
higher default sample count since metrics need not match visual fidelity.
The perimeter is the length of the closed sampled polygon and the area is
its shoelace area. Both converge to the true values as ``steps`` grows;
neither is a closed-form result.
"""

from superellipse.core.geometry import polyline_length, signed_area
from superellipse.core.path import sample_outline
from superellipse.domain import Metrics, ShapeSpec

DEFAULT_METRICS_STEPS = 1000


def estimate_perimeter(
    width: float,
    height: float,
    exponent: float,
    steps: int = DEFAULT_METRICS_STEPS,
) -> float:
    """Estimate the perimeter of a uniform superellipse.

    Args:
        width: Bounding box width, > 0
        height: Bounding box height, > 0
        exponent: Shape exponent, > 0
        steps: Number of polygon edges

    Returns:
        Polyline length, in the same unit as width and height

    Raises:
        InvalidGeometryError: If any input is out of range
    """
    points = sample_outline(ShapeSpec(width, height, exponent=exponent), steps)
    return polyline_length(points)


def estimate_area(
    width: float,
    height: float,
    exponent: float,
    steps: int = DEFAULT_METRICS_STEPS,
) -> float:
    """Estimate the enclosed area of a uniform superellipse.

    Raises:
        InvalidGeometryError: If any input is out of range
    """
    points = sample_outline(ShapeSpec(width, height, exponent=exponent), steps)
    return abs(signed_area(points))


def estimate_metrics(shape: ShapeSpec, steps: int = DEFAULT_METRICS_STEPS) -> Metrics:
    """Estimate perimeter and area together from one outline walk.

    Works for both uniform and per-corner shapes.

    Raises:
        InvalidGeometryError: If the shape or steps are invalid
    """
    points = sample_outline(shape, steps)
    return Metrics(perimeter=polyline_length(points), area=abs(signed_area(points)))
