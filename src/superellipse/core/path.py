"""Superellipse path generation.

Walks the sampled angles, evaluates the radius terms with the exponent(s)
that apply at each angle, translates the curve so its bounding box starts
at the origin, and serializes the points as a closed path descriptor:

    M x0 y0 L x1 y1 L ... L xN yN Z

Three modes are supported:
- Symmetric: one exponent for both axes
- Asymmetric: independent exponents for the x and y terms
- Per-corner: a blended exponent per angle, shared by both axes

All functions are pure. Identical inputs always produce identical strings.
"""

from collections.abc import Callable, Sequence

from superellipse.core._validation import (
    require_positive_corners,
    require_positive_dimensions,
    require_positive_exponent,
    require_valid_options,
    require_valid_steps,
)
from superellipse.core.blending import blend_corner_exponent
from superellipse.core.sampling import radius_x, radius_y, sample_angles
from superellipse.domain import CornerExponents, Point, SampleOptions, ShapeSpec
from superellipse.exceptions import ErrorCode, InvalidGeometryError

# Maps an angle to the (x, y) exponents used at that angle.
ExponentResolver = Callable[[float], tuple[float, float]]

DEFAULT_STEPS = 360
LARGE_SHAPE_STEPS = 720
LARGE_SHAPE_THRESHOLD = 500.0


def _uniform(exponent_x: float, exponent_y: float) -> ExponentResolver:
    return lambda _t: (exponent_x, exponent_y)


def _per_corner(corners: CornerExponents) -> ExponentResolver:
    def resolve(t: float) -> tuple[float, float]:
        n = blend_corner_exponent(t, corners)
        return (n, n)

    return resolve


def exponent_resolver(shape: ShapeSpec) -> ExponentResolver:
    """Validate a ShapeSpec and return its per-angle exponent lookup.

    Raises:
        InvalidGeometryError: If dimensions or exponents are not positive,
            or if the shape gives both or neither of exponent and corners
    """
    require_positive_dimensions(shape.width, shape.height)

    if (shape.exponent is None) == (shape.corners is None):
        raise InvalidGeometryError(
            "shape",
            shape,
            ErrorCode.INVALID_EXPONENT,
            requirement="needs exactly one of exponent or corners",
        )

    if shape.corners is not None:
        require_positive_corners(shape.corners)
        return _per_corner(shape.corners)

    require_positive_exponent(shape.exponent)
    return _uniform(shape.exponent, shape.exponent)


def _walk(width: float, height: float, steps: int, resolve: ExponentResolver) -> list[Point]:
    a = width / 2.0
    b = height / 2.0
    points: list[Point] = []

    for t in sample_angles(steps):
        nx, ny = resolve(t)
        points.append(Point(radius_x(t, a, nx) + a, radius_y(t, b, ny) + b))

    return points


def sample_outline(shape: ShapeSpec, steps: int = DEFAULT_STEPS) -> list[Point]:
    """Sample the un-rounded outline of a shape.

    Args:
        shape: Dimensions and exponent(s)
        steps: Number of angular intervals

    Returns:
        steps + 1 points in the local frame; the last equals the first

    Raises:
        InvalidGeometryError: On invalid geometry or steps
    """
    resolve = exponent_resolver(shape)
    require_valid_steps(steps)
    return _walk(shape.width, shape.height, steps, resolve)


def _format_coordinate(value: float, precision: int) -> str:
    # adding 0.0 turns a rounded -0.0 into 0.0
    rounded = round(value, precision) + 0.0
    return f"{rounded:.{precision}f}"


def format_path(points: Sequence[Point], precision: int = 2) -> str:
    """Serialize points as a closed move/line/close path descriptor.

    Args:
        points: Ordered outline points, at least one
        precision: Decimal digits kept per coordinate

    Returns:
        Path string "M x y L x y ... Z"
    """
    coords = [
        f"{_format_coordinate(p.x, precision)} {_format_coordinate(p.y, precision)}"
        for p in points
    ]
    return f"M {' L '.join(coords)} Z"


def _generate(
    width: float,
    height: float,
    resolve: ExponentResolver,
    options: SampleOptions | None,
) -> str:
    options = options or SampleOptions()
    require_valid_options(options)
    points = _walk(width, height, options.steps, resolve)
    return format_path(points, options.precision)


def generate_symmetric_path(
    width: float,
    height: float,
    exponent: float,
    options: SampleOptions | None = None,
) -> str:
    """Generate a superellipse path with one exponent for both axes.

    Args:
        width: Bounding box width, > 0
        height: Bounding box height, > 0
        exponent: Shape exponent, > 0 (2 gives an ellipse)
        options: Step count and precision (defaults: 360 steps, 2 digits)

    Returns:
        Closed path descriptor string

    Raises:
        InvalidGeometryError: If any input is out of range

    Examples:
        >>> path = generate_symmetric_path(100, 100, 2, SampleOptions(steps=4))
        >>> path
        'M 100.00 50.00 L 50.00 100.00 L 0.00 50.00 L 50.00 0.00 L 100.00 50.00 Z'
    """
    require_positive_dimensions(width, height)
    require_positive_exponent(exponent)
    return _generate(width, height, _uniform(exponent, exponent), options)


def generate_asymmetric_path(
    width: float,
    height: float,
    exponent_x: float,
    exponent_y: float,
    options: SampleOptions | None = None,
) -> str:
    """Generate a superellipse path with independent x and y exponents.

    Raises:
        InvalidGeometryError: If any input is out of range
    """
    require_positive_dimensions(width, height)
    require_positive_exponent(exponent_x, "exponent_x")
    require_positive_exponent(exponent_y, "exponent_y")
    return _generate(width, height, _uniform(exponent_x, exponent_y), options)


def generate_per_corner_path(
    width: float,
    height: float,
    corners: CornerExponents,
    options: SampleOptions | None = None,
) -> str:
    """Generate a superellipse path whose exponent varies per corner.

    At each sampled angle the corner exponents are blended into a single
    effective exponent that drives both the x and y terms.

    Raises:
        InvalidGeometryError: If dimensions or any corner exponent is
            out of range
    """
    require_positive_dimensions(width, height)
    require_positive_corners(corners)
    return _generate(width, height, _per_corner(corners), options)


def generate_path(shape: ShapeSpec, options: SampleOptions | None = None) -> str:
    """Generate the path for a ShapeSpec in uniform or per-corner mode."""
    resolve = exponent_resolver(shape)
    return _generate(shape.width, shape.height, resolve, options)


def recommended_steps(
    width: float,
    threshold: float = LARGE_SHAPE_THRESHOLD,
    base_steps: int = DEFAULT_STEPS,
    large_steps: int = LARGE_SHAPE_STEPS,
) -> int:
    """Pick a step count that keeps wide shapes smooth.

    Args:
        width: Bounding box width
        threshold: Widths above this use large_steps
        base_steps: Step count for ordinary shapes
        large_steps: Step count for wide shapes

    Returns:
        The step count to use
    """
    return large_steps if width > threshold else base_steps
