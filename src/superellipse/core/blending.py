"""Per-corner exponent blending.

The full turn is split into four quadrants of width pi/2. Each quadrant
runs from one corner exponent to the next, and the effective exponent at
an angle is the linear interpolation between the two. The blend is
continuous across quadrant boundaries, including the wrap at 2*pi, and
reduces to the uniform exponent when all four corners are equal.
"""

import math

from superellipse.domain import CornerExponents

_QUARTER_TURN = math.pi / 2.0
_FULL_TURN = 2.0 * math.pi

# (start corner, end corner) for each quadrant, in angle order.
QUADRANT_CORNERS: tuple[tuple[str, str], ...] = (
    ("top_right", "bottom_right"),
    ("bottom_right", "bottom_left"),
    ("bottom_left", "top_left"),
    ("top_left", "top_right"),
)


def normalize_angle(t: float) -> float:
    """Map any real angle into [0, 2*pi)."""
    angle = math.fmod(t, _FULL_TURN)
    if angle < 0:
        angle += _FULL_TURN
    # fmod of a tiny negative angle can round back up to a full turn
    if angle >= _FULL_TURN:
        angle = 0.0
    return angle


def quadrant_position(t: float) -> tuple[int, float]:
    """Locate an angle within its quadrant.

    Args:
        t: Angle in radians, any real value

    Returns:
        Tuple of (quadrant index 0-3, fractional position in [0, 1))
    """
    angle = normalize_angle(t)
    quadrant = min(int(angle // _QUARTER_TURN), 3)
    fraction = (angle - quadrant * _QUARTER_TURN) / _QUARTER_TURN
    return quadrant, min(max(fraction, 0.0), 1.0)


def blend_corner_exponent(t: float, corners: CornerExponents) -> float:
    """Return the effective exponent at angle t.

    Args:
        t: Angle in radians, any real value
        corners: Exponents for the four corners

    Returns:
        start * (1 - f) + end * f for the quadrant containing t

    Examples:
        >>> corners = CornerExponents(top_left=2, top_right=4, bottom_right=8, bottom_left=2)
        >>> blend_corner_exponent(0.0, corners)
        4.0
        >>> blend_corner_exponent(math.pi / 4, corners)
        6.0
    """
    quadrant, fraction = quadrant_position(t)
    start_name, end_name = QUADRANT_CORNERS[quadrant]
    start = getattr(corners, start_name)
    end = getattr(corners, end_name)
    return start * (1.0 - fraction) + end * fraction
