"""Angle sampling and the superellipse radius terms.

The curve is walked in its trigonometric parametric form:

    x(t) = a * sign(cos t) * |cos t|^(2/n)
    y(t) = b * sign(sin t) * |sin t|^(2/n)

with a = width / 2 and b = height / 2. Taking the power of the magnitude
and restoring the sign keeps every quadrant real-valued for any positive,
possibly fractional, exponent n.
"""

import math

# Trig values closer to zero than this are snapped to exactly zero, so the
# samples at t = pi/2, pi, 3*pi/2 and 2*pi sit on the axes for large n.
_ZERO_SNAP = 1e-12


def sample_angles(steps: int) -> list[float]:
    """Return steps + 1 evenly spaced angles covering one full turn.

    The last angle equals 2*pi, so the final sample closes the loop onto
    the first. ``steps`` must already be validated as a positive integer.

    Args:
        steps: Number of angular intervals

    Returns:
        Angles t_i = i * 2*pi / steps for i = 0..steps

    Examples:
        >>> sample_angles(4)
        [0.0, 1.5707963267948966, 3.141592653589793, 4.71238898038469, 6.283185307179586]
    """
    return [(i * 2.0 * math.pi) / steps for i in range(steps + 1)]


def signed_power(value: float, exponent: float) -> float:
    """Compute sign(value) * |value|^(2 / exponent).

    Args:
        value: A cosine or sine in [-1, 1]
        exponent: Superellipse exponent, > 0

    Returns:
        The signed power term, in [-1, 1]
    """
    if abs(value) < _ZERO_SNAP:
        return 0.0
    return math.copysign(abs(value) ** (2.0 / exponent), value)


def radius_x(t: float, a: float, exponent: float) -> float:
    """Horizontal offset of the curve from its center at angle t."""
    return a * signed_power(math.cos(t), exponent)


def radius_y(t: float, b: float, exponent: float) -> float:
    """Vertical offset of the curve from its center at angle t."""
    return b * signed_power(math.sin(t), exponent)
