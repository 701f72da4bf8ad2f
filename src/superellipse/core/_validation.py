"""Input checks shared by path generation and metrics estimation."""

import math
from numbers import Integral, Real

from superellipse.domain import CornerExponents, SampleOptions
from superellipse.exceptions import ErrorCode, InvalidGeometryError


def _is_positive_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value > 0


def require_positive_dimensions(width: float, height: float) -> None:
    """Reject non-positive or non-finite width and height."""
    for name, value in (("width", width), ("height", height)):
        if not _is_positive_number(value):
            raise InvalidGeometryError(name, value, ErrorCode.INVALID_DIMENSIONS)


def require_positive_exponent(value: float, name: str = "exponent") -> None:
    """Reject a non-positive or non-finite exponent."""
    if not _is_positive_number(value):
        raise InvalidGeometryError(name, value, ErrorCode.INVALID_EXPONENT)


def require_positive_corners(corners: CornerExponents) -> None:
    """Reject corner exponents unless all four are positive."""
    if not isinstance(corners, CornerExponents):
        raise InvalidGeometryError(
            "corners",
            corners,
            ErrorCode.INVALID_EXPONENT,
            requirement="must be a CornerExponents value",
        )
    for name, value in corners.to_dict().items():
        require_positive_exponent(value, name)


def require_valid_steps(steps: int) -> None:
    """Reject step counts that cannot form a closed shape."""
    if isinstance(steps, bool) or not isinstance(steps, Integral) or steps <= 0:
        raise InvalidGeometryError(
            "steps",
            steps,
            ErrorCode.INVALID_SAMPLING,
            requirement="must be a positive integer",
        )


def require_valid_options(options: SampleOptions) -> None:
    """Reject non-positive steps or negative precision."""
    require_valid_steps(options.steps)
    precision = options.precision
    if isinstance(precision, bool) or not isinstance(precision, Integral) or precision < 0:
        raise InvalidGeometryError(
            "precision",
            precision,
            ErrorCode.INVALID_SAMPLING,
            requirement="must be a non-negative integer",
        )
