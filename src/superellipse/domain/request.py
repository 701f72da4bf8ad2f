"""Path requests and results exchanged with the batch processor."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from superellipse.domain.shape import CornerExponents, SampleOptions
from superellipse.exceptions import InvalidRequestError


class PathMode(str, Enum):
    """How the exponent(s) of a path request are applied."""

    SYMMETRIC = "symmetric"
    ASYMMETRIC = "asymmetric"
    PER_CORNER = "per-corner"


@dataclass(frozen=True)
class PathRequest:
    """A single path generation request.

    Which exponent fields are required depends on ``mode``:
    - SYMMETRIC: exponent
    - ASYMMETRIC: exponent_x and exponent_y
    - PER_CORNER: corners
    """

    mode: PathMode
    width: float
    height: float
    exponent: float | None = None
    exponent_x: float | None = None
    exponent_y: float | None = None
    corners: CornerExponents | None = None
    options: SampleOptions = field(default_factory=SampleOptions)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "mode": self.mode.value,
            "width": self.width,
            "height": self.height,
            "exponent": self.exponent,
            "exponent_x": self.exponent_x,
            "exponent_y": self.exponent_y,
            "corners": self.corners.to_dict() if self.corners else None,
            "options": self.options.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathRequest":
        """Deserialize from dictionary.

        Raises:
            InvalidRequestError: If the mode is unknown or a required field
                is missing
        """
        raw_mode = data.get("mode", data.get("type"))
        try:
            mode = PathMode(raw_mode)
        except ValueError:
            raise InvalidRequestError(f"unknown path mode {raw_mode!r}") from None

        for key in ("width", "height"):
            if data.get(key) is None:
                raise InvalidRequestError(f"'{key}' is required")

        corners = data.get("corners")
        options = data.get("options")
        for key, value in (("corners", corners), ("options", options)):
            if value is not None and not isinstance(value, dict):
                raise InvalidRequestError(f"'{key}' must be an object")

        try:
            corner_exponents = CornerExponents.from_dict(corners) if corners else None
        except KeyError as e:
            raise InvalidRequestError(f"corner exponent {e} is required") from None

        return cls(
            mode=mode,
            width=data["width"],
            height=data["height"],
            exponent=data.get("exponent"),
            exponent_x=data.get("exponent_x"),
            exponent_y=data.get("exponent_y"),
            corners=corner_exponents,
            options=SampleOptions.from_dict(options or {}),
        )


@dataclass(frozen=True)
class PathResult:
    """Outcome of a path request.

    Attributes:
        success: Whether a path was produced
        path: Path descriptor on success
        error: Error message on failure
        code: Error code on failure
        calculation_time_ms: Time spent on the request
    """

    success: bool
    path: str | None = None
    error: str | None = None
    code: str | None = None
    calculation_time_ms: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, omitting empty fields."""
        data: dict[str, Any] = {
            "success": self.success,
            "calculation_time_ms": self.calculation_time_ms,
        }
        if self.path is not None:
            data["path"] = self.path
        if self.error is not None:
            data["error"] = self.error
        if self.code is not None:
            data["code"] = self.code
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathResult":
        """Deserialize from dictionary."""
        return cls(
            success=data["success"],
            path=data.get("path"),
            error=data.get("error"),
            code=data.get("code"),
            calculation_time_ms=data.get("calculation_time_ms", 0.0),
        )
