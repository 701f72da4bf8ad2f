"""Tests for domain models to verify they work correctly."""

import pytest

from superellipse.domain import (
    CornerExponents,
    Metrics,
    PathMode,
    PathRequest,
    PathResult,
    Point,
    SampleOptions,
    ShapeSpec,
)
from superellipse.exceptions import InvalidRequestError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(12.5, -3.0)
        assert Point.from_dict(p1.to_dict()) == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestCornerExponents:
    """Tests for CornerExponents class."""

    def test_uniform(self) -> None:
        """Test uniform corners share one value."""
        corners = CornerExponents.uniform(4.0)
        assert corners.as_tuple() == (4.0, 4.0, 4.0, 4.0)
        assert corners.is_uniform()

    def test_not_uniform(self) -> None:
        """Test differing corners are not uniform."""
        corners = CornerExponents(top_left=2, top_right=4, bottom_right=2, bottom_left=4)
        assert not corners.is_uniform()

    def test_tuple_order(self) -> None:
        """Test as_tuple runs clockwise from the top-left."""
        corners = CornerExponents(top_left=1, top_right=2, bottom_right=3, bottom_left=4)
        assert corners.as_tuple() == (1, 2, 3, 4)

    def test_serialization(self) -> None:
        """Test corner exponents serialize by name."""
        corners = CornerExponents(top_left=1, top_right=2, bottom_right=3, bottom_left=4)
        data = corners.to_dict()
        assert data["bottom_right"] == 3
        assert CornerExponents.from_dict(data) == corners


class TestShapeSpec:
    """Tests for ShapeSpec class."""

    def test_uniform_spec(self) -> None:
        """Test a spec with a single exponent."""
        spec = ShapeSpec(320, 400, exponent=4)
        assert not spec.is_per_corner

    def test_per_corner_spec(self) -> None:
        """Test a spec with corner exponents."""
        spec = ShapeSpec(320, 400, corners=CornerExponents.uniform(3))
        assert spec.is_per_corner

    def test_scaled(self) -> None:
        """Test scaling keeps the exponents."""
        spec = ShapeSpec(100, 50, exponent=3).scaled(2.5)
        assert spec.width == 250
        assert spec.height == 125
        assert spec.exponent == 3

    def test_serialization(self) -> None:
        """Test spec serialization and deserialization."""
        spec = ShapeSpec(10, 20, corners=CornerExponents(1, 2, 3, 4))
        assert ShapeSpec.from_dict(spec.to_dict()) == spec


class TestSampleOptions:
    """Tests for SampleOptions class."""

    def test_defaults(self) -> None:
        """Test default steps and precision."""
        options = SampleOptions()
        assert options.steps == 360
        assert options.precision == 2

    def test_from_partial_dict(self) -> None:
        """Test missing keys fall back to defaults."""
        options = SampleOptions.from_dict({"precision": 4})
        assert options.steps == 360
        assert options.precision == 4


class TestMetrics:
    """Tests for Metrics class."""

    def test_to_dict(self) -> None:
        """Test metrics serialize both values."""
        assert Metrics(perimeter=314.1, area=7853.9).to_dict() == {
            "perimeter": 314.1,
            "area": 7853.9,
        }


class TestPathRequest:
    """Tests for PathRequest class."""

    def test_serialization(self) -> None:
        """Test requests survive serialization for worker processes."""
        request = PathRequest(
            mode=PathMode.PER_CORNER,
            width=200,
            height=100,
            corners=CornerExponents(2, 6, 2, 6),
            options=SampleOptions(steps=90, precision=1),
        )
        data = request.to_dict()
        assert data["mode"] == "per-corner"
        assert PathRequest.from_dict(data) == request

    def test_type_alias_for_mode(self) -> None:
        """Test "type" is accepted in place of "mode"."""
        request = PathRequest.from_dict(
            {"type": "symmetric", "width": 1, "height": 2, "exponent": 3}
        )
        assert request.mode == PathMode.SYMMETRIC

    def test_unknown_mode(self) -> None:
        """Test unknown modes are rejected."""
        with pytest.raises(InvalidRequestError, match="unknown path mode"):
            PathRequest.from_dict({"mode": "circle", "width": 1, "height": 1})

    def test_missing_mode(self) -> None:
        """Test a request without a mode is rejected."""
        with pytest.raises(InvalidRequestError):
            PathRequest.from_dict({"width": 1, "height": 1})

    def test_missing_dimension(self) -> None:
        """Test width and height are required."""
        with pytest.raises(InvalidRequestError, match="'height' is required"):
            PathRequest.from_dict({"mode": "symmetric", "width": 1, "exponent": 2})


class TestPathResult:
    """Tests for PathResult class."""

    def test_success_omits_error_fields(self) -> None:
        """Test a successful result only carries its path."""
        data = PathResult(success=True, path="M 0 0 Z", calculation_time_ms=0.5).to_dict()
        assert data == {"success": True, "path": "M 0 0 Z", "calculation_time_ms": 0.5}

    def test_failure_round_trip(self) -> None:
        """Test a failed result survives serialization."""
        result = PathResult(success=False, error="bad width", code="E_INVALID_DIMENSIONS")
        assert PathResult.from_dict(result.to_dict()) == result
