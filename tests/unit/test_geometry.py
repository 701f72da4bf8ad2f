"""Tests for polygon measurement helpers."""

import pytest

from superellipse.core.geometry import polyline_length, signed_area
from superellipse.domain import Point

SQUARE = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]


class TestSignedArea:
    """Tests for signed_area."""

    def test_winding_sets_sign(self) -> None:
        """Test reversing the vertex order flips the sign."""
        assert signed_area(SQUARE) == pytest.approx(4.0)
        assert signed_area(list(reversed(SQUARE))) == pytest.approx(-4.0)

    def test_repeated_closing_vertex(self) -> None:
        """Test a repeated first vertex does not change the area."""
        assert signed_area([*SQUARE, SQUARE[0]]) == pytest.approx(4.0)

    def test_degenerate(self) -> None:
        """Test fewer than three points have no area."""
        assert signed_area(SQUARE[:2]) == 0.0


class TestPolylineLength:
    """Tests for polyline_length."""

    def test_open_polyline(self) -> None:
        """Test an open polyline omits the closing edge."""
        assert polyline_length(SQUARE) == pytest.approx(6.0)

    def test_closing_vertex_counts_last_edge(self) -> None:
        """Test repeating the first vertex measures the full loop."""
        assert polyline_length([*SQUARE, SQUARE[0]]) == pytest.approx(8.0)

    def test_short_input(self) -> None:
        """Test fewer than two points have no length."""
        assert polyline_length([]) == 0.0
        assert polyline_length([Point(1.0, 1.0)]) == 0.0
