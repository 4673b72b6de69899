"""Unit tests for canvas-fit scaling."""

import pytest

from polyaffine.domain import Point, Polygon
from polyaffine.exceptions import ValidationError
from polyaffine.render.viewport import Viewport


class TestViewport:
    """Tests for Viewport class."""

    def test_corners_map_to_padded_canvas(self) -> None:
        """Test bbox corners land on the padded canvas corners, y flipped."""
        vp = Viewport.fit([Point(0, 0), Point(10, 5)], width=120, height=70, padding=10)
        assert vp.scale == 10.0
        assert vp.to_screen(Point(0, 0)) == (10.0, 60.0)
        assert vp.to_screen(Point(10, 5)) == (110.0, 10.0)

    def test_uniform_scale_uses_smaller_factor(self) -> None:
        """Test the tighter axis decides the scale."""
        vp = Viewport.fit([Point(0, 0), Point(10, 10)], width=220, height=120, padding=10)
        assert vp.scale == 10.0

    def test_degenerate_extent(self) -> None:
        """Test a single point uses unit ranges."""
        vp = Viewport.fit([Point(2, 3)], width=120, height=70, padding=10)
        assert vp.scale == 50.0
        assert vp.to_screen(Point(2, 3)) == (10.0, 60.0)

    def test_empty_rejected(self) -> None:
        """Test fitting nothing fails validation."""
        with pytest.raises(ValidationError):
            Viewport.fit([], width=100, height=100, padding=0)

    def test_vector_to_screen(self) -> None:
        """Test vector tips are offset from the origin point."""
        vp = Viewport.fit([Point(0, 0), Point(10, 5)], width=120, height=70, padding=10)
        assert vp.vector_to_screen(Point(0, 0), (10, 5)) == (110.0, 10.0)

    def test_accepts_generator(self) -> None:
        """Test points can be any iterable."""
        vp = Viewport.fit((Point(x, x) for x in range(3)), width=100, height=100, padding=0)
        assert vp.min_x == 0.0
        assert vp.scale == 50.0

    def test_from_bounds(self) -> None:
        """Test fitting an explicit bounding box."""
        vp = Viewport.from_bounds((0.0, 0.0, 10.0, 5.0), width=120, height=70, padding=10)
        assert vp.scale == 10.0
        assert vp.to_screen(Point(10, 5)) == (110.0, 10.0)

    def test_fit_polygons_uses_combined_bounds(self) -> None:
        """Test several polygons share one viewport covering them all."""
        left = Polygon.from_coords([(0, 0), (2, 0), (0, 5)])
        right = Polygon.from_coords([(8, 1), (10, 1), (10, 3)])
        vp = Viewport.fit_polygons([left, right], width=120, height=70, padding=10)
        assert (vp.min_x, vp.min_y) == (0.0, 0.0)
        assert vp.scale == 10.0
        assert vp.to_screen(Point(10, 5)) == (110.0, 10.0)

    def test_fit_polygons_matches_point_fit(self) -> None:
        """Test polygon fitting agrees with fitting their vertices."""
        polys = [
            Polygon.from_coords([(1, 1), (4, 1), (3, 3), (1, 4)]),
            Polygon.from_coords([(-2, 0.5), (0, 7), (1, 1)]),
        ]
        by_points = Viewport.fit((p for poly in polys for p in poly), 320, 260, 40)
        assert Viewport.fit_polygons(polys, 320, 260, 40) == by_points

    def test_fit_polygons_empty_rejected(self) -> None:
        """Test fitting no polygons fails validation."""
        with pytest.raises(ValidationError):
            Viewport.fit_polygons([], width=100, height=100, padding=0)
