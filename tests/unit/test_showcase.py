"""Unit tests for the sample builder and normal demo."""

import math

import pytest

from polyaffine.core.showcase import (
    DEMO_MATRIX,
    base_polygon,
    build_samples,
    run_normal_demo,
)
from polyaffine.domain import Point, Polygon
from polyaffine.exceptions import SingularMatrixError


class TestBuildSamples:
    """Tests for build_samples function."""

    def test_base_polygon(self) -> None:
        """Test the base quadrilateral."""
        assert base_polygon() == Polygon.from_coords([(1, 1), (4, 1), (3, 3), (1, 4)])

    def test_order_and_colors(self) -> None:
        """Test samples come in a fixed order with fixed colours."""
        samples = build_samples()
        assert [s.color for s in samples] == [
            "white",
            "red",
            "green",
            "yellow",
            "blue",
            "yellow",
            "orange",
        ]
        assert samples[0].label == "Original polygon"
        assert samples[1].label.startswith("Translate")
        assert samples[-1].label.startswith("General affine")

    def test_translate_sample(self) -> None:
        """Test the translate sample matches translate(2, -1)."""
        samples = build_samples()
        assert samples[1].polygon == Polygon.from_coords([(3, 0), (6, 0), (5, 2), (3, 3)])

    def test_scale_sample_keeps_centroid(self) -> None:
        """Test the scale sample grows in place."""
        samples = build_samples()
        cx, cy = samples[2].polygon.centroid()
        assert math.isclose(cx, 2.25)
        assert math.isclose(cy, 2.25)

    def test_custom_polygon(self) -> None:
        """Test samples can be built from any polygon."""
        tri = Polygon.from_coords([(0, 0), (2, 0), (0, 2)])
        samples = build_samples(tri)
        assert samples[0].polygon is tri
        assert all(len(s.polygon) == 3 for s in samples)


class TestNormalDemo:
    """Tests for run_normal_demo function."""

    def test_vectors(self) -> None:
        """Test tangent, normal and matrix of the default demo."""
        demo = run_normal_demo()
        assert demo.tangent == (3.0, 1.0)
        assert demo.normal == (-1.0, 3.0)
        assert demo.matrix == DEMO_MATRIX

    def test_corrected_normal_perpendicular(self) -> None:
        """Test the inverse-transpose normal stays perpendicular."""
        demo = run_normal_demo()
        assert abs(demo.corrected_dot) < 1e-9

    def test_naive_normal_not_perpendicular(self) -> None:
        """Test the naive normal drifts off perpendicular."""
        demo = run_normal_demo()
        assert abs(demo.naive_dot) > 0.1

    def test_transformed_tangent(self) -> None:
        """Test M·t for the default demo."""
        demo = run_normal_demo()
        assert math.isclose(demo.transformed_tangent[0], 4.9)
        assert math.isclose(demo.transformed_tangent[1], 0.5)

    def test_custom_edge(self) -> None:
        """Test the tangent follows the given edge."""
        demo = run_normal_demo(Point(1, 1), Point(1, 5))
        assert demo.tangent == (0.0, 4.0)
        assert demo.normal == (-4.0, 0.0)

    def test_singular_matrix(self) -> None:
        """Test a singular demo matrix propagates the error."""
        with pytest.raises(SingularMatrixError):
            run_normal_demo(matrix=((1.0, 2.0), (2.0, 4.0)))
