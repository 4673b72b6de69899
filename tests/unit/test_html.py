"""Unit tests for the HTML/SVG exporter."""

import json
import re
from pathlib import Path

import pytest

from polyaffine.config import HtmlConfig
from polyaffine.core.showcase import build_samples, run_normal_demo
from polyaffine.domain import Polygon
from polyaffine.exceptions import OutputWriteError, ValidationError
from polyaffine.render.html import HtmlExporter, svg_grid, svg_line, svg_polygon
from polyaffine.render.viewport import Viewport


@pytest.fixture
def exporter() -> HtmlExporter:
    return HtmlExporter(HtmlConfig())


class TestSvgFragments:
    """Tests for SVG fragment helpers."""

    def test_polygon_fragment(self) -> None:
        """Test polygon points and vertex markers."""
        tri = Polygon.from_coords([(0, 0), (10, 0), (0, 5)])
        vp = Viewport.fit(tri, width=120, height=70, padding=10)
        svg = svg_polygon(tri, "red", vp)
        assert 'points="10.00,60.00 110.00,60.00 10.00,10.00"' in svg
        assert svg.count('class="vertex"') == 3
        assert "data-from" not in svg

    def test_polygon_data_attributes(self) -> None:
        """Test animation endpoints are embedded as JSON."""
        tri = Polygon.from_coords([(0, 0), (10, 0), (0, 5)])
        vp = Viewport.fit(tri, width=120, height=70, padding=10)
        svg = svg_polygon(
            tri, "red", vp, element_id="poly-0", data_from=[(1.0, 2.0)], data_to=[(3.0, 4.0)]
        )
        assert 'id="poly-0"' in svg
        assert "data-from='[[1.0, 2.0]]'" in svg
        assert "data-to='[[3.0, 4.0]]'" in svg

    def test_line_label_escaped(self) -> None:
        """Test labels are HTML-escaped."""
        svg = svg_line((0, 0), (10, 10), "#fff", label="a<b")
        assert "a&lt;b" in svg
        assert 'x2="10.00"' in svg

    def test_grid(self) -> None:
        """Test grid pattern id and cell size."""
        grid = svg_grid("grid-7", 25.0, "#333333")
        assert 'id="grid-7"' in grid
        assert 'width="25.00"' in grid
        assert "url(#grid-7)" in grid


class TestHtmlExporter:
    """Tests for HtmlExporter class."""

    def test_one_animated_polygon_per_transform(self, exporter: HtmlExporter) -> None:
        """Test every non-original sample gets an animated polygon."""
        samples = build_samples()
        html = exporter.render(samples, run_normal_demo())
        ids = re.findall(r'id="(poly-\d+)"', html)
        assert ids == [f"poly-{i}" for i in range(len(samples) - 1)]

    def test_labels_present(self, exporter: HtmlExporter) -> None:
        """Test each sample label appears in the document."""
        samples = build_samples()
        html = exporter.render(samples, run_normal_demo())
        for sample in samples:
            assert sample.label in html

    def test_data_from_is_original_polygon(self, exporter: HtmlExporter) -> None:
        """Test animations start from the original polygon's vertices."""
        samples = build_samples()
        html = exporter.render(samples, run_normal_demo())
        froms = re.findall(r"data-from='([^']*)'", html)
        first = json.loads(froms[0])
        assert len(first) == len(samples[0].polygon)
        assert all(json.loads(f) == first for f in froms[: len(samples) - 1])

    def test_normal_row(self, exporter: HtmlExporter) -> None:
        """Test the tangent/normal diagram lines."""
        html = exporter.render(build_samples(), run_normal_demo())
        assert "grid-normal" in html
        assert "M·n (wrong)" in html
        assert "(M^-1)^T·n" in html
        assert html.count("<line") == 5

    def test_animation_duration(self) -> None:
        """Test the configured cycle length reaches the script."""
        exporter = HtmlExporter(HtmlConfig(animation_ms=3500))
        html = exporter.render(build_samples(), run_normal_demo())
        assert "const duration = 3500;" in html
        assert "(now / duration) % 1" in html

    def test_needs_two_samples(self, exporter: HtmlExporter) -> None:
        """Test the original alone cannot be exported."""
        with pytest.raises(ValidationError):
            exporter.render(build_samples()[:1], run_normal_demo())

    def test_write(self, exporter: HtmlExporter, tmp_path: Path) -> None:
        """Test the document is written to the given path."""
        out = tmp_path / "view.html"
        result = exporter.write(build_samples(), run_normal_demo(), out)
        assert result == out
        text = out.read_text(encoding="utf-8")
        assert text.startswith("<!DOCTYPE html>")

    def test_write_default_path(self, tmp_path: Path) -> None:
        """Test the configured output path is used when none is given."""
        exporter = HtmlExporter(HtmlConfig(output_path=tmp_path / "default.html"))
        result = exporter.write(build_samples(), run_normal_demo())
        assert result.exists()

    def test_write_failure(self, exporter: HtmlExporter, tmp_path: Path) -> None:
        """Test unwritable paths raise OutputWriteError."""
        out = tmp_path / "missing-dir" / "view.html"
        with pytest.raises(OutputWriteError):
            exporter.write(build_samples(), run_normal_demo(), out)
