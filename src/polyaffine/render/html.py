"""Static HTML export with animated before/after SVG panels.

Each transform sample gets a row of two SVG panels: the original polygon on
the left and the transformed polygon on the right. The transformed polygon
carries its start and end screen coordinates in ``data-from`` / ``data-to``
attributes, and a small script loops a cosine-eased interpolation between
them. A final row shows the tangent/normal demo the same way.
"""

import json
from html import escape
from pathlib import Path

from polyaffine.config import HtmlConfig
from polyaffine.core.showcase import NormalDemo, TransformSample
from polyaffine.domain import Point, Polygon
from polyaffine.exceptions import OutputWriteError, ValidationError
from polyaffine.render.viewport import Viewport
from polyaffine.utils import get_logger

ORIGINAL_STROKE = "#aaaaaa"
TANGENT_COLOR = "#00aaff"
NORMAL_COLOR = "#aaaaaa"
WRONG_COLOR = "#ff5555"
RIGHT_COLOR = "#55ff88"

SVG_NS = "http://www.w3.org/2000/svg"

_SCRIPT = """\
(function () {
  const duration = %(duration)d;
  const polygons = Array.from(document.querySelectorAll("polygon[id^='poly-']"));
  const animLines = Array.from(document.querySelectorAll("line[data-from][data-to]"));

  const datasets = polygons.map((poly) => {
    const from = JSON.parse(poly.getAttribute("data-from"));
    const to = JSON.parse(poly.getAttribute("data-to"));
    const svg = poly.closest("svg");
    const circles = Array.from(svg.querySelectorAll(".vertex"));
    return { poly, from, to, circles };
  });

  function lerp(a, b, t) { return a + (b - a) * t; }

  function render(now) {
    const t = ((now / duration) %% 1);
    const ease = 0.5 - 0.5 * Math.cos(2 * Math.PI * t);

    datasets.forEach(({ poly, from, to, circles }) => {
      const pts = from.map((p, idx) => [
        lerp(p[0], to[idx][0], ease),
        lerp(p[1], to[idx][1], ease)
      ]);
      poly.setAttribute("points", pts.map((p) => p.join(",")).join(" "));
      circles.forEach((c, idx) => {
        c.setAttribute("cx", pts[idx][0]);
        c.setAttribute("cy", pts[idx][1]);
      });
    });

    animLines.forEach((line) => {
      const from = JSON.parse(line.getAttribute("data-from"));
      const to = JSON.parse(line.getAttribute("data-to"));
      line.setAttribute("x2", lerp(from[0], to[0], ease));
      line.setAttribute("y2", lerp(from[1], to[1], ease));
    });

    requestAnimationFrame(render);
  }

  requestAnimationFrame(render);
})();
"""


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def _data_attrs(data_from: object | None, data_to: object | None) -> str:
    attrs = ""
    if data_from is not None:
        attrs += f" data-from='{json.dumps(data_from)}'"
    if data_to is not None:
        attrs += f" data-to='{json.dumps(data_to)}'"
    return attrs


def svg_grid(grid_id: str, size: float, color: str) -> str:
    """Background grid pattern with cells of size pixels."""
    s = _fmt(size)
    return (
        "<defs>"
        f'<pattern id="{grid_id}" width="{s}" height="{s}" patternUnits="userSpaceOnUse">'
        f'<path d="M {s} 0 L 0 0 0 {s}" fill="none" stroke="{color}" stroke-width="1" />'
        "</pattern>"
        "</defs>"
        f'<rect width="100%" height="100%" fill="url(#{grid_id})" />'
    )


def svg_polygon(
    polygon: Polygon,
    color: str,
    viewport: Viewport,
    element_id: str | None = None,
    data_from: list[tuple[float, float]] | None = None,
    data_to: list[tuple[float, float]] | None = None,
) -> str:
    """Render a polygon outline and its vertex markers.

    Args:
        polygon: Polygon to draw
        color: Stroke and vertex colour
        viewport: World-to-screen mapping
        element_id: Optional id of the <polygon> element
        data_from: Screen vertices the animation starts from
        data_to: Screen vertices the animation ends at

    Returns:
        SVG <g> fragment
    """
    pts = [viewport.to_screen(p) for p in polygon]
    point_str = " ".join(f"{_fmt(x)},{_fmt(y)}" for x, y in pts)
    id_attr = f' id="{escape(element_id)}"' if element_id else ""
    circles = "".join(
        f'<circle class="vertex" data-idx="{idx}" cx="{_fmt(x)}" cy="{_fmt(y)}" '
        f'r="4" fill="{color}" />'
        for idx, (x, y) in enumerate(pts)
    )
    return (
        "<g>"
        f'<polygon{id_attr}{_data_attrs(data_from, data_to)} points="{point_str}" '
        f'fill="none" stroke="{color}" stroke-width="2" />'
        f"{circles}"
        "</g>"
    )


def svg_line(
    start: tuple[float, float],
    end: tuple[float, float],
    color: str,
    label: str | None = None,
    data_from: tuple[float, float] | None = None,
    data_to: tuple[float, float] | None = None,
) -> str:
    """Render a line segment in screen coordinates with an optional tip label."""
    x1, y1 = start
    x2, y2 = end
    label_tag = ""
    if label:
        label_tag = (
            f'<text x="{_fmt(x2 + 4)}" y="{_fmt(y2 - 4)}" fill="{color}" '
            f'font-size="12">{escape(label)}</text>'
        )
    return (
        f'<line x1="{_fmt(x1)}" y1="{_fmt(y1)}" x2="{_fmt(x2)}" y2="{_fmt(y2)}" '
        f'stroke="{color}" stroke-width="2"{_data_attrs(data_from, data_to)} />'
        f"{label_tag}"
    )


class HtmlExporter:
    """Builds the animated before/after document.

    Every panel shares one viewport fitted to the points of all samples, so
    translations and scales are visible as movement between panels.
    """

    def __init__(self, config: HtmlConfig | None = None) -> None:
        self.config = config or HtmlConfig()
        self._logger = get_logger("polyaffine.render.html")

    def _svg(self, width: int, height: int, body: str) -> str:
        return (
            f'<svg viewBox="0 0 {width} {height}" width="{width}" height="{height}" '
            f'xmlns="{SVG_NS}">{body}</svg>'
        )

    def _row(self, left_caption: str, left: str, label: str, right_caption: str, right: str) -> str:
        return (
            '<div class="row">'
            f'<div class="cell"><div class="caption">{escape(left_caption)}</div>{left}</div>'
            f'<div class="label">{escape(label)}</div>'
            f'<div class="cell"><div class="caption">{escape(right_caption)}</div>{right}</div>'
            "</div>"
        )

    def render_sample_rows(
        self, samples: list[TransformSample], viewport: Viewport
    ) -> list[str]:
        """One row per transformed sample, compared against the first sample."""
        cfg = self.config
        original = samples[0]
        from_pts = [viewport.to_screen(p) for p in original.polygon]

        rows = []
        for i, sample in enumerate(samples[1:]):
            grid = svg_grid(f"grid-{i}", viewport.scale, cfg.grid_color)
            left = self._svg(
                cfg.width,
                cfg.height,
                grid + svg_polygon(original.polygon, ORIGINAL_STROKE, viewport),
            )
            to_pts = [viewport.to_screen(p) for p in sample.polygon]
            right = self._svg(
                cfg.width,
                cfg.height,
                grid
                + svg_polygon(
                    sample.polygon,
                    sample.color,
                    viewport,
                    element_id=f"poly-{i}",
                    data_from=from_pts,
                    data_to=to_pts,
                ),
            )
            rows.append(
                self._row(original.label, left, sample.label, "Transformed polygon", right)
            )
        return rows

    def render_normal_row(self, demo: NormalDemo, grid_size: float) -> str:
        """Tangent/normal row: original t and n, then M·t, M·n and (M^-1)^T·n."""
        cfg = self.config
        vectors = [
            (0.0, 0.0),
            demo.tangent,
            demo.normal,
            demo.transformed_tangent,
            demo.naive_normal,
            demo.corrected_normal,
        ]
        viewport = Viewport.fit(
            (Point(x, y) for x, y in vectors),
            cfg.normal_width,
            cfg.normal_height,
            cfg.padding,
        )
        origin = Point(0, 0)
        o0 = viewport.to_screen(origin)
        o_tan = viewport.vector_to_screen(origin, demo.tangent)
        o_norm = viewport.vector_to_screen(origin, demo.normal)
        t_tan = viewport.vector_to_screen(origin, demo.transformed_tangent)
        t_wrong = viewport.vector_to_screen(origin, demo.naive_normal)
        t_right = viewport.vector_to_screen(origin, demo.corrected_normal)

        grid = svg_grid("grid-normal", grid_size, cfg.grid_color)
        left = self._svg(
            cfg.normal_width,
            cfg.normal_height,
            grid
            + svg_line(o0, o_tan, TANGENT_COLOR, "t")
            + svg_line(o0, o_norm, NORMAL_COLOR, "n"),
        )
        right = self._svg(
            cfg.normal_width,
            cfg.normal_height,
            grid
            + svg_line(o0, t_tan, TANGENT_COLOR, "M·t", data_from=o_tan, data_to=t_tan)
            + svg_line(o0, t_wrong, WRONG_COLOR, "M·n (wrong)", data_from=o_norm, data_to=t_wrong)
            + svg_line(o0, t_right, RIGHT_COLOR, "(M^-1)^T·n", data_from=o_norm, data_to=t_right),
        )
        return self._row(
            "Original tangent / normal",
            left,
            "Normal transformation (wrong vs correct)",
            "Transformed (t, n)",
            right,
        )

    def render(self, samples: list[TransformSample], demo: NormalDemo) -> str:
        """Render the full HTML document.

        Args:
            samples: Ordered samples; the first is the untransformed polygon
            demo: Tangent/normal comparison

        Returns:
            HTML document as a string

        Raises:
            ValidationError: If fewer than two samples are given
        """
        if len(samples) < 2:
            raise ValidationError("HTML export needs the original and at least one transform")

        cfg = self.config
        viewport = Viewport.fit_polygons(
            (sample.polygon for sample in samples),
            cfg.width,
            cfg.height,
            cfg.padding,
        )
        rows = self.render_sample_rows(samples, viewport)
        rows.append(self.render_normal_row(demo, viewport.scale))
        body = "\n".join(rows)
        script = _SCRIPT % {"duration": cfg.animation_ms}

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>Affine Transformations</title>
  <style>
    body {{ margin: 0; background: {cfg.background}; color: #fff; font-family: Arial, sans-serif; }}
    .wrapper {{ max-width: 1200px; margin: 20px auto 40px; padding: 0 16px; }}
    .row {{ display: flex; align-items: center; gap: 16px; margin: 16px 0; }}
    .cell {{ display: flex; flex-direction: column; align-items: center; gap: 6px; }}
    .caption {{ font-size: 12px; color: #bbbbbb; }}
    .label {{ flex: 0 0 260px; text-align: center; font-size: 14px; }}
    svg {{ display: block; background: {cfg.background}; border: 1px solid #222; }}
  </style>
</head>
<body>
  <div class="wrapper">
{body}
  </div>
  <script>
{script}
  </script>
</body>
</html>
"""

    def write(
        self,
        samples: list[TransformSample],
        demo: NormalDemo,
        path: Path | None = None,
    ) -> Path:
        """Render and write the document.

        Args:
            samples: Ordered samples; the first is the untransformed polygon
            demo: Tangent/normal comparison
            path: Output file (defaults to config.output_path)

        Returns:
            Path the document was written to

        Raises:
            OutputWriteError: If the file cannot be written
        """
        output_path = path or self.config.output_path
        document = self.render(samples, demo)
        try:
            output_path.write_text(document, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), str(e)) from e

        self._logger.info(
            "HTML written",
            path=str(output_path),
            panels=len(samples) - 1,
            size=len(document),
        )
        return output_path
