"""Interactive window showing every sample polygon on one canvas.

Uses matplotlib, installed with the ``gui`` extra. Polygons are mapped
through a Viewport so the drawing fills a fixed pixel canvas, then plotted
with a top-left origin.
"""

from typing import Any

from polyaffine.config import WindowConfig
from polyaffine.core.showcase import TransformSample
from polyaffine.exceptions import BackendUnavailableError, ValidationError
from polyaffine.render.viewport import Viewport
from polyaffine.utils import get_logger

DPI = 100


def _load_pyplot() -> Any:
    try:
        import matplotlib.pyplot as plt
    except ImportError as e:
        raise BackendUnavailableError(
            "matplotlib", "Install with: pip install 'polyaffine[gui]'"
        ) from e
    return plt


class WindowRenderer:
    """Draws samples as coloured closed outlines with vertex markers."""

    def __init__(self, config: WindowConfig | None = None) -> None:
        self.config = config or WindowConfig()
        self._logger = get_logger("polyaffine.render.window")

    def draw(self, samples: list[TransformSample]) -> Any:
        """Build the figure without showing it.

        Args:
            samples: Samples to draw, each in its own colour

        Returns:
            The matplotlib Figure

        Raises:
            ValidationError: If samples is empty
            BackendUnavailableError: If matplotlib is not installed
        """
        if not samples:
            raise ValidationError("Nothing to draw")

        plt = _load_pyplot()
        cfg = self.config
        viewport = Viewport.fit_polygons(
            (sample.polygon for sample in samples),
            cfg.width,
            cfg.height,
            cfg.padding,
        )

        fig = plt.figure(figsize=(cfg.width / DPI, cfg.height / DPI), dpi=DPI)
        fig.patch.set_facecolor(cfg.background)
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_facecolor(cfg.background)
        ax.set_xlim(0, cfg.width)
        ax.set_ylim(cfg.height, 0)
        ax.set_aspect("equal")
        ax.axis("off")

        for sample in samples:
            pts = [viewport.to_screen(p) for p in sample.polygon]
            closed = pts + pts[:1]
            ax.plot(
                [x for x, _ in closed],
                [y for _, y in closed],
                color=sample.color,
                linewidth=cfg.line_width,
            )
            ax.scatter(
                [x for x, _ in pts],
                [y for _, y in pts],
                s=(2 * cfg.vertex_radius) ** 2,
                color=sample.color,
                zorder=3,
            )
            lx, ly = pts[0]
            ax.text(lx + 6, ly + 6, sample.label, color=sample.color, fontsize=11, va="top")

        self._logger.debug("Window figure built", polygons=len(samples), scale=viewport.scale)
        return fig

    def show(self, samples: list[TransformSample]) -> None:
        """Draw the samples and block until the window is closed."""
        fig = self.draw(samples)
        plt = _load_pyplot()
        if fig.canvas.manager is not None:
            fig.canvas.manager.set_window_title("Affine Transformations")
        plt.show()
