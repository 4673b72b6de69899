"""Unit tests for the matplotlib window renderer."""

import sys
from unittest.mock import patch

import pytest

from polyaffine.config import WindowConfig
from polyaffine.core.showcase import build_samples
from polyaffine.exceptions import BackendUnavailableError, ValidationError
from polyaffine.render.window import WindowRenderer

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")


class TestWindowRenderer:
    """Tests for WindowRenderer class."""

    def test_draw_one_outline_per_sample(self) -> None:
        """Test each sample gets a closed outline and a label."""
        import matplotlib.pyplot as plt

        samples = build_samples()
        fig = WindowRenderer(WindowConfig()).draw(samples)
        try:
            ax = fig.axes[0]
            assert len(ax.lines) == len(samples)
            assert [t.get_text() for t in ax.texts] == [s.label for s in samples]
            xs = ax.lines[0].get_xdata()
            assert len(xs) == len(samples[0].polygon) + 1
            assert xs[0] == xs[-1]
        finally:
            plt.close(fig)

    def test_canvas_size(self) -> None:
        """Test the figure matches the configured canvas."""
        import matplotlib.pyplot as plt

        fig = WindowRenderer(WindowConfig(width=800, height=600)).draw(build_samples())
        try:
            width, height = fig.get_size_inches() * fig.dpi
            assert round(width) == 800
            assert round(height) == 600
            assert fig.axes[0].get_ylim() == (600.0, 0.0)
        finally:
            plt.close(fig)

    def test_empty_samples(self) -> None:
        """Test drawing nothing fails validation."""
        with pytest.raises(ValidationError):
            WindowRenderer().draw([])

    def test_missing_backend(self) -> None:
        """Test a missing matplotlib is reported as BackendUnavailableError."""
        with patch.dict(sys.modules, {"matplotlib.pyplot": None}):
            with pytest.raises(BackendUnavailableError, match="matplotlib"):
                WindowRenderer().draw(build_samples())

    def test_show_calls_pyplot(self) -> None:
        """Test show() hands the figure to pyplot."""
        import matplotlib.pyplot as plt

        with patch.object(plt, "show") as mock_show:
            WindowRenderer().show(build_samples())
        mock_show.assert_called_once()
        plt.close("all")
