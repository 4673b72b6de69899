"""Presentation adapters for polyaffine.

Adapters only read samples and demo vectors produced by polyaffine.core.

Key classes:
- Viewport: Canvas-fit scaling shared by the graphical adapters
- HtmlExporter: Static HTML page with animated before/after SVG panels
- WindowRenderer: Interactive matplotlib window (requires the gui extra)
"""

from polyaffine.render.html import HtmlExporter
from polyaffine.render.viewport import Viewport
from polyaffine.render.window import WindowRenderer

__all__ = [
    "HtmlExporter",
    "Viewport",
    "WindowRenderer",
]
