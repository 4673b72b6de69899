"""Canvas-fit scaling shared by the graphical adapters.

Maps world coordinates onto a pixel canvas whose origin is the top-left
corner: the bounding box of all points is padded by a fixed margin, scaled
uniformly by the smaller axis factor, and the y-axis is flipped.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from polyaffine.domain import Point, Polygon
from polyaffine.exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class Viewport:
    """World-to-screen mapping for a fixed-size canvas.

    Attributes:
        min_x: Smallest world x of the fitted points
        min_y: Smallest world y of the fitted points
        scale: Pixels per world unit (same on both axes)
        padding: Margin in pixels
        width: Canvas width in pixels
        height: Canvas height in pixels
    """

    min_x: float
    min_y: float
    scale: float
    padding: float
    width: float
    height: float

    @classmethod
    def from_bounds(
        cls,
        bounds: tuple[float, float, float, float],
        width: float,
        height: float,
        padding: float,
    ) -> "Viewport":
        """Fit a (min_x, min_y, max_x, max_y) box inside a width x height canvas.

        A zero extent along either axis is treated as 1.0.

        Args:
            bounds: World bounding box that must be visible
            width: Canvas width in pixels
            height: Canvas height in pixels
            padding: Margin in pixels on every side

        Returns:
            Viewport instance
        """
        min_x, min_y, max_x, max_y = bounds
        range_x = abs(max_x - min_x) or 1.0
        range_y = abs(max_y - min_y) or 1.0

        scale_x = (width - 2 * padding) / range_x
        scale_y = (height - 2 * padding) / range_y

        return cls(
            min_x=min_x,
            min_y=min_y,
            scale=min(scale_x, scale_y),
            padding=padding,
            width=width,
            height=height,
        )

    @classmethod
    def fit(
        cls,
        points: Iterable[Point],
        width: float,
        height: float,
        padding: float,
    ) -> "Viewport":
        """Fit all points inside a width x height canvas.

        Raises:
            ValidationError: If points is empty
        """
        pts = list(points)
        if not pts:
            raise ValidationError("Cannot fit a viewport to an empty point set")

        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls.from_bounds((min(xs), min(ys), max(xs), max(ys)), width, height, padding)

    @classmethod
    def fit_polygons(
        cls,
        polygons: Iterable[Polygon],
        width: float,
        height: float,
        padding: float,
    ) -> "Viewport":
        """Fit the combined bounding box of several polygons.

        Raises:
            ValidationError: If polygons is empty
        """
        boxes = [polygon.bounding_box() for polygon in polygons]
        if not boxes:
            raise ValidationError("Cannot fit a viewport to no polygons")

        bounds = (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )
        return cls.from_bounds(bounds, width, height, padding)

    def to_screen(self, point: Point) -> tuple[float, float]:
        """Convert a world point to canvas pixels (y grows downward)."""
        sx = self.padding + (point.x - self.min_x) * self.scale
        sy = self.padding + (point.y - self.min_y) * self.scale
        return (sx, self.height - sy)

    def vector_to_screen(
        self, origin: Point, vector: tuple[float, float]
    ) -> tuple[float, float]:
        """Screen position of the tip of vector drawn from origin."""
        return self.to_screen(Point(origin.x + vector[0], origin.y + vector[1]))
