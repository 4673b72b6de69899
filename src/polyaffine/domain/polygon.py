"""Polygon value type and its affine transforms.

Every transform reduces to :meth:`Polygon.affine`, which maps each vertex
independently through ``x' = a*x + b*y + tx`` and ``y' = c*x + d*y + ty``
and returns a new polygon. The receiver is never modified.

Two pivot policies coexist on purpose:
- scale() works about the polygon's own centroid
- rotate() works about the origin
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from polyaffine.domain.point import Point
from polyaffine.exceptions import PolygonSizeError, UnknownAxisError, ValidationError

MIN_VERTICES = 3


def _as_point(item: object) -> Point:
    """Accept a Point as-is or convert an (x, y) pair."""
    if isinstance(item, Point):
        return item
    message = f"Polygon vertex must be a Point or (x, y) pair, got {item!r}"
    if isinstance(item, (str, bytes)):
        raise ValidationError(message)
    try:
        x, y = item  # type: ignore[misc]
        return Point(x, y)
    except (TypeError, ValueError):
        raise ValidationError(message) from None


class ReflectionAxis(str, Enum):
    """Axis or line a polygon can be reflected across."""

    X = "x"
    Y = "y"
    ORIGIN = "origin"
    Y_EQ_X = "y_eq_x"


# Linear part (a, b, c, d) of each reflection
_REFLECTIONS: dict[ReflectionAxis, tuple[float, float, float, float]] = {
    ReflectionAxis.X: (1, 0, 0, -1),
    ReflectionAxis.Y: (-1, 0, 0, 1),
    ReflectionAxis.ORIGIN: (-1, 0, 0, -1),
    ReflectionAxis.Y_EQ_X: (0, 1, 1, 0),
}


@dataclass(frozen=True, slots=True)
class Polygon:
    """An ordered, closed sequence of points.

    Edges join consecutive points and wrap from the last point back to the
    first. Winding direction and self-intersection are not checked.

    Attributes:
        points: Vertices in order (at least three)

    Raises:
        PolygonSizeError: If fewer than three points are given
        ValidationError: If a vertex is neither a Point nor an (x, y) pair
    """

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        items = tuple(self.points)
        if len(items) < MIN_VERTICES:
            raise PolygonSizeError(len(items), MIN_VERTICES)
        object.__setattr__(self, "points", tuple(_as_point(item) for item in items))

    @classmethod
    def from_coords(cls, coords: Iterable[tuple[float, float]]) -> "Polygon":
        """Build a polygon from (x, y) pairs.

        Args:
            coords: Iterable of coordinate pairs

        Returns:
            Polygon instance
        """
        return cls(tuple(coords))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __str__(self) -> str:
        return " ".join(str(p) for p in self.points)

    def affine(
        self,
        a: float,
        b: float,
        c: float,
        d: float,
        tx: float = 0.0,
        ty: float = 0.0,
    ) -> "Polygon":
        """Apply the affine map [[a, b], [c, d]] + [tx, ty] to every vertex.

        Args:
            a: Row 0, column 0 of the linear part
            b: Row 0, column 1 of the linear part
            c: Row 1, column 0 of the linear part
            d: Row 1, column 1 of the linear part
            tx: Translation along x
            ty: Translation along y

        Returns:
            New polygon with the same vertex count and order
        """
        return Polygon(
            tuple(
                Point(a * p.x + b * p.y + tx, c * p.x + d * p.y + ty)
                for p in self.points
            )
        )

    def translate(self, dx: float, dy: float) -> "Polygon":
        """Shift every vertex by (dx, dy)."""
        return self.affine(1, 0, 0, 1, dx, dy)

    def scale(self, sx: float, sy: float | None = None) -> "Polygon":
        """Scale about the centroid, which stays fixed.

        Args:
            sx: Horizontal factor
            sy: Vertical factor (defaults to sx for uniform scaling)

        Returns:
            Scaled polygon
        """
        if sy is None:
            sy = sx
        cx, cy = self.centroid()
        tx = cx - sx * cx
        ty = cy - sy * cy
        return self.affine(sx, 0, 0, sy, tx, ty)

    def rotate(self, degrees: float) -> "Polygon":
        """Rotate counter-clockwise about the origin.

        Args:
            degrees: Rotation angle in degrees

        Returns:
            Rotated polygon
        """
        radians = math.radians(float(degrees))
        cos_t = math.cos(radians)
        sin_t = math.sin(radians)
        return self.affine(cos_t, -sin_t, sin_t, cos_t, 0, 0)

    def shear(self, shx: float, shy: float) -> "Polygon":
        """Shear with x' = x + shx*y and y' = shy*x + y."""
        return self.affine(1, shx, shy, 1, 0, 0)

    def reflect(self, axis: ReflectionAxis | str) -> "Polygon":
        """Mirror the polygon across an axis.

        Args:
            axis: A ReflectionAxis member or its string value

        Returns:
            Reflected polygon

        Raises:
            UnknownAxisError: If axis is not one of the supported axes
        """
        try:
            key = ReflectionAxis(axis)
        except ValueError:
            raise UnknownAxisError(axis) from None
        a, b, c, d = _REFLECTIONS[key]
        return self.affine(a, b, c, d, 0, 0)

    def centroid(self) -> tuple[float, float]:
        """Unweighted mean of the vertices.

        This is the vertex average, not the area centroid.

        Returns:
            Tuple of (cx, cy)
        """
        n = len(self.points)
        sum_x = sum(p.x for p in self.points)
        sum_y = sum(p.y for p in self.points)
        return (sum_x / n, sum_y / n)

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the vertices.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))
