"""Point value type."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Coordinates are coerced to float on
    construction, so ``Point(1, 2)`` and ``Point(1.0, 2.0)`` compare equal.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __str__(self) -> str:
        return f"({self.x:.4f}, {self.y:.4f})"

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)
