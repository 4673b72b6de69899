"""Domain models for polyaffine.

This module contains the value objects the transform library works on.
All models are:

- Immutable (frozen dataclasses); transforms return new instances
- Serializable to plain lists/dicts for embedding in exported documents

Key classes:
- Point: A 2D coordinate coerced to float
- Polygon: Ordered sequence of at least three points with affine transforms
- ReflectionAxis: Closed set of axes a polygon can be mirrored across
"""

from polyaffine.domain.point import Point
from polyaffine.domain.polygon import Polygon, ReflectionAxis

__all__: list[str] = [
    # Enums
    "ReflectionAxis",
    # Core types
    "Point",
    "Polygon",
]
