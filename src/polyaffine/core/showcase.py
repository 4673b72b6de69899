"""Sample data fed to the presentation adapters.

Builds the base polygon, the fixed ordered list of named transform results,
and the tangent/normal comparison. Adapters only read these values.
"""

from dataclasses import dataclass

from polyaffine.core.matrix import (
    Matrix,
    Vector,
    dot,
    inverse_transpose,
    mat_vec_mul,
    perpendicular,
)
from polyaffine.domain import Point, Polygon, ReflectionAxis

BASE_COORDS: tuple[tuple[float, float], ...] = ((1, 1), (4, 1), (3, 3), (1, 4))

# Matrix used by the normal demo: non-uniform scale plus shear
DEMO_MATRIX: Matrix = ((1.5, 0.4), (0.0, 0.5))


@dataclass(frozen=True, slots=True)
class TransformSample:
    """A named polygon with the colour it is drawn in.

    Attributes:
        label: Human-readable description of the transform
        polygon: Resulting polygon
        color: Colour name understood by SVG and matplotlib
    """

    label: str
    polygon: Polygon
    color: str


@dataclass(frozen=True, slots=True)
class NormalDemo:
    """Tangent and normal before and after a linear transform.

    Attributes:
        tangent: Edge direction t
        normal: Edge normal n, perpendicular to t
        matrix: Linear transform M
        transformed_tangent: M·t
        naive_normal: M·n (generally no longer perpendicular)
        corrected_normal: (M^-1)^T·n (perpendicular to M·t)
    """

    tangent: Vector
    normal: Vector
    matrix: Matrix
    transformed_tangent: Vector
    naive_normal: Vector
    corrected_normal: Vector

    @property
    def naive_dot(self) -> float:
        """dot(M·t, M·n)."""
        return dot(self.transformed_tangent, self.naive_normal)

    @property
    def corrected_dot(self) -> float:
        """dot(M·t, (M^-1)^T·n), zero up to rounding."""
        return dot(self.transformed_tangent, self.corrected_normal)


def base_polygon() -> Polygon:
    """Quadrilateral every sample is derived from."""
    return Polygon.from_coords(BASE_COORDS)


def build_samples(polygon: Polygon | None = None) -> list[TransformSample]:
    """Build the ordered list of transform samples.

    Args:
        polygon: Polygon to transform (defaults to base_polygon())

    Returns:
        Original polygon first, then one sample per transform
    """
    if polygon is None:
        polygon = base_polygon()

    return [
        TransformSample("Original polygon", polygon, "white"),
        TransformSample("Translate (dx=2, dy=-1)", polygon.translate(2, -1), "red"),
        TransformSample("Scale (s=1.5)", polygon.scale(1.5), "green"),
        TransformSample("Rotate (45°)", polygon.rotate(45), "yellow"),
        TransformSample("Shear (shx=0.5, shy=0.0)", polygon.shear(0.5, 0.0), "blue"),
        TransformSample("Reflect (x axis)", polygon.reflect(ReflectionAxis.X), "yellow"),
        TransformSample(
            "General affine (a=1, b=0.2, c=-0.3, d=1, tx=1, ty=2)",
            polygon.affine(1, 0.2, -0.3, 1, 1, 2),
            "orange",
        ),
    ]


def run_normal_demo(
    start: Point | None = None,
    end: Point | None = None,
    matrix: Matrix = DEMO_MATRIX,
) -> NormalDemo:
    """Transform an edge tangent and its normal, naively and correctly.

    Args:
        start: Edge start point (defaults to (0, 0))
        end: Edge end point (defaults to (3, 1))
        matrix: Linear transform applied to the edge

    Returns:
        NormalDemo with all intermediate vectors

    Raises:
        SingularMatrixError: If matrix cannot be inverted
    """
    start = start or Point(0, 0)
    end = end or Point(3, 1)

    tangent = (end.x - start.x, end.y - start.y)
    normal = perpendicular(tangent)

    return NormalDemo(
        tangent=tangent,
        normal=normal,
        matrix=matrix,
        transformed_tangent=mat_vec_mul(matrix, tangent),
        naive_normal=mat_vec_mul(matrix, normal),
        corrected_normal=mat_vec_mul(inverse_transpose(matrix), normal),
    )
