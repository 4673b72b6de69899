"""2x2 matrix helpers for tangent and normal transformation.

Matrices are row-major pairs of rows, ``((a, b), (c, d))``; vectors are
``(x, y)`` pairs. Any indexable sequence works as input; results are tuples.

Tangent vectors transform with the matrix M itself. Normal vectors must use
the inverse-transpose ``(M^-1)^T`` so that they stay perpendicular to the
transformed tangents whenever M is not orthogonal (non-uniform scale, shear).
"""

from collections.abc import Sequence

from polyaffine.exceptions import SingularMatrixError

Vector = tuple[float, float]
Matrix = tuple[Vector, Vector]


def mat_vec_mul(m: Sequence[Sequence[float]], v: Sequence[float]) -> Vector:
    """Multiply a 2x2 matrix by a 2-vector.

    Args:
        m: Row-major 2x2 matrix
        v: Vector (x, y)

    Returns:
        The product M·v

    Examples:
        >>> mat_vec_mul(((2, 0), (1, 1)), (3, 1))
        (6, 4)
    """
    return (
        m[0][0] * v[0] + m[0][1] * v[1],
        m[1][0] * v[0] + m[1][1] * v[1],
    )


def determinant(m: Sequence[Sequence[float]]) -> float:
    """Determinant of a 2x2 matrix."""
    return m[0][0] * m[1][1] - m[0][1] * m[1][0]


def inverse_transpose(m: Sequence[Sequence[float]]) -> Matrix:
    """Compute the transpose of the inverse of a 2x2 matrix.

    Singularity is detected by an exact comparison of the determinant with
    zero. Near-singular matrices are inverted as-is.

    Args:
        m: Row-major 2x2 matrix

    Returns:
        (M^-1)^T as a row-major matrix

    Raises:
        SingularMatrixError: If the determinant is exactly zero
    """
    det = determinant(m)
    if det == 0:
        raise SingularMatrixError(det)

    inv = (
        (m[1][1] / det, -m[0][1] / det),
        (-m[1][0] / det, m[0][0] / det),
    )
    return (
        (inv[0][0], inv[1][0]),
        (inv[0][1], inv[1][1]),
    )


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two 2-vectors."""
    return a[0] * b[0] + a[1] * b[1]


def perpendicular(v: Sequence[float]) -> Vector:
    """Rotate a vector 90 degrees counter-clockwise: (x, y) -> (-y, x)."""
    return (-v[1], v[0])
