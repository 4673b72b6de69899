"""Core transform algorithms for polyaffine.

This module contains:

- 2x2 matrix helpers (matrix-vector product, inverse-transpose)
- The sample set shown by every presentation adapter

All functions are pure and stateless.

Key functions:
- mat_vec_mul: Multiply a 2x2 matrix by a vector
- inverse_transpose: (M^-1)^T, used to transform normals
- dot: Dot product of two vectors
- perpendicular: Rotate a vector by 90 degrees
- build_samples: Named transform results of the base polygon
- run_normal_demo: Naive vs corrected normal transformation
"""

from polyaffine.core.matrix import (
    Matrix,
    Vector,
    determinant,
    dot,
    inverse_transpose,
    mat_vec_mul,
    perpendicular,
)
from polyaffine.core.showcase import (
    DEMO_MATRIX,
    NormalDemo,
    TransformSample,
    base_polygon,
    build_samples,
    run_normal_demo,
)

__all__ = [
    "DEMO_MATRIX",
    # Types
    "Matrix",
    "NormalDemo",
    "TransformSample",
    "Vector",
    # Showcase functions
    "base_polygon",
    "build_samples",
    # Matrix functions
    "determinant",
    "dot",
    "inverse_transpose",
    "mat_vec_mul",
    "perpendicular",
    "run_normal_demo",
]
