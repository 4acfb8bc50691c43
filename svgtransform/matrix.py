"""Affine matrix algebra: primitive → matrix, composition, point application."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from svgtransform.primitives import IDENTITY, Matrix, MatrixLike, Transform, has_valid_arity
from svgtransform.utils import trig


def multiply_matrices(a: MatrixLike, b: MatrixLike) -> Matrix:
    """Compose two matrices: the result applies ``b`` first, then ``a``."""
    return (
        a[0] * b[0] + a[2] * b[1],
        a[1] * b[0] + a[3] * b[1],
        a[0] * b[2] + a[2] * b[3],
        a[1] * b[2] + a[3] * b[3],
        a[0] * b[4] + a[2] * b[5] + a[4],
        a[1] * b[4] + a[3] * b[5] + a[5],
    )


def transform_to_matrix(transform: Transform) -> Matrix:
    """Compile one primitive into its 2×3 matrix.

    Raises ValueError for an unknown name or an argument count the name does
    not accept.
    """
    if not has_valid_arity(transform):
        raise ValueError(f"Invalid transform {transform.name}({len(transform.data)} args)")
    data = transform.data

    if transform.name == "matrix":
        return tuple(data)  # type: ignore[return-value]

    if transform.name == "translate":
        # [1, 0, 0, 1, tx, ty]
        return (1.0, 0.0, 0.0, 1.0, data[0], data[1] if len(data) > 1 else 0.0)

    if transform.name == "scale":
        # [sx, 0, 0, sy, 0, 0]
        return (data[0], 0.0, 0.0, data[1] if len(data) > 1 else data[0], 0.0, 0.0)

    if transform.name == "rotate":
        # [cos, sin, -sin, cos, x, y], rotation point folded into x, y
        cos = trig.cos(data[0])
        sin = trig.sin(data[0])
        cx, cy = (data[1], data[2]) if len(data) == 3 else (0.0, 0.0)
        return (cos, sin, -sin, cos, (1 - cos) * cx + sin * cy, (1 - cos) * cy - sin * cx)

    if transform.name == "skewX":
        return (1.0, 0.0, trig.tan(data[0]), 1.0, 0.0, 0.0)

    # skewY
    return (1.0, trig.tan(data[0]), 0.0, 1.0, 0.0, 0.0)


def transforms_multiply(transforms: Sequence[Transform]) -> Transform:
    """Fold a transform list into a single ``matrix`` primitive.

    An empty list gives a matrix primitive with empty data.
    """
    matrices = [transform_to_matrix(t) for t in transforms]
    if not matrices:
        return Transform("matrix", [])
    result = matrices[0]
    for m in matrices[1:]:
        result = multiply_matrices(result, m)
    return Transform("matrix", list(result))


def is_identity(matrix: MatrixLike) -> bool:
    return tuple(matrix) == IDENTITY


def apply_to_points(matrix: MatrixLike, points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Apply a matrix to an Nx2 array of (x, y) points."""
    a, b, c, d, e, f = matrix
    linear = np.array([[a, c], [b, d]], dtype=np.float64)
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return pts @ linear.T + np.array([e, f], dtype=np.float64)


def apply_to_point(matrix: MatrixLike, x: float, y: float) -> tuple[float, float]:
    a, b, c, d, e, f = matrix
    return (a * x + c * y + e, b * x + d * y + f)
