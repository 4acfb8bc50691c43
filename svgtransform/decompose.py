"""Matrix → shortest primitive sequence.

Closed-form split of a 2×3 matrix into translate · (rotate|skew) · scale,
after
http://www.maths-informatique-jeux.com/blog/frederic/?post/2013/12/01/Decomposition-of-2D-transform-matrices

The choice between scale-before-rotate and rotate-before-scale is made by a
heuristic (``scale_before``), not by searching every ordering, so the result
is short but not guaranteed to be globally minimal.
"""

from __future__ import annotations

import logging
import math

from svgtransform.options import TransformOptions
from svgtransform.primitives import Transform
from svgtransform.utils import trig
from svgtransform.utils.math_helpers import clamp, to_fixed

logger = logging.getLogger(__name__)

# Relative size below which the column and row dot products count as zero.
_SUM_EPS = 1e-12


def matrix_to_transform(
    transform: Transform, options: TransformOptions | None = None
) -> list[Transform] | Transform:
    """Decompose a ``matrix`` primitive.

    Returns a list of primitives reproducing the matrix, or the input
    primitive itself when no shorter form exists or the matrix is singular.
    The identity matrix decomposes to an empty list.
    """
    options = options or TransformOptions()
    float_precision = options.float_precision
    data = transform.data

    if len(data) != 6 or not all(math.isfinite(v) for v in data):
        logger.debug("Not a decomposable matrix: %r", data)
        return transform

    a, b, c, d, e, f = data
    sx = to_fixed(math.sqrt(a * a + b * b), options.transform_precision)
    if sx == 0:
        logger.debug("Singular matrix (zero first column): %r", data)
        return transform
    sy = to_fixed((a * d - b * c) / sx, options.transform_precision)
    if sy == 0:
        logger.debug("Singular matrix (zero determinant): %r", data)
        return transform

    # Cancellation noise in the dot products must not pick the wrong branch
    tolerance = _SUM_EPS * (a * a + b * b + c * c + d * d)
    cols_sum = _snap(a * c + b * d, tolerance)
    rows_sum = _snap(a * b + c * d, tolerance)
    scale_before = bool(rows_sum) or sx == sy
    transforms: list[Transform] = []

    # [..., ..., ..., ..., tx, ty] → translate(tx, ty)
    if e or f:
        transforms.append(Transform("translate", [e, f] if f else [e]))

    # [sx, 0, tan(a)·sy, sy, 0, 0] → skewX(a)·scale(sx, sy)
    if not b and c:
        transforms.append(Transform("skewX", [trig.atan(c / d, float_precision)]))
        sx, sy = a, d

    # [sx, sx·tan(a), 0, sy, 0, 0] → skewY(a)·scale(sx, sy)
    elif b and not c:
        transforms.append(Transform("skewY", [trig.atan(b / a, float_precision)]))
        sx, sy = a, d

    # [sx·cos(a), sx·sin(a), sy·-sin(a), sy·cos(a), x, y] → rotate(a[, cx, cy])·(scale or skewX)
    # [sx·cos(a), sy·sin(a), sx·-sin(a), sy·cos(a), x, y] → scale(sx, sy)·rotate(a[, cx, cy])
    elif not cols_sum or (sx == 1 and sy == 1) or not scale_before:
        if not scale_before:
            sx = (-1 if a < 0 else 1) * math.sqrt(a * a + c * c)
            sy = (-1 if d < 0 else 1) * math.sqrt(b * b + d * d)
            transforms.append(Transform("scale", [sx, sy]))

        # b carries sin(a) times the scale applied along x: sx when scaling comes
        # first in the matrix product, sy otherwise
        flip = b * (sx if scale_before else sy) < 0
        angle = trig.acos(clamp(a / sx), float_precision) * (-1 if flip else 1)
        rotate = Transform("rotate", [angle])
        if angle:
            transforms.append(rotate)

        if rows_sum and cols_sum:
            transforms.append(
                Transform("skewX", [trig.atan(cols_sum / (sx * sx), float_precision)])
            )

        # rotate(a, cx, cy) absorbs the leading translate as its rotation point
        if angle and (e or f):
            cos = a / sx
            sin = b / (sx if scale_before else sy)
            x = e if scale_before else e * sy
            y = f if scale_before else f * sx
            denom = ((1 - cos) ** 2 + sin**2) * (1 if scale_before else sx * sy)
            if denom:
                transforms.pop(0)
                rotate.data.append(((1 - cos) * x - sin * y) / denom)
                rotate.data.append(((1 - cos) * y + sin * x) / denom)

    # Needs more primitives than the matrix itself
    else:
        logger.debug("Matrix kept, no shorter decomposition: %r", data)
        return transform

    if (scale_before or not transforms) and (sx != 1 or sy != 1):
        transforms.append(Transform("scale", [sx] if sx == sy else [sx, sy]))

    return transforms


def _snap(value: float, tolerance: float) -> float:
    return 0.0 if abs(value) <= tolerance else value
