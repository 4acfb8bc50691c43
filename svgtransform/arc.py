"""Elliptical arc parameters under an affine map.

The ellipse is written as the matrix rotate(θ)·scale(rx, ry), multiplied by
the transform, and the product is decomposed (closed-form 2×2 SVD) back into
rotate(θ')·scale(rx', ry')·rotate(φ). rx', ry' and θ' are the new arc
parameters; φ only reparameterizes the curve and is dropped.
"""

from __future__ import annotations

import math

from svgpathtools import Arc

from svgtransform.matrix import apply_to_point, multiply_matrices
from svgtransform.primitives import MatrixLike
from svgtransform.utils import trig
from svgtransform.utils.math_helpers import clamp

# Below this the major-axis eigenvector test is numerically meaningless.
_AXIS_EPS = 1e-6


def transform_arc(arc: list[float], matrix: MatrixLike) -> list[float]:
    """Transform ``[rx, ry, rotation, large_arc, sweep, dx, dy]`` in place.

    ``dx, dy`` is the arc end point relative to its start. Only the radii,
    rotation and sweep flag are rewritten; moving the end point is left to
    the caller. Returns the same list.
    """
    rx, ry = arc[0], arc[1]
    rot = trig.rad(arc[2])
    cos = math.cos(rot)
    sin = math.sin(rot)

    # Radii too small for the chord are scaled up, as renderers do
    if rx and ry:
        h = (arc[5] * cos + arc[6] * sin) ** 2 / (4 * rx * rx) + (
            arc[6] * cos - arc[5] * sin
        ) ** 2 / (4 * ry * ry)
        if h > 1:
            h = math.sqrt(h)
            rx *= h
            ry *= h

    ellipse = (rx * cos, rx * sin, -ry * sin, ry * cos, 0.0, 0.0)
    m = multiply_matrices(matrix, ellipse)

    last_col = m[2] * m[2] + m[3] * m[3]
    square_sum = m[0] * m[0] + m[1] * m[1] + last_col
    root = math.sqrt(
        ((m[0] - m[3]) ** 2 + (m[1] + m[2]) ** 2) * ((m[0] + m[3]) ** 2 + (m[1] - m[2]) ** 2)
    )

    if not root:
        # circle
        arc[0] = arc[1] = math.sqrt(square_sum / 2)
        arc[2] = 0.0
    else:
        major_sqr = (square_sum + root) / 2
        minor_sqr = (square_sum - root) / 2
        major = abs(major_sqr - last_col) > _AXIS_EPS
        sub = (major_sqr if major else minor_sqr) - last_col
        rows_sum = m[0] * m[2] + m[1] * m[3]
        term1 = m[0] * sub + m[2] * rows_sum
        term2 = m[1] * sub + m[3] * rows_sum
        norm = math.hypot(term1, term2)

        arc[0] = math.sqrt(major_sqr)
        arc[1] = math.sqrt(max(minor_sqr, 0.0))
        if norm:
            sign = -1 if (term2 < 0 if major else term1 > 0) else 1
            arc[2] = sign * trig.deg(math.acos(clamp((term1 if major else term2) / norm)))
        else:
            arc[2] = 0.0

    # Flipping exactly one axis reverses the drawing direction
    if (matrix[0] < 0) != (matrix[3] < 0):
        arc[4] = 1 - arc[4]

    return arc


def transform_arc_segment(segment: Arc, matrix: MatrixLike) -> Arc:
    """Apply ``matrix`` to an svgpathtools Arc, end points included."""
    delta = segment.end - segment.start
    params = [
        segment.radius.real,
        segment.radius.imag,
        segment.rotation,
        float(segment.large_arc),
        float(segment.sweep),
        delta.real,
        delta.imag,
    ]
    transform_arc(params, matrix)

    start = complex(*apply_to_point(matrix, segment.start.real, segment.start.imag))
    end = complex(*apply_to_point(matrix, segment.end.real, segment.end.imag))
    return Arc(
        start=start,
        radius=complex(params[0], params[1]),
        rotation=params[2],
        large_arc=bool(params[3]),
        sweep=bool(params[4]),
        end=end,
    )
