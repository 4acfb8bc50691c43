"""Render transform lists back to attribute text."""

from __future__ import annotations

from collections.abc import Sequence

from svgtransform.options import TransformOptions
from svgtransform.primitives import ANGLE_NAMES, Transform
from svgtransform.utils.math_helpers import format_number, to_fixed


def _precisions(transform: Transform, options: TransformOptions) -> list[int]:
    """Decimal digits for each argument of ``transform``."""
    n = len(transform.data)
    if transform.name in ANGLE_NAMES:
        # angle, then rotation point
        return [options.angle_precision] + [options.float_precision] * (n - 1)
    if transform.name == "scale":
        return [options.transform_precision] * n
    if transform.name == "matrix":
        digits = [options.transform_precision] * 4 + [options.float_precision] * 2
        return (digits + [options.float_precision] * n)[:n]
    return [options.float_precision] * n


def round_transform(transform: Transform, options: TransformOptions) -> Transform:
    """Copy of ``transform`` with every argument rounded as it will be written."""
    precisions = _precisions(transform, options)
    return Transform(
        transform.name, [to_fixed(v, p) for v, p in zip(transform.data, precisions)]
    )


def stringify_transform(transform: Transform, options: TransformOptions | None = None) -> str:
    options = options or TransformOptions()
    precisions = _precisions(transform, options)
    args = " ".join(
        format_number(v, p, options.leading_zero) for v, p in zip(transform.data, precisions)
    )
    return f"{transform.name}({args})"


def stringify_transforms(
    transforms: Sequence[Transform], options: TransformOptions | None = None
) -> str:
    """Join primitives as ``name(args)`` separated by single spaces."""
    options = options or TransformOptions()
    return " ".join(stringify_transform(t, options) for t in transforms)
