"""N.02 — Short forms.

Replace matrices by their decomposition when the text gets no longer, drop
default arguments, and fold translate·rotate·translate back into a
rotation about a point.
"""

from __future__ import annotations

from svgtransform.context import TransformContext
from svgtransform.decompose import matrix_to_transform
from svgtransform.options import TransformOptions
from svgtransform.primitives import Transform
from svgtransform.registry import normalization_pass
from svgtransform.serializer import round_transform, stringify_transform, stringify_transforms


@normalization_pass(
    id="N.02",
    dependencies=["N.01"],
    description="Rewrite primitives in their shortest form",
)
def convert_to_shorts(ctx: TransformContext) -> None:
    options = ctx.options
    result: list[Transform] = []
    for transform in ctx.transforms:
        for t in _expand_matrix(transform, options):
            result.append(_shorten(t, options))
            if options.short_rotate:
                _fold_rotation_point(result, options)
    ctx.transforms = result


def _expand_matrix(transform: Transform, options: TransformOptions) -> list[Transform]:
    if not (options.matrix_to_transform and transform.is_matrix):
        return [transform.copy()]
    decomposed = matrix_to_transform(transform.copy(), options)
    if isinstance(decomposed, Transform):
        return [decomposed]
    if len(stringify_transforms(decomposed, options)) <= len(stringify_transform(transform, options)):
        return decomposed
    return [transform.copy()]


def _shorten(transform: Transform, options: TransformOptions) -> Transform:
    data = transform.data
    if len(data) == 2:
        # translate(x 0) → translate(x)
        if options.short_translate and transform.name == "translate" and data[1] == 0:
            return Transform("translate", [data[0]])
        # scale(s s) → scale(s)
        if options.short_scale and transform.name == "scale" and data[0] == data[1]:
            return Transform("scale", [data[0]])
    return transform


def _fold_rotation_point(result: list[Transform], options: TransformOptions) -> None:
    """translate(cx cy) rotate(a) translate(-cx -cy) → rotate(a cx cy), in place."""
    if len(result) < 3:
        return
    first, middle, last = result[-3:]
    if not (
        first.name == "translate"
        and middle.name == "rotate"
        and len(middle.data) == 1
        and last.name == "translate"
    ):
        return

    cx, cy = _translation(round_transform(first, options))
    back_x, back_y = _translation(round_transform(last, options))
    if (cx, cy) != (-back_x + 0.0, -back_y + 0.0):
        return

    del result[-3:]
    result.append(Transform("rotate", [middle.data[0], *_translation(first)]))


def _translation(transform: Transform) -> tuple[float, float]:
    data = transform.data
    return (data[0], data[1] if len(data) > 1 else 0.0)
