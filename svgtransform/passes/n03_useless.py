"""N.03 — Remove useless.

Drop primitives that render as the identity at the output precision.
"""

from __future__ import annotations

from svgtransform.context import TransformContext
from svgtransform.matrix import is_identity
from svgtransform.primitives import Transform
from svgtransform.registry import normalization_pass
from svgtransform.serializer import round_transform


@normalization_pass(
    id="N.03",
    dependencies=["N.02"],
    description="Drop identity primitives",
)
def remove_useless(ctx: TransformContext) -> None:
    ctx.transforms = [
        t for t in ctx.transforms if not is_useless(round_transform(t, ctx.options))
    ]


def is_useless(transform: Transform) -> bool:
    data = transform.data
    if not data:
        return False
    if transform.name in ("rotate", "skewX", "skewY"):
        # rotate(0 cx cy) is the identity too
        return data[0] == 0
    if transform.name == "translate":
        return data[0] == 0 and (len(data) == 1 or data[1] == 0)
    if transform.name == "scale":
        return data[0] == 1 and (len(data) == 1 or data[1] == 1)
    if transform.name == "matrix":
        return len(data) == 6 and is_identity(data)
    return False
