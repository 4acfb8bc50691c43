"""N.01 — Collapse.

Multiply the whole transform list into a single matrix so the decomposer
can look for a shorter equivalent of the combined effect.
"""

from __future__ import annotations

from svgtransform.context import TransformContext
from svgtransform.matrix import transforms_multiply
from svgtransform.registry import normalization_pass


@normalization_pass(id="N.01", description="Compose the transform list into one matrix")
def collapse_into_one(ctx: TransformContext) -> None:
    if ctx.num_transforms > 1:
        ctx.transforms = [transforms_multiply(ctx.transforms)]
