"""Normalization options — rounding and which rewrites are allowed."""

from __future__ import annotations

from dataclasses import dataclass

from svgtransform.config import Settings, settings as default_settings


@dataclass
class TransformOptions:
    """Controls decomposition rounding and the normalization passes."""

    # Decimal digits for translations and decomposed angles
    float_precision: int = 3
    # Decimal digits for scale factors and matrix linear parts
    transform_precision: int = 5
    # Decimal digits for angles in output text (None = float_precision)
    deg_precision: int | None = None

    # Normalization passes
    collapse_into_one: bool = True
    matrix_to_transform: bool = True
    short_translate: bool = True  # translate(x 0) → translate(x)
    short_scale: bool = True  # scale(s s) → scale(s)
    short_rotate: bool = True  # translate(cx cy) rotate(a) translate(-cx -cy) → rotate(a cx cy)
    remove_useless: bool = True

    # Output formatting: False writes .5 instead of 0.5
    leading_zero: bool = True

    @property
    def angle_precision(self) -> int:
        return self.float_precision if self.deg_precision is None else self.deg_precision

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides) -> TransformOptions:
        s = settings or default_settings
        values = {
            "float_precision": s.svgtransform_float_precision,
            "transform_precision": s.svgtransform_transform_precision,
        }
        values.update(overrides)
        return cls(**values)
