"""Transform primitives — the value types shared by every module.

A transform list is an ordered list of Transform objects. Order matches the
textual syntax: the leftmost primitive is the outermost matrix factor.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

# (a, b, c, d, e, f): x' = a·x + c·y + e, y' = b·x + d·y + f
Matrix = tuple[float, float, float, float, float, float]
MatrixLike = Sequence[float]

IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

TRANSFORM_NAMES = frozenset({"matrix", "translate", "scale", "rotate", "skewX", "skewY"})

# Accepted argument counts per primitive name.
_ARITIES: dict[str, frozenset[int]] = {
    "matrix": frozenset({6}),
    "translate": frozenset({1, 2}),
    "scale": frozenset({1, 2}),
    "rotate": frozenset({1, 3}),
    "skewX": frozenset({1}),
    "skewY": frozenset({1}),
}

# Primitives whose first argument is an angle in degrees.
ANGLE_NAMES = frozenset({"rotate", "skewX", "skewY"})


@dataclass
class Transform:
    """One named elementary transform with its numeric arguments."""

    name: str
    data: list[float] = field(default_factory=list)

    def copy(self) -> Transform:
        return Transform(self.name, list(self.data))

    @property
    def is_matrix(self) -> bool:
        return self.name == "matrix"


def has_valid_arity(transform: Transform) -> bool:
    """True when the primitive has an argument count the format allows."""
    return len(transform.data) in _ARITIES.get(transform.name, frozenset())
