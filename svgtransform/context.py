"""TransformContext — the single mutable state object flowing through all passes."""

from __future__ import annotations

from dataclasses import dataclass, field

from svgtransform.options import TransformOptions
from svgtransform.primitives import Transform


@dataclass
class TransformContext:
    """Shared state for one normalization run."""

    # Attribute text as given
    source: str = ""
    # Current primitive list; each pass replaces it with a rewritten list
    transforms: list[Transform] = field(default_factory=list)
    options: TransformOptions = field(default_factory=TransformOptions)

    # --- Run metadata ---
    completed_passes: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_transforms(self) -> int:
        return len(self.transforms)
