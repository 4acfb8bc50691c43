"""Pass registry — every normalization pass is a standalone function registered via decorator.

Usage:
    @normalization_pass(id="N.03", dependencies=["N.02"], description="Drop identity primitives")
    def remove_useless(ctx: TransformContext) -> None:
        ctx.transforms = [t for t in ctx.transforms if not is_useless(t)]

Adding a new pass = creating one module under svgtransform/passes with the decorator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from svgtransform.context import TransformContext

logger = logging.getLogger(__name__)


@dataclass
class PassSpec:
    id: str
    fn: Callable[["TransformContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class PassRegistry:
    """Registry of normalization passes."""

    def __init__(self) -> None:
        self._passes: dict[str, PassSpec] = {}

    def register(self, spec: PassSpec) -> None:
        if spec.id in self._passes:
            raise ValueError(f"Duplicate pass ID: {spec.id}")
        self._passes[spec.id] = spec
        logger.debug("Registered pass %s", spec.id)

    def get(self, pass_id: str) -> PassSpec:
        return self._passes[pass_id]

    def all(self) -> list[PassSpec]:
        return sorted(self._passes.values(), key=lambda s: s.id)

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[PassSpec]:
        """Topological sort respecting dependencies. If requested_ids is None, run all.

        Dependencies outside the requested set are ignored rather than pulled
        in, so a disabled pass never runs because another pass follows it.
        """
        pool = self._passes
        if requested_ids is not None:
            pool = {k: v for k, v in pool.items() if k in requested_ids}

        ordered: list[PassSpec] = []
        state: dict[str, str] = {}

        def visit(pid: str) -> None:
            if state.get(pid) == "done":
                return
            if state.get(pid) == "active":
                raise ValueError(f"Circular dependency detected at: {pid}")
            state[pid] = "active"
            for dep in sorted(pool[pid].dependencies):
                if dep in pool:
                    visit(dep)
            state[pid] = "done"
            ordered.append(pool[pid])

        for pid in sorted(pool):
            visit(pid)
        return ordered

    @property
    def count(self) -> int:
        return len(self._passes)


# Module-level singleton
_registry = PassRegistry()


def get_registry() -> PassRegistry:
    return _registry


def normalization_pass(
    *,
    id: str,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a normalization pass."""

    def decorator(fn: Callable[["TransformContext"], None]):
        _registry.register(
            PassSpec(id=id, fn=fn, dependencies=dependencies or [], description=description)
        )
        return fn

    return decorator
