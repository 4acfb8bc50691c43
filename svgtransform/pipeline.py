"""Pipeline orchestrator — runs normalization passes in dependency order with option gating."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from svgtransform.context import TransformContext
from svgtransform.options import TransformOptions
from svgtransform.parser import parse_transform_list
from svgtransform.primitives import has_valid_arity
from svgtransform.registry import PassRegistry, get_registry
from svgtransform.serializer import stringify_transforms

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the normalization passes."""

    def __init__(
        self,
        registry: PassRegistry | None = None,
        options: TransformOptions | None = None,
    ) -> None:
        if registry is None:
            _register_passes()
        self.registry = registry or get_registry()
        self.options = options or TransformOptions()

    def run(self, ctx: TransformContext) -> TransformContext:
        """Run every enabled pass on the given context."""
        start = time.perf_counter()

        skip_ids = self._option_gate(ctx)
        requested = {s.id for s in self.registry.all()} - skip_ids
        ordered = self.registry.resolve_order(requested)

        for spec in ordered:
            try:
                spec.fn(ctx)
                ctx.completed_passes.add(spec.id)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        logger.debug(
            "Normalized %r: %d/%d passes in %.2fms",
            ctx.source,
            len(ctx.completed_passes),
            len(ordered),
            (time.perf_counter() - start) * 1000,
        )
        return ctx

    def normalize(self, text: str) -> str:
        """Parse, run all passes and render the shortest equivalent text.

        Text that does not parse into well-formed primitives is returned
        stripped but otherwise unchanged.
        """
        transforms = parse_transform_list(text)
        if not transforms or not all(has_valid_arity(t) for t in transforms):
            logger.debug("Leaving transform as is: %r", text)
            return text.strip()

        ctx = TransformContext(source=text, transforms=transforms, options=self.options)
        self.run(ctx)
        return stringify_transforms(ctx.transforms, ctx.options)

    def _option_gate(self, ctx: TransformContext) -> set[str]:
        """Passes switched off by the context's options."""
        skip: set[str] = set()
        if not ctx.options.collapse_into_one:
            skip.add("N.01")
        if not ctx.options.remove_useless:
            skip.add("N.03")
        return skip


def _register_passes() -> None:
    """Import all pass modules so @normalization_pass decorators fire."""
    package = importlib.import_module("svgtransform.passes")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"svgtransform.passes.{module_name}")


def create_pipeline(options: TransformOptions | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(options=options)


def normalize_transform(text: str, options: TransformOptions | None = None) -> str:
    """Shortest equivalent text for a transform attribute value."""
    return create_pipeline(options).normalize(text)
