"""Pipeline orchestrator — runs layout stages in dependency order with a measurement gate."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from collections.abc import Iterable
from typing import Any

from app.engine.config import LayoutConfig
from app.engine.context import LayoutResult, PipelineContext
from app.engine.registry import Layer, TransformRegistry, get_registry
from app.graph.loader import load_connections

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1", "layer2", "layer3"]


class Pipeline:
    """Orchestrates the layout pipeline."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: LayoutConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or LayoutConfig()

    def run(self, ctx: PipelineContext) -> PipelineContext:
        """Run the full pipeline on the given context."""
        start = time.perf_counter()

        if not self._should_run(ctx):
            logger.debug(
                "Pipeline skipped: %d connections, container %sx%s",
                len(ctx.connections),
                ctx.canvas_width,
                ctx.canvas_height,
            )
            return ctx

        ordered = self.registry.resolve_order()
        logger.debug("Pipeline: %d transforms queued", len(ordered))

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_transforms.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s (%s) completed in %.2fms", spec.id, spec.description, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Layout complete in %.1fms: %s",
            total,
            ", ".join(f"{k}={v}" for k, v in ctx.summary().items()),
        )
        return ctx

    def run_layer(self, ctx: PipelineContext, layer: Layer) -> PipelineContext:
        """Run only transforms in a specific layer."""
        specs = self.registry.get_layer(layer)
        for spec in specs:
            try:
                spec.fn(ctx)
                ctx.completed_transforms.add(spec.id)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)
        return ctx

    def _should_run(self, ctx: PipelineContext) -> bool:
        """Gate the whole pipeline.

        An unmeasured container (zero width) or an empty connection list
        yields the empty result without touching any stage.
        """
        return ctx.is_measured and bool(ctx.connections)


def register_transforms() -> None:
    """Import all layer modules so @transform decorators fire."""
    for layer_name in _LAYER_PACKAGES:
        package_name = f"app.engine.{layer_name}"
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")


def create_pipeline(config: LayoutConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    register_transforms()
    return Pipeline(config=config)


def compute_layout(
    connections: Iterable[Any] | None,
    width: float,
    height: float,
    config: LayoutConfig | None = None,
) -> LayoutResult:
    """Lay out ``connections`` in a ``width`` x ``height`` container.

    Pure function of its inputs: every call builds a fresh context, and
    malformed connections are dropped rather than reported.
    """
    pipeline = create_pipeline(config)
    ctx = load_connections(connections, width, height, config=pipeline.config)
    return pipeline.run(ctx).to_result()
