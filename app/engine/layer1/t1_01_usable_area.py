"""T1.01 — Usable Area.

Strip the fixed margins from the container. The side bands are reserved for
overflow regions; the extra top margin pushes the circle's mass downward.
"""

from __future__ import annotations

from app.engine.context import PipelineContext, UsableArea
from app.engine.layout_constants import (
    MARGIN_BOTTOM_FRACTION,
    MARGIN_SIDE_FRACTION,
    MARGIN_TOP_FRACTION,
)
from app.engine.registry import Layer, transform


def usable_area(width: float, height: float) -> UsableArea:
    """Usable area for a ``width`` x ``height`` container."""
    top = height * MARGIN_TOP_FRACTION
    bottom = height * MARGIN_BOTTOM_FRACTION
    left = width * MARGIN_SIDE_FRACTION
    right = width * MARGIN_SIDE_FRACTION

    return UsableArea(
        left=left,
        top=top,
        width=width - left - right,
        height=height - top - bottom,
    )


@transform(
    id="T1.01",
    layer=Layer.PLACEMENT,
    dependencies=["T0.02"],
    description="Compute usable drawing area, center and radius",
)
def compute_usable_area(ctx: PipelineContext) -> None:
    ctx.area = usable_area(ctx.canvas_width, ctx.canvas_height)
