"""T2.01 — Bounding Boxes.

One layout item per node footprint, then one per edge label footprint.
Edge lines themselves are never collision-tested.
"""

from __future__ import annotations

from app.engine.context import BoundingBox, ItemKind, LayoutItem, PipelineContext
from app.engine.registry import Layer, transform


@transform(
    id="T2.01",
    layer=Layer.COLLISION,
    dependencies=["T1.03"],
    description="Build node and label bounding boxes",
)
def bounding_boxes(ctx: PipelineContext) -> None:
    cfg = ctx.config
    items: list[LayoutItem] = []

    for node in ctx.nodes.values():
        items.append(LayoutItem(
            kind=ItemKind.NODE,
            ref=node,
            bbox=BoundingBox.centered(node.x, node.y, cfg.node_width, cfg.node_height),
        ))

    for edge in ctx.edges:
        mx, my = edge.midpoint
        items.append(LayoutItem(
            kind=ItemKind.LABEL,
            ref=edge,
            bbox=BoundingBox.centered(mx, my, cfg.label_width, cfg.label_height),
        ))

    ctx.layout_items = items
