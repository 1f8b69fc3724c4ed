"""T3.01 — Edge Partition.

Split edges into visible and overflowed, both kept in input order.
"""

from __future__ import annotations

from app.engine.context import PipelineContext
from app.engine.registry import Layer, transform


@transform(
    id="T3.01",
    layer=Layer.OVERFLOW,
    dependencies=["T2.02"],
    description="Partition edges into visible and overflowed",
)
def edge_partition(ctx: PipelineContext) -> None:
    marked = ctx.overflow_edge_ids
    ctx.visible_edges = [e for e in ctx.edges if e.id not in marked]
    ctx.overflowed_edges = [e for e in ctx.edges if e.id in marked]
