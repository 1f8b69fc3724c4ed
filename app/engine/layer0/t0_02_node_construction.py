"""T0.02 — Node Construction.

One Node per deduplicated concept. The color index only picks a cosmetic
palette entry and has no geometric meaning.
"""

from __future__ import annotations

from app.engine.context import Node, PipelineContext
from app.engine.registry import Layer, transform


@transform(
    id="T0.02",
    layer=Layer.GRAPH,
    dependencies=["T0.01"],
    description="Build the node table with palette indices",
)
def node_construction(ctx: PipelineContext) -> None:
    palette_size = max(1, ctx.config.palette_size)

    ctx.nodes = {
        concept_id: Node(id=concept_id, label=concept_id, color_index=i % palette_size)
        for i, concept_id in enumerate(ctx.concept_ids)
    }
