"""T3.03 — Visible Nodes.

A node stays on the diagram only while some visible edge touches it. Nodes
whose every edge overflowed (or that never had a valid edge) drop out.
"""

from __future__ import annotations

from app.engine.context import PipelineContext
from app.engine.registry import Layer, transform


@transform(
    id="T3.03",
    layer=Layer.OVERFLOW,
    dependencies=["T3.01"],
    description="Keep nodes referenced by at least one visible edge",
)
def visible_nodes(ctx: PipelineContext) -> None:
    referenced: set[str] = set()
    for edge in ctx.visible_edges:
        referenced.add(edge.from_node.id)
        referenced.add(edge.to_node.id)

    ctx.visible_nodes = [node for node in ctx.nodes.values() if node.id in referenced]
