"""T1.03 — Edge Construction + Label Midpoints.

Connections with both endpoints in the node table and a non-empty label
become edges. The label anchor is the plain midpoint of the straight segment;
parallel edges between the same pair share it.
"""

from __future__ import annotations

import logging

from app.engine.context import Edge, Node, PipelineContext
from app.engine.layout_constants import LABEL_ANCHOR_T
from app.engine.registry import Layer, transform

logger = logging.getLogger(__name__)


def interpolate(a: Node, b: Node, t: float = LABEL_ANCHOR_T) -> tuple[float, float]:
    return (a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


@transform(
    id="T1.03",
    layer=Layer.PLACEMENT,
    dependencies=["T1.02"],
    description="Build edges from valid connections and anchor their labels",
)
def edge_midpoints(ctx: PipelineContext) -> None:
    edges: list[Edge] = []
    dropped: list[int] = []

    for conn in ctx.connections:
        from_node = ctx.get_node(conn.source)
        to_node = ctx.get_node(conn.target)
        if from_node is None or to_node is None or not conn.has_label:
            dropped.append(conn.index)
            logger.debug(
                "Dropping connection #%d (%r -> %r, label=%r)",
                conn.index, conn.source, conn.target, conn.label,
            )
            continue

        edges.append(Edge(
            id=f"e{conn.index}",
            label=conn.label,
            from_node=from_node,
            to_node=to_node,
            midpoint=interpolate(from_node, to_node),
        ))

    ctx.edges = edges
    ctx.dropped_connections = dropped
