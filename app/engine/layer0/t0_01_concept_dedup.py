"""T0.01 — Concept Deduplication.

Collect every endpoint ID in first-seen order. Each connection contributes
``from`` then ``to``. The resulting order fixes each node's angular slot, so
it must never come from an unordered structure.
"""

from __future__ import annotations

from app.engine.context import PipelineContext
from app.engine.registry import Layer, transform


@transform(
    id="T0.01",
    layer=Layer.GRAPH,
    description="Deduplicate concept IDs in first-seen order",
)
def concept_dedup(ctx: PipelineContext) -> None:
    seen: set[str] = set()
    ordered: list[str] = []

    for conn in ctx.connections:
        for concept_id in (conn.source, conn.target):
            # Missing endpoints never become concepts
            if not concept_id or concept_id in seen:
                continue
            seen.add(concept_id)
            ordered.append(concept_id)

    ctx.concept_ids = ordered
