"""T3.02 — Overflow Buckets.

Round-robin over the overflowed sequence: the k-th overflowed edge lands in
bucket k mod 4. Assignment is positional only and ignores where the label
would have been drawn.
"""

from __future__ import annotations

from app.engine.context import Edge, PipelineContext
from app.engine.layout_constants import OVERFLOW_BUCKET_COUNT
from app.engine.registry import Layer, transform


def distribute(edges: list[Edge], bucket_count: int = OVERFLOW_BUCKET_COUNT) -> list[list[Edge]]:
    buckets: list[list[Edge]] = [[] for _ in range(bucket_count)]
    for k, edge in enumerate(edges):
        buckets[k % bucket_count].append(edge)
    return buckets


@transform(
    id="T3.02",
    layer=Layer.OVERFLOW,
    dependencies=["T3.01"],
    description="Distribute overflowed edges round-robin into side buckets",
)
def overflow_buckets(ctx: PipelineContext) -> None:
    ctx.overflow_buckets = distribute(ctx.overflowed_edges)
