"""T2.02 — Overlap Detection. ★★

Pairwise padded rectangle test over every node and label item. Two boxes
collide unless some axis separates them by more than the padding, so
touching boxes and near-misses both count.

Only labels are ever moved out: a label that collides with anything (a node,
its own endpoint nodes included, or another label) sends its edge to
overflow. Node/node collisions mark nothing.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from app.engine.context import BoundingBox, ItemKind, PipelineContext
from app.engine.registry import Layer, transform


def overlap_matrix(boxes: list[BoundingBox], padding: float) -> NDArray[np.bool_]:
    """Symmetric NxN collision matrix with a False diagonal.

    Row item ``a`` is tested against column item ``b`` for a < b; the lower
    triangle mirrors it.
    """
    n = len(boxes)
    if n == 0:
        return np.zeros((0, 0), dtype=bool)

    left = np.array([b.left for b in boxes], dtype=np.float64)
    right = np.array([b.right for b in boxes], dtype=np.float64)
    top = np.array([b.top for b in boxes], dtype=np.float64)
    bottom = np.array([b.bottom for b in boxes], dtype=np.float64)

    separated = (
        (left[None, :] > right[:, None] + padding)
        | (right[None, :] < left[:, None] - padding)
        | (top[None, :] > bottom[:, None] + padding)
        | (bottom[None, :] < top[:, None] - padding)
    )
    upper = np.triu(~separated, k=1)
    return upper | upper.T


@transform(
    id="T2.02",
    layer=Layer.COLLISION,
    dependencies=["T2.01"],
    description="Detect padded overlaps and mark colliding labels",
)
def overlap_detection(ctx: PipelineContext) -> None:
    items = ctx.layout_items
    matrix = overlap_matrix([item.bbox for item in items], ctx.config.overlap_padding)
    ctx.overlap_matrix = matrix

    if len(items) < 2:
        ctx.overflow_edge_ids = set()
        return

    colliding = matrix.any(axis=1)
    ctx.overflow_edge_ids = {
        item.id
        for item, hit in zip(items, colliding)
        if hit and item.kind is ItemKind.LABEL
    }
