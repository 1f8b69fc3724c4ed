"""T1.02 — Circular Placement.

Node i of n sits at angle (i/n)·2π − π/2 on the circle inscribed in the
usable area: index 0 at the top, proceeding clockwise in screen space.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from app.engine.context import PipelineContext, UsableArea
from app.engine.registry import Layer, transform


def circle_angles(n: int) -> NDArray[np.float64]:
    """Angles of ``n`` evenly spaced slots, first slot at −π/2."""
    if n <= 0:
        return np.empty(0)
    return (np.arange(n) / n) * 2 * np.pi - np.pi / 2


def circle_positions(n: int, area: UsableArea) -> NDArray[np.float64]:
    """Nx2 array of slot positions on the area's inscribed circle."""
    angles = circle_angles(n)
    cx, cy = area.center
    radius = area.radius
    return np.column_stack([
        cx + radius * np.cos(angles),
        cy + radius * np.sin(angles),
    ])


@transform(
    id="T1.02",
    layer=Layer.PLACEMENT,
    dependencies=["T1.01"],
    description="Place nodes evenly on a circle in first-seen order",
)
def circular_placement(ctx: PipelineContext) -> None:
    n = ctx.num_nodes
    if n == 0 or ctx.area is None:
        return

    positions = circle_positions(n, ctx.area)
    for node, (x, y) in zip(ctx.nodes.values(), positions):
        node.x = float(x)
        node.y = float(y)
