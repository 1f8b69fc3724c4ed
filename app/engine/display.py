"""Display hints for the rendering layer: node colors and overflow regions.

Nothing here affects geometry. Bucket order is positional, so the region a
bucket is shown in is a fixed mapping rather than a spatial choice.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.engine.context import Edge, LayoutResult


@dataclass(frozen=True)
class NodeColor:
    background: str
    border: str
    text: str


NODE_COLOR_PALETTE: tuple[NodeColor, ...] = (
    NodeColor(background="blue-100", border="blue-400", text="blue-800"),
    NodeColor(background="emerald-100", border="emerald-400", text="emerald-800"),
    NodeColor(background="amber-100", border="amber-400", text="amber-800"),
    NodeColor(background="violet-100", border="violet-400", text="violet-800"),
    NodeColor(background="rose-100", border="rose-400", text="rose-800"),
)


@dataclass(frozen=True)
class OverflowRegion:
    name: str
    bucket: int
    tone: str


# Display order: top row first, left before right.
OVERFLOW_REGIONS: tuple[OverflowRegion, ...] = (
    OverflowRegion(name="top-left", bucket=1, tone="rose-50"),
    OverflowRegion(name="top-right", bucket=0, tone="amber-50"),
    OverflowRegion(name="bottom-left", bucket=3, tone="emerald-50"),
    OverflowRegion(name="bottom-right", bucket=2, tone="blue-50"),
)


def node_color(color_index: int) -> NodeColor:
    return NODE_COLOR_PALETTE[color_index % len(NODE_COLOR_PALETTE)]


def overflow_regions(result: LayoutResult) -> dict[str, list[Edge]]:
    """Map each screen corner to the edges of the bucket shown there."""
    return {
        region.name: list(result.overflow_buckets[region.bucket])
        for region in OVERFLOW_REGIONS
    }
