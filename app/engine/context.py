"""PipelineContext — the single mutable state object flowing through all layout stages.

Per-concept results → Node
Per-connection results → Edge
Cross-item results → PipelineContext.* (layout_items, overlap_matrix, buckets, etc.)
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from app.engine.config import LayoutConfig
from app.engine.layout_constants import OVERFLOW_BUCKET_COUNT, RADIUS_FRACTION


@dataclass
class ConnectionData:
    """One raw connection as handed to the engine. Any field may be missing."""

    source: str | None = None
    target: str | None = None
    label: str | None = None
    # Position in the caller's input sequence
    index: int = 0

    @property
    def has_label(self) -> bool:
        return bool(self.label)


@dataclass(eq=False)
class Node:
    """A unique concept placed on the drawing surface."""

    id: str
    label: str
    color_index: int = 0
    x: float = 0.0
    y: float = 0.0

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(eq=False)
class Edge:
    """A labeled connection between two nodes of the same node table."""

    id: str
    label: str
    from_node: Node
    to_node: Node
    midpoint: tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class BoundingBox:
    left: float
    right: float
    top: float
    bottom: float

    @classmethod
    def centered(cls, cx: float, cy: float, width: float, height: float) -> BoundingBox:
        return cls(
            left=cx - width / 2,
            right=cx + width / 2,
            top=cy - height / 2,
            bottom=cy + height / 2,
        )

    def overlaps(self, other: BoundingBox, padding: float = 0.0) -> bool:
        """True unless the boxes are separated by more than ``padding`` on some axis."""
        return not (
            other.left > self.right + padding
            or other.right < self.left - padding
            or other.top > self.bottom + padding
            or other.bottom < self.top - padding
        )


class ItemKind(str, enum.Enum):
    NODE = "node"
    LABEL = "label"


@dataclass
class LayoutItem:
    """Unit of collision testing: a node footprint or an edge label footprint."""

    kind: ItemKind
    ref: Node | Edge
    bbox: BoundingBox

    @property
    def id(self) -> str:
        return self.ref.id


@dataclass(frozen=True)
class UsableArea:
    """Drawing area left after the fixed margins are removed."""

    left: float
    top: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.width / 2, self.top + self.height / 2)

    @property
    def radius(self) -> float:
        return RADIUS_FRACTION * min(self.width, self.height)


def _empty_buckets() -> list[list[Edge]]:
    return [[] for _ in range(OVERFLOW_BUCKET_COUNT)]


@dataclass
class LayoutResult:
    """Final output handed to the rendering layer."""

    visible_nodes: list[Node] = field(default_factory=list)
    visible_edges: list[Edge] = field(default_factory=list)
    overflow_buckets: list[list[Edge]] = field(default_factory=_empty_buckets)

    @property
    def overflowed_edges(self) -> list[Edge]:
        """All bucketed edges, back in their original input order."""
        edges = [e for bucket in self.overflow_buckets for e in bucket]
        return sorted(edges, key=lambda e: int(e.id[1:]))

    @property
    def is_empty(self) -> bool:
        return not self.visible_nodes and not self.visible_edges and not any(self.overflow_buckets)


@dataclass
class PipelineContext:
    """Shared state flowing through the entire pipeline."""

    # Raw connections in input order
    connections: list[ConnectionData] = field(default_factory=list)
    # Container dimensions (same unit as output coordinates)
    canvas_width: float = 0.0
    canvas_height: float = 0.0
    # Footprints and padding used by every stage
    config: LayoutConfig = field(default_factory=LayoutConfig)

    # --- Layer 0: graph ---
    # Deduplicated concept IDs in first-seen order
    concept_ids: list[str] = field(default_factory=list)
    # Node table keyed by concept ID (insertion order == concept_ids)
    nodes: dict[str, Node] = field(default_factory=dict)

    # --- Layer 1: placement ---
    area: UsableArea | None = None
    edges: list[Edge] = field(default_factory=list)
    dropped_connections: list[int] = field(default_factory=list)

    # --- Layer 2: collision ---
    layout_items: list[LayoutItem] = field(default_factory=list)
    # overlap_matrix[i][j] = True means layout_items i and j collide (padding included)
    overlap_matrix: NDArray[np.bool_] | None = None
    overflow_edge_ids: set[str] = field(default_factory=set)

    # --- Layer 3: overflow ---
    visible_edges: list[Edge] = field(default_factory=list)
    overflowed_edges: list[Edge] = field(default_factory=list)
    overflow_buckets: list[list[Edge]] = field(default_factory=_empty_buckets)
    visible_nodes: list[Node] = field(default_factory=list)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_nodes(self) -> int:
        return len(self.nodes)

    @property
    def is_measured(self) -> bool:
        """False while the container has no usable width yet."""
        return bool(np.isfinite(self.canvas_width)) and self.canvas_width > 0

    def get_node(self, concept_id: str | None) -> Node | None:
        if not concept_id:
            return None
        return self.nodes.get(concept_id)

    def summary(self) -> dict[str, Any]:
        return {
            "connections": len(self.connections),
            "nodes": self.num_nodes,
            "visible_nodes": len(self.visible_nodes),
            "edges": len(self.edges),
            "visible_edges": len(self.visible_edges),
            "overflowed": len(self.overflowed_edges),
            "dropped": len(self.dropped_connections),
        }

    def to_result(self) -> LayoutResult:
        return LayoutResult(
            visible_nodes=list(self.visible_nodes),
            visible_edges=list(self.visible_edges),
            overflow_buckets=[list(b) for b in self.overflow_buckets],
        )
