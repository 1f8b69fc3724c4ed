"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.engine.context import Edge, LayoutResult, Node
from app.engine.display import node_color, overflow_regions


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class NodeColorOut(BaseModel):
    background: str
    border: str
    text: str


class NodeOut(BaseModel):
    id: str
    label: str
    color_index: int
    color: NodeColorOut
    x: float
    y: float

    @classmethod
    def from_node(cls, node: Node) -> NodeOut:
        color = node_color(node.color_index)
        return cls(
            id=node.id,
            label=node.label,
            color_index=node.color_index,
            color=NodeColorOut(background=color.background, border=color.border, text=color.text),
            x=node.x,
            y=node.y,
        )


class EdgeOut(BaseModel):
    id: str
    label: str
    from_id: str
    to_id: str
    from_pos: tuple[float, float]
    to_pos: tuple[float, float]
    midpoint: tuple[float, float]

    @classmethod
    def from_edge(cls, edge: Edge) -> EdgeOut:
        return cls(
            id=edge.id,
            label=edge.label,
            from_id=edge.from_node.id,
            to_id=edge.to_node.id,
            from_pos=edge.from_node.position,
            to_pos=edge.to_node.position,
            midpoint=edge.midpoint,
        )


class LayoutResponse(BaseModel):
    visible_nodes: list[NodeOut] = Field(default_factory=list)
    visible_edges: list[EdgeOut] = Field(default_factory=list)
    overflow_buckets: list[list[EdgeOut]] = Field(default_factory=list)
    overflow_regions: dict[str, list[EdgeOut]] = Field(default_factory=dict)
    processing_time_ms: float = 0.0
    errors: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_result(
        cls,
        result: LayoutResult,
        processing_time_ms: float = 0.0,
        errors: dict[str, str] | None = None,
    ) -> LayoutResponse:
        return cls(
            visible_nodes=[NodeOut.from_node(n) for n in result.visible_nodes],
            visible_edges=[EdgeOut.from_edge(e) for e in result.visible_edges],
            overflow_buckets=[[EdgeOut.from_edge(e) for e in b] for b in result.overflow_buckets],
            overflow_regions={
                name: [EdgeOut.from_edge(e) for e in edges]
                for name, edges in overflow_regions(result).items()
            },
            processing_time_ms=processing_time_ms,
            errors=errors or {},
        )
