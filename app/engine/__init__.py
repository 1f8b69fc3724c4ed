"""Concept map layout engine."""

from app.engine.registry import transform, Layer, get_registry
from app.engine.context import Edge, LayoutResult, Node, PipelineContext
from app.engine.pipeline import Pipeline, compute_layout, create_pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "Edge",
    "LayoutResult",
    "Node",
    "PipelineContext",
    "Pipeline",
    "compute_layout",
    "create_pipeline",
]
