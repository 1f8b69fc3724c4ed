"""Shared test fixtures."""

from __future__ import annotations

import pytest

from app.engine.context import PipelineContext
from app.engine.pipeline import create_pipeline
from app.graph.loader import load_connections


# Three concepts in a triangle; nothing collides at 1000x1000.
TRIANGLE = [
    {"from": "A", "to": "B", "label": "causes"},
    {"from": "B", "to": "C", "label": "leads to"},
    {"from": "A", "to": "C", "label": "relates to"},
]

# A<->B labels share a midpoint and collide; C->D stays clear at 1000x1000.
ORPHANING = [
    {"from": "A", "to": "B", "label": "feeds"},
    {"from": "B", "to": "A", "label": "feeds back"},
    {"from": "C", "to": "D", "label": "stores"},
]

MALFORMED = [
    {"from": "A", "to": "B", "label": ""},
    {"from": "A", "to": "B"},
    {"from": None, "to": "D", "label": "orphan"},
    {"to": "E", "label": "no source"},
    {"from": "B", "to": "C", "label": "valid"},
    {"from": "", "to": "C", "label": "blank source"},
]

# Nine distinct pairs among six concepts.
CROWDED = [
    {"from": f"N{i}", "to": f"N{(i + 1) % 6}", "label": f"rel {i}"}
    for i in range(6)
] + [
    {"from": "N0", "to": "N3", "label": "across 0"},
    {"from": "N1", "to": "N4", "label": "across 1"},
    {"from": "N2", "to": "N5", "label": "across 2"},
]


def run_layout(connections, width: float = 1000.0, height: float = 1000.0) -> PipelineContext:
    pipeline = create_pipeline()
    ctx = load_connections(connections, width, height, config=pipeline.config)
    return pipeline.run(ctx)


@pytest.fixture
def triangle() -> list[dict]:
    return [dict(c) for c in TRIANGLE]


@pytest.fixture
def orphaning() -> list[dict]:
    return [dict(c) for c in ORPHANING]


@pytest.fixture
def malformed() -> list[dict]:
    return [dict(c) for c in MALFORMED]


@pytest.fixture
def crowded() -> list[dict]:
    return [dict(c) for c in CROWDED]
