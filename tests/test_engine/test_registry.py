"""Tests for the transform registry."""

import pytest

from app.engine.context import PipelineContext
from app.engine.pipeline import create_pipeline
from app.engine.registry import Layer, TransformRegistry, TransformSpec, get_registry


def _noop(ctx: PipelineContext) -> None:
    pass


def test_register_and_get():
    reg = TransformRegistry()
    spec = TransformSpec(id="T0.01", layer=Layer.GRAPH, fn=_noop)
    reg.register(spec)
    assert reg.get("T0.01") is spec
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", layer=Layer.GRAPH, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(TransformSpec(id="T0.01", layer=Layer.GRAPH, fn=_noop))


def test_get_layer():
    reg = TransformRegistry()
    s0 = TransformSpec(id="T0.01", layer=Layer.GRAPH, fn=_noop)
    s1 = TransformSpec(id="T1.01", layer=Layer.PLACEMENT, fn=_noop)
    reg.register(s0)
    reg.register(s1)
    layer0 = reg.get_layer(Layer.GRAPH)
    assert len(layer0) == 1
    assert layer0[0].id == "T0.01"


def test_resolve_order_with_deps():
    reg = TransformRegistry()
    s1 = TransformSpec(id="T1.02", layer=Layer.PLACEMENT, fn=_noop)
    s2 = TransformSpec(id="T2.01", layer=Layer.COLLISION, fn=_noop, dependencies=["T1.02"])
    reg.register(s1)
    reg.register(s2)
    order = reg.resolve_order({"T2.01"})
    ids = [s.id for s in order]
    assert ids.index("T1.02") < ids.index("T2.01")


def test_resolve_order_all():
    reg = TransformRegistry()
    for i in range(5):
        reg.register(TransformSpec(id=f"T0.0{i+1}", layer=Layer.GRAPH, fn=_noop))
    order = reg.resolve_order(None)
    assert [s.id for s in order] == ["T0.01", "T0.02", "T0.03", "T0.04", "T0.05"]


def test_resolve_order_detects_cycle():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T3.01", layer=Layer.OVERFLOW, fn=_noop, dependencies=["T3.02"]))
    reg.register(TransformSpec(id="T3.02", layer=Layer.OVERFLOW, fn=_noop, dependencies=["T3.01"]))
    with pytest.raises(ValueError, match="Circular"):
        reg.resolve_order()


def test_decorated_transforms_carry_description():
    create_pipeline()
    spec = get_registry().get("T2.02")
    assert spec.layer is Layer.COLLISION
    assert spec.dependencies == ["T2.01"]
    assert spec.description
    assert not hasattr(spec, "tags")
