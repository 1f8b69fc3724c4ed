"""Tests for Layer 3 transforms — partition, overflow buckets, visible nodes."""

import app.engine.layer3.t3_01_edge_partition
import app.engine.layer3.t3_02_overflow_buckets
import app.engine.layer3.t3_03_visible_nodes

from app.engine.layer3.t3_02_overflow_buckets import distribute
from app.engine.registry import Layer, get_registry
from tests.conftest import run_layout


def test_layer3_registers_3_transforms():
    run_layout([])
    layer3 = get_registry().get_layer(Layer.OVERFLOW)
    assert [s.id for s in layer3] == ["T3.01", "T3.02", "T3.03"]


def test_partition_keeps_input_order(orphaning):
    ctx = run_layout(orphaning)
    assert [e.id for e in ctx.visible_edges] == ["e2"]
    assert [e.id for e in ctx.overflowed_edges] == ["e0", "e1"]


def test_bucket_round_robin(crowded):
    ctx = run_layout(crowded, 100, 100)
    overflowed = [e.id for e in ctx.overflowed_edges]
    assert overflowed == [f"e{i}" for i in range(9)]
    assert len(ctx.overflow_buckets) == 4
    for i, bucket in enumerate(ctx.overflow_buckets):
        assert [e.id for e in bucket] == overflowed[i::4]


def test_bucket_positions_ignore_input_gaps(orphaning):
    ctx = run_layout(orphaning)
    # e0 and e1 are overflow positions 0 and 1
    assert [[e.id for e in b] for b in ctx.overflow_buckets] == [["e0"], ["e1"], [], []]


def test_distribute_fewer_than_four(triangle):
    ctx = run_layout(triangle)
    buckets = distribute(ctx.edges[:2])
    assert [[e.id for e in b] for b in buckets] == [["e0"], ["e1"], [], []]


def test_orphan_nodes_removed(orphaning):
    ctx = run_layout(orphaning)
    assert [n.id for n in ctx.visible_nodes] == ["C", "D"]
    assert "A" in ctx.nodes and "B" in ctx.nodes


def test_visible_nodes_in_node_order(malformed):
    ctx = run_layout(malformed)
    assert [n.id for n in ctx.visible_nodes] == ["B", "C"]


def test_everything_overflows_in_tiny_container(crowded):
    ctx = run_layout(crowded, 100, 100)
    assert ctx.visible_edges == []
    assert ctx.visible_nodes == []
    assert sum(len(b) for b in ctx.overflow_buckets) == 9
