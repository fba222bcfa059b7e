# tests/test_graph.py
"""Tests for the Graph container and traversal helpers."""

from __future__ import annotations

import numpy as np
import pytest

from cutgraph.core.types import Relation
from cutgraph.graph.model import Graph
from cutgraph.graph.traversal import connected_components, graph_summary


def test_graph_starts_empty() -> None:
    graph = Graph(3)
    assert graph.node_count == 3
    assert graph.relations == ()
    assert graph.edges == ()
    assert not graph.is_built


def test_graph_rejects_out_of_range_relations() -> None:
    with pytest.raises(ValueError, match="outside"):
        Graph(2, [Relation(id_0=0, id_1=2, rel_probability=(0.5, 0.5))])
    with pytest.raises(ValueError, match="outside"):
        Graph(2, [Relation(id_0=-1, id_1=1, rel_probability=(0.5, 0.5))])


def test_graph_rejects_negative_node_count() -> None:
    with pytest.raises(ValueError):
        Graph(-1)


def test_build_from_relations_stores_repaired_relations(sample_relations) -> None:
    graph = Graph(5, sample_relations)
    result = graph.build_from_relations()

    assert graph.is_built
    assert graph.num_edges == result.num_edges == 7
    assert len(graph.relations) == 7
    assert graph.edges == tuple(result.edges)
    for node in range(1, graph.node_count):
        assert any(e.a == 0 and e.b == node for e in graph.edges)


def test_build_from_point_cloud_sets_node_count(textured_frame) -> None:
    graph = Graph()
    result = graph.build_from_point_cloud(textured_frame)

    assert graph.node_count == textured_frame.size == 30
    assert graph.num_edges == result.num_edges
    assert all(e.a < graph.node_count and e.b < graph.node_count for e in graph.edges)


def test_graph_is_populated_once(uniform_frame_2x2) -> None:
    graph = Graph()
    graph.build_from_point_cloud(uniform_frame_2x2)
    with pytest.raises(RuntimeError, match="already populated"):
        graph.build_from_point_cloud(uniform_frame_2x2)
    with pytest.raises(RuntimeError, match="already populated"):
        graph.build_from_relations()


def test_failed_build_leaves_graph_empty(uniform_frame_2x2) -> None:
    graph = Graph(3)
    with pytest.raises(AttributeError):
        graph.build_from_point_cloud(object())
    assert not graph.is_built
    assert graph.edges == ()

    result = graph.build_from_point_cloud(uniform_frame_2x2)
    assert graph.is_built
    assert result.num_edges == 4


def test_relation_graph_is_connected(sample_relations) -> None:
    graph = Graph(5, sample_relations)
    graph.build_from_relations()
    components = connected_components(graph)
    assert len(components) == 1
    assert sorted(components[0]) == [0, 1, 2, 3, 4]


def test_invalid_sample_is_isolated(make_frame) -> None:
    depth = np.ones((3, 3))
    depth[1, 1] = np.nan
    graph = Graph()
    graph.build_from_point_cloud(make_frame(3, 3, depth=depth))

    components = connected_components(graph)
    assert [4] in components
    assert sum(len(c) for c in components) == 9


def test_graph_summary(uniform_frame_2x2) -> None:
    graph = Graph()
    graph.build_from_point_cloud(uniform_frame_2x2)
    summary = graph_summary(graph)

    assert summary["node_count"] == 4
    assert summary["edge_count"] == 4
    assert summary["component_sizes"] == [4]
    assert summary["w"] == {"min": 0.0, "max": 1.0, "mean": 0.25}


def test_graph_summary_of_empty_graph() -> None:
    summary = graph_summary(Graph(2))
    assert summary["edge_count"] == 0
    assert summary["component_sizes"] == [1, 1]
    assert summary["w2"] == {"min": 0.0, "max": 0.0, "mean": 0.0}
