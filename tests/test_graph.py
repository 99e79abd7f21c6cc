"""Tests for the graph model."""

import pytest

from schema_diagram.core import DuplicateNodeError, Edge, Graph, Node


def make_node(node_id):
    return Node(id=node_id, name=node_id, width=10, height=10)


def test_insertion_order_preserved():
    graph = Graph([make_node("c"), make_node("a"), make_node("b")])

    assert [n.id for n in graph.nodes] == ["c", "a", "b"]
    assert list(graph.node_map()) == ["c", "a", "b"]


def test_lookup_by_identity():
    node = make_node("User")
    graph = Graph([node])

    assert graph.get_node("User") is node
    assert graph.get_node("Post") is None
    assert "User" in graph
    assert len(graph) == 1


def test_duplicate_identity_rejected():
    graph = Graph([make_node("User")])

    with pytest.raises(DuplicateNodeError) as exc_info:
        graph.add_node(make_node("User"))

    assert exc_info.value.node_id == "User"
    assert len(graph) == 1


def test_edges_may_reference_missing_nodes():
    graph = Graph([make_node("A")])
    edge = graph.add_edge(Edge(source="A", target="B"))

    assert graph.edges == [edge]
    assert graph.is_dangling(edge)
