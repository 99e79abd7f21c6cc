"""Tests for the force-directed simulation engine."""

import itertools
import logging
import math
import random

import pytest

from schema_diagram.core import (
    Canvas,
    Edge,
    EmptyGraphError,
    Graph,
    InternalLayoutError,
    LayoutConfig,
    Node,
    force_layout,
    ideal_edge_length,
)


def make_node(node_id, x=0.0, y=0.0, width=50, height=30):
    return Node(id=node_id, name=node_id, width=width, height=height, x=x, y=y)


def distance(a, b):
    return math.hypot(a.x - b.x, a.y - b.y)


def min_pairwise_distance(nodes):
    return min(distance(a, b) for a, b in itertools.combinations(nodes, 2))


def random_graph(count, seed, canvas=Canvas()):
    rng = random.Random(seed)
    return Graph(
        make_node(f"n{i}", rng.random() * canvas.width, rng.random() * canvas.height)
        for i in range(count)
    )


def test_ideal_edge_length():
    canvas = Canvas(width=1920, height=1080)
    assert ideal_edge_length(canvas, 2) == pytest.approx(math.sqrt(1920 * 1080 / 2))
    assert ideal_edge_length(canvas, 1) == pytest.approx(math.sqrt(1920 * 1080))


def test_ideal_edge_length_zero_nodes():
    with pytest.raises(EmptyGraphError):
        ideal_edge_length(Canvas(), 0)


def test_empty_graph_raises():
    with pytest.raises(EmptyGraphError):
        force_layout(Graph())


@pytest.mark.parametrize("count", [1, 2, 3, 7])
def test_unconnected_nodes_stay_finite_and_distinct(count):
    graph = random_graph(count, seed=count)

    force_layout(graph, LayoutConfig())

    assert all(node.is_finite() for node in graph)
    if count > 1:
        assert min_pairwise_distance(graph.nodes) > 1e-3


def test_coincident_start_is_separated():
    graph = Graph(make_node(f"n{i}") for i in range(10))

    force_layout(graph, LayoutConfig())

    assert all(node.is_finite() for node in graph)
    assert min_pairwise_distance(graph.nodes) > 1.0


def test_coincident_start_is_reproducible():
    first = Graph(make_node(f"n{i}") for i in range(5))
    second = Graph(make_node(f"n{i}") for i in range(5))

    force_layout(first)
    force_layout(second)

    assert [(n.x, n.y) for n in first] == [(n.x, n.y) for n in second]


def test_ten_unconnected_nodes_do_not_overlap():
    graph = random_graph(10, seed=7)

    force_layout(graph, LayoutConfig())

    assert min_pairwise_distance(graph.nodes) > 50


def test_same_input_same_output():
    first = random_graph(6, seed=3)
    second = random_graph(6, seed=3)
    for graph in (first, second):
        graph.add_edge(Edge(source="n0", target="n1"))
        graph.add_edge(Edge(source="n2", target="n3"))

    force_layout(first)
    force_layout(second)

    assert [(n.x, n.y) for n in first] == [(n.x, n.y) for n in second]


def test_connected_pair_settles_near_ideal_length():
    rng = random.Random(1234)
    a = make_node("A", rng.random() * 1920, rng.random() * 1080)
    b = make_node("B", rng.random() * 1920, rng.random() * 1080)
    graph = Graph([a, b], [Edge(source="A", target="B")])

    stats = force_layout(graph, LayoutConfig(canvas_width=1920, canvas_height=1080, iterations=100))

    k = math.sqrt(1920 * 1080 / 2)
    assert stats.ideal_edge_length == pytest.approx(k)
    assert distance(a, b) == pytest.approx(k, rel=0.2)


def test_larger_ideal_length_gives_larger_equilibrium():
    distances = []
    for k in (100, 200, 400):
        a = make_node("A", 0, 0)
        b = make_node("B", 30, 0)
        graph = Graph([a, b], [Edge(source="A", target="B")])

        force_layout(graph, LayoutConfig(ideal_edge_length=k, iterations=200))

        assert distance(a, b) == pytest.approx(k, rel=0.1)
        distances.append(distance(a, b))

    assert distances == sorted(distances)
    assert len(set(distances)) == 3


def test_dangling_edge_is_skipped(caplog):
    a = make_node("A", 100, 100)
    b = make_node("B", 300, 200)
    graph = Graph([a, b], [Edge(source="A", target="Missing"), Edge(source="A", target="B")])

    with caplog.at_level(logging.WARNING, logger="schema_diagram.core.layout"):
        stats = force_layout(graph)

    assert stats.skipped_edges == 1
    assert a.is_finite() and b.is_finite()
    assert "Missing" in caplog.text


def test_self_loop_has_no_effect_on_single_node():
    node = make_node("A", 10, 20)
    graph = Graph([node], [Edge(source="A", target="A")])

    force_layout(graph)

    assert (node.x, node.y) == (10, 20)


def test_tolerance_stops_early():
    graph = random_graph(4, seed=11)

    stats = force_layout(graph, LayoutConfig(tolerance=1000))

    assert stats.converged
    assert stats.iterations == 1


def test_runs_full_iteration_budget_by_default():
    graph = random_graph(3, seed=5)

    stats = force_layout(graph, LayoutConfig(iterations=25))

    assert stats.iterations == 25
    assert not stats.converged


def test_non_finite_position_fails_fast():
    a = make_node("A", 1.7e308, 0)
    b = make_node("B", -1.7e308, 0)
    graph = Graph([a, b])

    with pytest.raises(InternalLayoutError):
        force_layout(graph)

    # Nothing is written back on failure
    assert (a.x, b.x) == (1.7e308, -1.7e308)


def test_nodes_may_leave_canvas():
    graph = random_graph(20, seed=2, canvas=Canvas(width=100, height=100))

    force_layout(graph, LayoutConfig(canvas_width=100, canvas_height=100))

    assert all(node.is_finite() for node in graph)
    assert any(not (0 <= node.x < 100 and 0 <= node.y < 100) for node in graph)
