import math

import pytest

from drills.dijkstra import ShortestPathGraph

EXAMPLE_EDGES = [
    (0, 1, 4),
    (0, 2, 15),
    (0, 3, 21),
    (1, 3, 1),
    (1, 4, 7),
    (1, 5, 9),
    (3, 2, 11),
    (3, 4, 5),
    (4, 5, 14),
    (5, 2, 14),
]


@pytest.fixture
def example():
    graph = ShortestPathGraph()
    for node in range(6):
        graph.add_node(node)
    for src, dst, weight in EXAMPLE_EDGES:
        graph.add_edge(src, dst, weight)
    return graph


def test_example_distances(example):
    assert example.dijkstra(0) == {0: 0, 1: 4, 2: 15, 3: 5, 4: 10, 5: 13}


def test_source_distance_is_zero(example):
    assert example.dijkstra(3)[3] == 0


def test_no_edge_can_shorten_a_distance(example):
    distances = example.dijkstra(0)
    for src, dst, weight in EXAMPLE_EDGES:
        assert distances[dst] <= distances[src] + weight


def test_every_distance_is_achieved_by_some_edge(example):
    distances = example.dijkstra(0)
    for node, distance in distances.items():
        if node == 0:
            continue
        assert any(
            distances[src] + weight == distance
            for src, dst, weight in EXAMPLE_EDGES
            if dst == node
        )


def test_single_edge():
    graph = ShortestPathGraph()
    graph.add_edge("a", "b", 7)
    assert graph.dijkstra("a")["b"] == 7


def test_unreachable_nodes_are_infinite(example):
    distances = example.dijkstra(2)
    assert distances[2] == 0
    assert all(math.isinf(distances[n]) for n in (0, 1, 3, 4, 5))


def test_reweighting_an_edge_replaces_it():
    graph = ShortestPathGraph()
    graph.add_edge("a", "b", 10)
    graph.add_edge("a", "b", 3)
    assert graph.dijkstra("a")["b"] == 3


def test_negative_weight_rejected():
    graph = ShortestPathGraph()
    with pytest.raises(ValueError):
        graph.add_edge(0, 1, -1)


def test_unknown_source_raises(example):
    with pytest.raises(KeyError):
        example.dijkstra(99)