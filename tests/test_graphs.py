import random

import pytest

from algokit.graphs import (
    DirectedGraph,
    articulation_points,
    dfs_order,
    undirected_adjacency,
)


def _components(node_count, edges, removed=None):
    adjacency = {n: set() for n in range(1, node_count + 1) if n != removed}
    for x, y in edges:
        if removed in (x, y):
            continue
        adjacency[x].add(y)
        adjacency[y].add(x)
    seen = set()
    count = 0
    for start in adjacency:
        if start in seen:
            continue
        count += 1
        pending = [start]
        seen.add(start)
        while pending:
            node = pending.pop()
            for other in adjacency[node]:
                if other not in seen:
                    seen.add(other)
                    pending.append(other)
    return count


def _random_edges(rng, node_count, edge_count):
    return [
        (rng.randint(1, node_count), rng.randint(1, node_count))
        for _ in range(edge_count)
    ]


def test_undirected_adjacency_stores_both_directions():
    adjacency = undirected_adjacency(3, [(1, 2), (2, 3)])
    assert len(adjacency) == 4
    assert 2 in adjacency[1] and 1 in adjacency[2]
    assert 3 in adjacency[2] and 2 in adjacency[3]
    assert adjacency[0] == []


def test_undirected_adjacency_rejects_out_of_range_node():
    with pytest.raises(ValueError):
        undirected_adjacency(2, [(1, 5)])


def test_dfs_on_path_follows_the_path():
    adjacency = undirected_adjacency(3, [(1, 2), (2, 3)])
    assert dfs_order(adjacency, 1) == [1, 2, 3]


@pytest.mark.parametrize("seed", range(5))
def test_dfs_visits_each_reachable_node_once(seed):
    rng = random.Random(seed)
    edges = _random_edges(rng, 12, 15)
    adjacency = undirected_adjacency(12, edges)
    order = dfs_order(adjacency, 1)
    assert order[0] == 1
    assert len(order) == len(set(order))
    # every later node is adjacent to some node visited before it
    for index, node in enumerate(order[1:], start=1):
        assert any(node in adjacency[prev] for prev in order[:index])
    # nothing reachable is left out
    for node in order:
        assert set(adjacency[node]) <= set(order)


def test_dfs_rejects_unknown_source():
    adjacency = undirected_adjacency(2, [(1, 2)])
    with pytest.raises(IndexError):
        dfs_order(adjacency, 9)


def test_bfs_example_graph():
    graph = DirectedGraph(4)
    for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
        graph.add_edge(v, w)
    assert graph.bfs(2) == [2, 0, 3, 1]


def test_bfs_only_reaches_along_edge_direction():
    graph = DirectedGraph(3)
    graph.add_edge(1, 0)
    assert graph.bfs(0) == [0]
    assert set(graph.bfs(1)) == {0, 1}


def test_bfs_rejects_bad_vertices():
    graph = DirectedGraph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2)
    with pytest.raises(IndexError):
        graph.bfs(-1)


def test_articulation_points_worked_example():
    edges = [(1, 2), (1, 3), (3, 2), (1, 4), (4, 5)]
    assert articulation_points(5, edges) == [1, 4]


def test_cycle_has_no_articulation_points():
    assert articulation_points(4, [(1, 2), (2, 3), (3, 4), (4, 1)]) == []


@pytest.mark.parametrize("seed", range(8))
def test_articulation_points_match_component_counts(seed):
    rng = random.Random(seed)
    node_count = 9
    edges = [(x, y) for x, y in _random_edges(rng, node_count, 10) if x != y]
    points = set(articulation_points(node_count, edges))
    base = _components(node_count, edges)
    for node in range(1, node_count + 1):
        # removing an isolated node lowers the count by one; otherwise it stays or grows
        isolated = all(node not in edge for edge in edges)
        after = _components(node_count, edges, removed=node)
        assert (node in points) == (after > base - (1 if isolated else 0))