"""Graph traversals: depth-first order, breadth-first order and articulation points."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Edge = tuple[int, int]


def undirected_adjacency(node_count: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Build adjacency lists for nodes ``0..node_count``, storing each edge both ways."""
    if node_count < 0:
        raise ValueError("node_count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(node_count + 1)]
    for x, y in edges:
        for node in (x, y):
            if not 0 <= node <= node_count:
                raise ValueError(f"node {node} is outside 0..{node_count}")
        adjacency[x].append(y)
        adjacency[y].append(x)
    return adjacency


def dfs_order(adjacency: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return the nodes in the order a depth-first search from ``source`` visits them."""
    if not 0 <= source < len(adjacency):
        raise IndexError(f"source {source} is not a node of the graph")
    visited = {source}
    order = [source]
    stack = [iter(adjacency[source])]
    while stack:
        for child in stack[-1]:
            if child not in visited:
                visited.add(child)
                order.append(child)
                stack.append(iter(adjacency[child]))
                break
        else:
            stack.pop()
    return order


class DirectedGraph:
    """A directed graph on vertices ``0..vertex_count-1`` kept as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} is outside 0..{self.vertex_count - 1}")

    def add_edge(self, v: int, w: int) -> None:
        """Add an edge from ``v`` to ``w``."""
        self._check(v)
        self._check(w)
        self._adjacency[v].append(w)

    def bfs(self, source: int) -> list[int]:
        """Return the vertices in breadth-first order starting from ``source``."""
        self._check(source)
        visited = [False] * self.vertex_count
        visited[source] = True
        queue = deque([source])
        order: list[int] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for adjacent in self._adjacency[vertex]:
                if not visited[adjacent]:
                    visited[adjacent] = True
                    queue.append(adjacent)
        return order


def articulation_points(node_count: int, edges: Iterable[Edge]) -> list[int]:
    """Return, in ascending order, the articulation points among nodes ``1..node_count``."""
    adjacency = undirected_adjacency(node_count, edges)
    size = len(adjacency)
    disc = [-1] * size
    low = [-1] * size
    parent = [-1] * size
    children = [0] * size
    is_point = [False] * size
    time = 0

    for root in range(1, node_count + 1):
        if disc[root] != -1:
            continue
        disc[root] = low[root] = time
        time += 1
        stack = [(root, iter(adjacency[root]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if disc[v] == -1:
                    children[u] += 1
                    parent[v] = u
                    disc[v] = low[v] = time
                    time += 1
                    stack.append((v, iter(adjacency[v])))
                    break
                if v != parent[u]:
                    low[u] = min(low[u], disc[v])
            else:
                stack.pop()
                p = parent[u]
                if p == -1:
                    continue
                low[p] = min(low[p], low[u])
                if parent[p] == -1 and children[p] > 1:
                    is_point[p] = True
                if parent[p] != -1 and low[u] >= disc[p]:
                    is_point[p] = True

    return [node for node in range(1, node_count + 1) if is_point[node]]