"""Graph algorithms: articulation points, bridges, strongly connected
components and breadth/depth-first traversal of adjacency matrices."""

from collections import deque


def _undirected_adjacency(vertex_count, edges):
    adjacency = [[] for _ in range(vertex_count)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def articulation_points(vertex_count, adjacency):
    """Return the sorted articulation points of an undirected graph.

    ``adjacency[v]`` lists the neighbours of vertex ``v``. When the graph
    has no articulation point the result is ``[-1]``.
    """
    start = [0] * vertex_count
    low = [0] * vertex_count
    visited = [False] * vertex_count
    points = set()
    timer = 0

    def visit(node, parent):
        nonlocal timer
        visited[node] = True
        start[node] = low[node] = timer
        timer += 1
        children = 0
        for neighbour in adjacency[node]:
            if neighbour == parent:
                continue
            if not visited[neighbour]:
                children += 1
                visit(neighbour, node)
                low[node] = min(low[node], low[neighbour])
                if low[neighbour] >= start[node] and parent is not None:
                    points.add(node)
            else:
                low[node] = min(low[node], start[neighbour])
        if parent is None and children > 1:
            points.add(node)

    for vertex in range(vertex_count):
        if not visited[vertex]:
            visit(vertex, None)
    return sorted(points) or [-1]


def bridges(vertex_count, edges):
    """Return the bridges of an undirected graph as ``(u, v)`` tuples.

    Bridges are listed in the order the depth-first search finds them,
    with ``u`` the endpoint discovered first.
    """
    adjacency = _undirected_adjacency(vertex_count, edges)
    start = [0] * vertex_count
    low = [0] * vertex_count
    visited = [False] * vertex_count
    found = []
    timer = 0

    def visit(node, parent):
        nonlocal timer
        visited[node] = True
        start[node] = low[node] = timer
        timer += 1
        for neighbour in adjacency[node]:
            if neighbour == parent:
                continue
            if not visited[neighbour]:
                visit(neighbour, node)
                low[node] = min(low[node], low[neighbour])
                if start[node] < low[neighbour]:
                    found.append((node, neighbour))
            else:
                low[node] = min(low[node], low[neighbour])

    for vertex in range(vertex_count):
        if not visited[vertex]:
            visit(vertex, None)
    return found


def is_bridge(vertex_count, edges, c, d):
    """Tell whether the edge between ``c`` and ``d`` is a bridge."""
    return any({u, v} == {c, d} for u, v in bridges(vertex_count, edges))


def count_strongly_connected(vertex_count, edges):
    """Count the strongly connected components of a directed graph (Kosaraju)."""
    forward = [[] for _ in range(vertex_count)]
    backward = [[] for _ in range(vertex_count)]
    for u, v in edges:
        forward[u].append(v)
        backward[v].append(u)

    visited = [False] * vertex_count
    finish_order = []

    def fill(node):
        visited[node] = True
        for neighbour in forward[node]:
            if not visited[neighbour]:
                fill(neighbour)
        finish_order.append(node)

    for vertex in range(vertex_count):
        if not visited[vertex]:
            fill(vertex)

    visited = [False] * vertex_count

    def sweep(node):
        visited[node] = True
        for neighbour in backward[node]:
            if not visited[neighbour]:
                sweep(neighbour)

    components = 0
    for vertex in reversed(finish_order):
        if not visited[vertex]:
            components += 1
            sweep(vertex)
    return components


def bfs_order(matrix, start):
    """Return the breadth-first visiting order from ``start`` (0-based)."""
    visited = {start}
    order = [start]
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour, connected in enumerate(matrix[node]):
            if connected == 1 and neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                queue.append(neighbour)
    return order


def dfs_order(matrix, start):
    """Return the depth-first visiting order from ``start`` (0-based)."""
    visited = set()
    order = []

    def visit(node):
        if node in visited:
            return
        visited.add(node)
        order.append(node)
        for neighbour, connected in enumerate(matrix[node]):
            if connected == 1:
                visit(neighbour)

    visit(start)
    return order