"""Graph algorithms: strongly connected components, cycles, bridges,
articulation points and shortest paths."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence


def kosaraju_scc(n: int, adj: Sequence[Sequence[int]]) -> list[int]:
    """Component id of every node of a directed graph.

    Ids are numbered in topological order of the condensation: an edge
    between different components always goes from a smaller id to a larger one.
    """
    radj: list[list[int]] = [[] for _ in range(n)]
    for u in range(n):
        for v in adj[u]:
            radj[v].append(u)

    visited = [False] * n
    order: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        work = [(start, iter(adj[start]))]
        while work:
            u, neighbours = work[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = True
                    work.append((v, iter(adj[v])))
                    break
            else:
                work.pop()
                order.append(u)

    component = [-1] * n
    count = 0
    for start in reversed(order):
        if component[start] != -1:
            continue
        component[start] = count
        stack = [start]
        while stack:
            u = stack.pop()
            for v in radj[u]:
                if component[v] == -1:
                    component[v] = count
                    stack.append(v)
        count += 1
    return component


def tarjan_scc(n: int, adj: Sequence[Sequence[int]]) -> list[list[int]]:
    """Strongly connected components of a directed graph, in the order found.

    Components come out in reverse topological order of the condensation.
    """
    index = [-1] * n
    low = [0] * n
    on_stack = [False] * n
    stack: list[int] = []
    components: list[list[int]] = []
    counter = 0

    for start in range(n):
        if index[start] != -1:
            continue
        index[start] = low[start] = counter
        counter += 1
        stack.append(start)
        on_stack[start] = True
        work = [(start, iter(adj[start]))]
        while work:
            u, neighbours = work[-1]
            for v in neighbours:
                if index[v] == -1:
                    index[v] = low[v] = counter
                    counter += 1
                    stack.append(v)
                    on_stack[v] = True
                    work.append((v, iter(adj[v])))
                    break
                if on_stack[v]:
                    low[u] = min(low[u], index[v])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[u])
                if low[u] == index[u]:
                    component: list[int] = []
                    while True:
                        x = stack.pop()
                        on_stack[x] = False
                        component.append(x)
                        if x == u:
                            break
                    components.append(component)
    return components


def find_cycle(n: int, adj: Sequence[Sequence[int]]) -> list[int] | None:
    """A directed cycle as ``[start, ..., start]``, or ``None`` if the graph is acyclic."""
    color = [0] * n
    parent = [-1] * n
    for start in range(n):
        if color[start]:
            continue
        color[start] = 1
        work = [(start, iter(adj[start]))]
        while work:
            v, neighbours = work[-1]
            for u in neighbours:
                if color[u] == 0:
                    parent[u] = v
                    color[u] = 1
                    work.append((u, iter(adj[u])))
                    break
                if color[u] == 1:
                    cycle = [u]
                    x = v
                    while x != u:
                        cycle.append(x)
                        x = parent[x]
                    cycle.append(u)
                    cycle.reverse()
                    return cycle
            else:
                color[v] = 2
                work.pop()
    return None


def bridges(n: int, adj: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Edges of an undirected graph whose removal disconnects it, as ``(parent, child)``."""
    disc = [0] * n
    low = [0] * n
    timer = 1
    result: list[tuple[int, int]] = []
    for start in range(n):
        if disc[start]:
            continue
        disc[start] = low[start] = timer
        timer += 1
        work = [(start, -1, iter(adj[start]))]
        while work:
            u, par, neighbours = work[-1]
            for v in neighbours:
                if not disc[v]:
                    disc[v] = low[v] = timer
                    timer += 1
                    work.append((v, u, iter(adj[v])))
                    break
                if v != par:
                    low[u] = min(low[u], disc[v])
            else:
                work.pop()
                if work:
                    p = work[-1][0]
                    low[p] = min(low[p], low[u])
                    if low[u] == disc[u]:
                        result.append((p, u))
    return result


def articulation_points(n: int, adj: Sequence[Sequence[int]]) -> list[int]:
    """Vertices of an undirected graph whose removal disconnects it, ascending."""
    disc = [0] * n
    low = [0] * n
    timer = 1
    points: set[int] = set()
    for start in range(n):
        if disc[start]:
            continue
        disc[start] = low[start] = timer
        timer += 1
        root_children = 0
        work = [(start, -1, iter(adj[start]))]
        while work:
            u, par, neighbours = work[-1]
            for v in neighbours:
                if not disc[v]:
                    disc[v] = low[v] = timer
                    timer += 1
                    work.append((v, u, iter(adj[v])))
                    break
                if v != par:
                    low[u] = min(low[u], disc[v])
            else:
                work.pop()
                if not work:
                    continue
                p = work[-1][0]
                low[p] = min(low[p], low[u])
                if p == start:
                    root_children += 1
                    if root_children >= 2:
                        points.add(p)
                elif low[u] >= disc[p]:
                    points.add(p)
    return sorted(points)


def dijkstra(source: int, adj: Sequence[Sequence[tuple[int, int]]]) -> list[float]:
    """Shortest distances from ``source``; ``adj[u]`` holds ``(v, weight)`` pairs.

    Unreachable nodes get ``math.inf``.
    """
    n = len(adj)
    if not 0 <= source < n:
        raise IndexError(f"source {source} out of range")
    dist: list[float] = [math.inf] * n
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        cost, node = heapq.heappop(heap)
        if cost != dist[node]:
            continue
        for child, weight in adj[node]:
            candidate = cost + weight
            if candidate < dist[child]:
                dist[child] = candidate
                heapq.heappush(heap, (candidate, child))
    return dist