"""Traversal algorithms that drive the diagram one step at a time.

Both algorithms are generators. Before each ``yield`` they record the newly
visited vertex, and the edge it was reached through, in a ``ColorOverlay``,
so a caller can redraw after every step:

    overlay = ColorOverlay()
    for step in dijkstra(graph, 0, weights, overlay):
        print(render(graph, layout, overlay, options))
        input()
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass

import networkx as nx

from gridgraph.errors import InvalidTopologyError
from gridgraph.graph import Graph
from gridgraph.overlay import ColorOverlay

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraversalStep:
    """One visited vertex.

    Attributes:
        vertex: The vertex visited at this step.
        edge: Id of the edge it was reached through; None for the start.
        cost: Distance from the start (Dijkstra) or the weight of ``edge`` (Prim).
    """

    vertex: int
    edge: int | None
    cost: float


def _weighted(graph: Graph, start: int, weights: Sequence[float]) -> nx.MultiGraph:
    if not 0 <= start < graph.vertex_count:
        raise InvalidTopologyError(f"start vertex {start} outside [0, {graph.vertex_count})")
    graph.validate()
    for edge_id, weight in enumerate(weights):
        if weight < 0:
            raise ValueError(f"edge {edge_id} has negative weight {weight}")
    return graph.to_networkx(weights)


def _incident(g: nx.MultiGraph, vertex: int) -> list[tuple[int, int, float]]:
    """(neighbour, edge id, weight) for every edge at ``vertex``, in edge id order."""
    found = [(v, key, w) for _, v, key, w in g.edges(vertex, keys=True, data="weight")]
    return sorted(found, key=lambda item: item[1])


def _mark(overlay: ColorOverlay | None, step: TraversalStep, vertex_token: Hashable, edge_token: Hashable) -> None:
    if overlay is None:
        return
    overlay.color_vertex(step.vertex, vertex_token)
    if step.edge is not None:
        overlay.color_edge(step.edge, edge_token)


# ─── Dijkstra ─────────────────────────────────────────────────────────────────


def dijkstra(
    graph: Graph,
    start: int,
    weights: Sequence[float],
    overlay: ColorOverlay | None = None,
    *,
    vertex_token: Hashable = "visited",
    edge_token: Hashable = "path",
) -> Iterator[TraversalStep]:
    """Visit vertices in order of shortest distance from ``start``.

    Edges are undirected. Each step reports the vertex, the last edge of its
    shortest path and its distance. Vertices unreachable from ``start`` are
    never visited.
    """
    g = _weighted(graph, start, weights)
    if overlay is not None:
        overlay.reset()

    distances = [math.inf] * graph.vertex_count
    distances[start] = 0
    settled: set[int] = set()
    tie = itertools.count()
    heap: list[tuple[float, int, int, int | None]] = [(0, next(tie), start, None)]

    while heap:
        dist, _, u, via = heapq.heappop(heap)
        if u in settled:
            continue
        settled.add(u)

        for v, edge_id, weight in _incident(g, u):
            candidate = dist + weight
            if candidate < distances[v]:
                distances[v] = candidate
                heapq.heappush(heap, (candidate, next(tie), v, edge_id))

        step = TraversalStep(vertex=u, edge=via, cost=dist)
        _mark(overlay, step, vertex_token, edge_token)
        logger.debug("dijkstra: visit %d via edge %s at distance %s", u, via, dist)
        yield step


def shortest_distances(graph: Graph, start: int, weights: Sequence[float]) -> list[float]:
    """Shortest distance from ``start`` to every vertex; ``math.inf`` if unreachable."""
    distances = [math.inf] * graph.vertex_count
    for step in dijkstra(graph, start, weights):
        distances[step.vertex] = step.cost
    return distances


# ─── Prim ─────────────────────────────────────────────────────────────────────


def prim(
    graph: Graph,
    start: int,
    weights: Sequence[float],
    overlay: ColorOverlay | None = None,
    *,
    vertex_token: Hashable = "visited",
    edge_token: Hashable = "tree",
) -> Iterator[TraversalStep]:
    """Grow a minimum spanning tree from ``start``, one vertex per step.

    Each step reports the vertex joining the tree, the tree edge that
    attached it and that edge's weight. Only the component containing
    ``start`` is spanned.
    """
    g = _weighted(graph, start, weights)
    if overlay is not None:
        overlay.reset()

    visited: set[int] = set()
    tie = itertools.count()
    heap: list[tuple[float, int, int, int | None]] = [(0, next(tie), start, None)]

    while heap:
        weight, _, u, via = heapq.heappop(heap)
        if u in visited:
            continue
        visited.add(u)

        for v, edge_id, w in _incident(g, u):
            if v not in visited:
                heapq.heappush(heap, (w, next(tie), v, edge_id))

        step = TraversalStep(vertex=u, edge=via, cost=weight)
        _mark(overlay, step, vertex_token, edge_token)
        logger.debug("prim: attach %d via edge %s (weight %s)", u, via, weight)
        yield step


def minimum_spanning_edges(graph: Graph, start: int, weights: Sequence[float]) -> list[int]:
    """Edge ids of the minimum spanning tree grown from ``start``, in the order they were added."""
    return [step.edge for step in prim(graph, start, weights) if step.edge is not None]
