"""Graph and layout models — the inputs of the rendering pipeline.

A ``Graph`` is an undirected edge list over vertices ``0..vertex_count-1``
where each edge carries a ``Side`` tag choosing which way its L-shaped
connector bends. A ``Layout`` is a pair of vertex permutations that places
every vertex on its own column (``perm_row``) and its own row
(``perm_col``) of the grid.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

import networkx as nx

from gridgraph.errors import InvalidTopologyError

# ─── Edge Model ───────────────────────────────────────────────────────────────


class Side(Enum):
    """Which side of the edge the L-shaped connector puts its corner on.

    With the left endpoint ``a`` and the right endpoint ``b``:

    - ``Left``:  the vertical leg hangs off ``a``, the corner sits in ``b``'s row.
    - ``Right``: the vertical leg hangs off ``b``, the corner sits in ``a``'s row.
    """

    Left = "left"
    Right = "right"


@dataclass
class Graph:
    """An undirected graph with an explicit edge order.

    The position of an edge in ``edges`` is its id. Ids are used as color
    keys by ``ColorOverlay`` and as owners of path cells in the grid.
    """

    vertex_count: int
    edges: list[tuple[int, int]] = field(default_factory=list)
    sides: list[Side] = field(default_factory=list)

    @classmethod
    def from_pairs(cls, vertex_count: int, *vertices: int, sides: Sequence[Side] = ()) -> Graph:
        """Build a graph from a flat ``u0, v0, u1, v1, ...`` vertex list."""
        if len(vertices) % 2 != 0:
            raise InvalidTopologyError(f"flat edge list must have an even length, got {len(vertices)}")
        edges = [(vertices[i], vertices[i + 1]) for i in range(0, len(vertices), 2)]
        return cls(vertex_count=vertex_count, edges=edges, sides=list(sides))

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def validate(self) -> None:
        """Reject graphs the router cannot draw.

        Raises InvalidTopologyError on a negative vertex count, a missing or
        surplus side tag, an endpoint out of range or a self-loop.
        """
        if self.vertex_count < 0:
            raise InvalidTopologyError(f"vertex_count must be non-negative, got {self.vertex_count}")
        if len(self.sides) != len(self.edges):
            raise InvalidTopologyError(f"graph has {len(self.edges)} edges but {len(self.sides)} side tags")
        for edge_id, (u, v) in enumerate(self.edges):
            for endpoint in (u, v):
                if not 0 <= endpoint < self.vertex_count:
                    raise InvalidTopologyError(
                        f"edge {edge_id} ({u}, {v}) has endpoint {endpoint} outside [0, {self.vertex_count})"
                    )
            if u == v:
                raise InvalidTopologyError(f"edge {edge_id} is a self-loop on vertex {u}")
            if not isinstance(self.sides[edge_id], Side):
                raise InvalidTopologyError(f"edge {edge_id} has no side tag (got {self.sides[edge_id]!r})")

    def to_networkx(self, weights: Sequence[float] | None = None) -> nx.MultiGraph:
        """Return the graph as a networkx MultiGraph keyed by edge id.

        Every vertex is present even when isolated. When ``weights`` is given
        each edge gets a ``weight`` attribute.
        """
        if weights is not None and len(weights) != len(self.edges):
            raise InvalidTopologyError(f"graph has {len(self.edges)} edges but {len(weights)} weights")
        g: nx.MultiGraph = nx.MultiGraph()
        g.add_nodes_from(range(self.vertex_count))
        for edge_id, (u, v) in enumerate(self.edges):
            if weights is None:
                g.add_edge(u, v, key=edge_id)
            else:
                g.add_edge(u, v, key=edge_id, weight=weights[edge_id])
        return g


# ─── Permutation Model ────────────────────────────────────────────────────────


def _inverse(perm: Sequence[int], axis: str) -> tuple[int, ...]:
    """Invert a permutation of ``0..len(perm)-1``, rejecting non-bijections."""
    n = len(perm)
    inverse = [-1] * n
    for position, vertex in enumerate(perm):
        if not 0 <= vertex < n:
            raise InvalidTopologyError(f"{axis} permutation holds {vertex}, outside [0, {n})")
        if inverse[vertex] != -1:
            raise InvalidTopologyError(f"{axis} permutation lists vertex {vertex} twice")
        inverse[vertex] = position
    return tuple(inverse)


@dataclass(frozen=True)
class Layout:
    """Placement of vertices on the grid.

    ``perm_row`` orders vertices along the x axis (left to right across a
    printed line); ``perm_col`` orders them along the y axis (top to bottom).
    The inverse maps give each vertex's rank on that axis. Build instances
    with ``from_perms`` so the inverses are always consistent.
    """

    perm_row: tuple[int, ...]
    perm_col: tuple[int, ...]
    inverse_row: tuple[int, ...]
    inverse_col: tuple[int, ...]

    @classmethod
    def from_perms(cls, perm_row: Sequence[int], perm_col: Sequence[int]) -> Layout:
        if len(perm_row) != len(perm_col):
            raise InvalidTopologyError(
                f"row permutation has {len(perm_row)} entries but column permutation has {len(perm_col)}"
            )
        return cls(
            perm_row=tuple(perm_row),
            perm_col=tuple(perm_col),
            inverse_row=_inverse(perm_row, "row"),
            inverse_col=_inverse(perm_col, "column"),
        )

    @classmethod
    def identity(cls, vertex_count: int) -> Layout:
        perm = range(vertex_count)
        return cls.from_perms(perm, perm)

    @property
    def vertex_count(self) -> int:
        return len(self.perm_row)


def check_layout(graph: Graph, layout: Layout) -> None:
    """Validate ``graph`` and make sure ``layout`` places exactly its vertices."""
    graph.validate()
    if layout.vertex_count != graph.vertex_count:
        raise InvalidTopologyError(
            f"layout places {layout.vertex_count} vertices but the graph has {graph.vertex_count}"
        )
