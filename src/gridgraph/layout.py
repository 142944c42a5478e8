"""Layout module — grid sizing and L-shaped edge routing.

Phases:
  1. Size calculation   (how many rows/columns each vertex must reserve)
  2. Permutation expand (repeat each vertex to its reserved size)
  3. Edge routing       (draw one L-shaped connector per edge into the grid)

Every edge is drawn from its left endpoint ``a`` to its right endpoint ``b``
(left/right by ``inverse_row`` rank). Its side tag and whether ``a`` sits
above or below ``b`` pick one of four shapes:

    DownRight (Left, a above)     UpRight (Left, a below)
        a ·                           ╭─b
        ╰─b                           a ·

    RightDown (Right, a above)    RightUp (Right, a below)
        a─╮                           · b
        · b                           a─╯

Each shape leaves ``a`` through one side and enters ``b`` through another.
When several edges use the same side of one vertex, the vertex is widened so
each edge gets a row or column of its own (a "slot").
"""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from gridgraph.cell import HORIZONTAL, VERTICAL, Direction, EmptyCell, PathCell, VertexCell
from gridgraph.errors import GeometryError
from gridgraph.graph import Side
from gridgraph.grid import Grid

logger = logging.getLogger(__name__)

# ─── Edge Shapes ──────────────────────────────────────────────────────────────


class EdgeShape(Enum):
    """The four L-shapes an edge can take. The value is the corner glyph."""

    DownRight = "╰"
    UpRight = "╭"
    RightDown = "╮"
    RightUp = "╯"

    @property
    def corner(self) -> str:
        return self.value


# (side, a is above b) → shape
_SHAPES: dict[tuple[Side, bool], EdgeShape] = {
    (Side.Left, True): EdgeShape.DownRight,
    (Side.Left, False): EdgeShape.UpRight,
    (Side.Right, True): EdgeShape.RightDown,
    (Side.Right, False): EdgeShape.RightUp,
}

# shape → (side of a the edge leaves through, side of b it enters through)
SHAPE_DIRECTIONS: dict[EdgeShape, tuple[Direction, Direction]] = {
    EdgeShape.DownRight: (Direction.Bottom, Direction.Left),
    EdgeShape.UpRight: (Direction.Top, Direction.Left),
    EdgeShape.RightDown: (Direction.Right, Direction.Top),
    EdgeShape.RightUp: (Direction.Right, Direction.Bottom),
}


def orient(edge: tuple[int, int], inverse_row: Sequence[int]) -> tuple[int, int]:
    """Order an edge's endpoints so the first one is further left."""
    u, v = edge
    if inverse_row[u] < inverse_row[v]:
        return u, v
    return v, u


def classify(a: int, b: int, side: Side, inverse_col: Sequence[int]) -> EdgeShape:
    """Pick the shape of an oriented edge ``a → b``."""
    return _SHAPES[(side, inverse_col[a] < inverse_col[b])]


# ─── Size Calculation ─────────────────────────────────────────────────────────


def compute_needed_size(
    edges: Sequence[tuple[int, int]],
    sides: Sequence[Side],
    inverse_row: Sequence[int],
    inverse_col: Sequence[int],
) -> list[int]:
    """Count how many rows/columns each vertex must reserve.

    Every edge uses one side of each endpoint. A vertex needs one slot per
    edge on its busiest side, and at least one slot overall.
    """
    counts: defaultdict[int, Counter[Direction]] = defaultdict(Counter)
    for edge_id, edge in enumerate(edges):
        a, b = orient(edge, inverse_row)
        shape = classify(a, b, sides[edge_id], inverse_col)
        a_side, b_side = SHAPE_DIRECTIONS[shape]
        counts[a][a_side] += 1
        counts[b][b_side] += 1

    needed_size = [max(1, max(counts[v].values(), default=0)) for v in range(len(inverse_row))]
    logger.debug("needed sizes: %s", needed_size)
    return needed_size


# ─── Permutation Expansion ────────────────────────────────────────────────────


@dataclass
class SizedLayout:
    """Permutations expanded to grid coordinates.

    Attributes:
        needed_size: Rows/columns reserved by each vertex.
        sized_perm_row: Vertex owning each grid column (x).
        sized_perm_col: Vertex owning each grid row (y).
        slots_row: Per vertex, the increasing x coordinates it owns.
        slots_col: Per vertex, the increasing y coordinates it owns.
    """

    needed_size: list[int]
    sized_perm_row: list[int]
    sized_perm_col: list[int]
    slots_row: list[list[int]]
    slots_col: list[list[int]]

    @property
    def size(self) -> int:
        """Grid width, which is also the grid height."""
        return len(self.sized_perm_row)


def expand(perm: Sequence[int], needed_size: Sequence[int]) -> list[int]:
    """Repeat every vertex of ``perm`` ``needed_size[v]`` times, in place."""
    return [v for v in perm for _ in range(needed_size[v])]


def slot_positions(sized_perm: Sequence[int], vertex_count: int) -> list[list[int]]:
    """List, for each vertex, the coordinates it occupies on one axis."""
    slots: list[list[int]] = [[] for _ in range(vertex_count)]
    for coord, vertex in enumerate(sized_perm):
        slots[vertex].append(coord)
    return slots


def size_layout(perm_row: Sequence[int], perm_col: Sequence[int], needed_size: Sequence[int]) -> SizedLayout:
    """Expand both permutations with the same per-vertex sizes."""
    sized_perm_row = expand(perm_row, needed_size)
    sized_perm_col = expand(perm_col, needed_size)
    vertex_count = len(needed_size)
    return SizedLayout(
        needed_size=list(needed_size),
        sized_perm_row=sized_perm_row,
        sized_perm_col=sized_perm_col,
        slots_row=slot_positions(sized_perm_row, vertex_count),
        slots_col=slot_positions(sized_perm_col, vertex_count),
    )


# ─── Edge Routing ─────────────────────────────────────────────────────────────


def _stamp(grid: Grid, x: int, y: int, glyph: str, edge: int) -> None:
    """Draw ``glyph`` for ``edge`` at ``(x, y)``, merging straight crossings."""
    cell = grid[x, y]
    if isinstance(cell, EmptyCell):
        grid[x, y] = PathCell.new(glyph, edge)
    elif isinstance(cell, PathCell) and {cell.glyph, glyph} == {VERTICAL, HORIZONTAL}:
        cell.merge(glyph, edge)
    elif isinstance(cell, PathCell):
        raise GeometryError(
            f"edge {edge} cannot draw {glyph!r} at ({x}, {y}): cell already holds {cell.glyph!r} of edge {cell.edge}",
            edge=edge,
        )
    elif isinstance(cell, VertexCell):
        raise GeometryError(
            f"edge {edge} cannot draw {glyph!r} at ({x}, {y}): cell holds vertex {cell.vertex}",
            edge=edge,
        )


def route_edges(
    grid: Grid,
    edges: Sequence[tuple[int, int]],
    sides: Sequence[Side],
    inverse_row: Sequence[int],
    inverse_col: Sequence[int],
    slots_row: Sequence[Sequence[int]],
    slots_col: Sequence[Sequence[int]],
) -> None:
    """Draw every edge into ``grid`` as a vertical run, a corner and a horizontal run.

    Edges are routed in id order. The k-th edge using a given side of a
    vertex takes the k-th coordinate of that vertex's range on the axis
    along that side; the other coordinate is the vertex's outermost row or
    column facing that side.

    Raises GeometryError when a vertex runs out of slots or two edges would
    draw the same line through one cell.
    """
    used: defaultdict[int, Counter[Direction]] = defaultdict(Counter)

    def take(edge_id: int, vertex: int, direction: Direction, slots: Sequence[Sequence[int]]) -> int:
        k = used[vertex][direction]
        if k >= len(slots[vertex]):
            raise GeometryError(
                f"edge {edge_id} needs slot {k} on the {direction.value} side of vertex {vertex}, "
                f"which reserves only {len(slots[vertex])}",
                edge=edge_id,
            )
        used[vertex][direction] += 1
        return slots[vertex][k]

    for edge_id, edge in enumerate(edges):
        a, b = orient(edge, inverse_row)
        shape = classify(a, b, sides[edge_id], inverse_col)

        if shape is EdgeShape.DownRight:
            # a ·
            # ╰─b
            ax = take(edge_id, a, Direction.Bottom, slots_row)
            ay = slots_col[a][-1]
            bx = slots_row[b][0]
            by = take(edge_id, b, Direction.Left, slots_col)
            leg_x, leg_ys = ax, range(ay + 1, by)
            corner_x, corner_y = ax, by
            run_xs = range(ax + 1, bx)
        elif shape is EdgeShape.UpRight:
            # ╭─b
            # a ·
            ax = take(edge_id, a, Direction.Top, slots_row)
            ay = slots_col[a][0]
            bx = slots_row[b][0]
            by = take(edge_id, b, Direction.Left, slots_col)
            leg_x, leg_ys = ax, range(by + 1, ay)
            corner_x, corner_y = ax, by
            run_xs = range(ax + 1, bx)
        elif shape is EdgeShape.RightDown:
            # a─╮
            # · b
            ax = slots_row[a][-1]
            ay = take(edge_id, a, Direction.Right, slots_col)
            bx = take(edge_id, b, Direction.Top, slots_row)
            by = slots_col[b][0]
            leg_x, leg_ys = bx, range(ay + 1, by)
            corner_x, corner_y = bx, ay
            run_xs = range(ax + 1, bx)
        else:
            # · b
            # a─╯
            ax = slots_row[a][-1]
            ay = take(edge_id, a, Direction.Right, slots_col)
            bx = take(edge_id, b, Direction.Bottom, slots_row)
            by = slots_col[b][-1]
            leg_x, leg_ys = bx, range(by + 1, ay)
            corner_x, corner_y = bx, ay
            run_xs = range(ax + 1, bx)

        logger.debug("edge %d (%d, %d): %s, corner at (%d, %d)", edge_id, a, b, shape.name, corner_x, corner_y)

        for y in leg_ys:
            _stamp(grid, leg_x, y, VERTICAL, edge_id)
        _stamp(grid, corner_x, corner_y, shape.corner, edge_id)
        for x in run_xs:
            _stamp(grid, x, corner_y, HORIZONTAL, edge_id)

