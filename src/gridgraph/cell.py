"""Cell model — what a single grid position holds.

A cell is one of three kinds:

  - ``EmptyCell``  nothing drawn (rendered as a placeholder dot)
  - ``VertexCell`` a vertex id; connects on all four sides
  - ``PathCell``   a line-drawing glyph owned by one or two edges

All three answer ``connects_from(direction)``, so the renderer never has to
special-case missing cells.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from gridgraph.errors import CellLookupError, GeometryError

# ─── Directions and Glyphs ────────────────────────────────────────────────────


class Direction(Enum):
    """The four sides of a cell."""

    Top = "top"
    Left = "left"
    Right = "right"
    Bottom = "bottom"


VERTICAL = "│"
HORIZONTAL = "─"
CROSS = "┼"
CORNER_DOWN_RIGHT = "╰"  # arms up and right
CORNER_UP_RIGHT = "╭"  # arms right and down
CORNER_RIGHT_DOWN = "╮"  # arms left and down
CORNER_RIGHT_UP = "╯"  # arms up and left

# glyph → the sides its strokes reach.
ARMS: dict[str, frozenset[Direction]] = {
    VERTICAL: frozenset({Direction.Top, Direction.Bottom}),
    HORIZONTAL: frozenset({Direction.Left, Direction.Right}),
    CORNER_UP_RIGHT: frozenset({Direction.Right, Direction.Bottom}),
    CORNER_RIGHT_DOWN: frozenset({Direction.Left, Direction.Bottom}),
    CORNER_RIGHT_UP: frozenset({Direction.Top, Direction.Left}),
    CORNER_DOWN_RIGHT: frozenset({Direction.Top, Direction.Right}),
    CROSS: frozenset(Direction),
}


# ─── Cell Kinds ───────────────────────────────────────────────────────────────


class EmptyCell:
    """A cell with nothing in it. Use the ``EMPTY`` singleton."""

    def connects_from(self, direction: Direction) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = EmptyCell()


@dataclass
class VertexCell:
    """A cell showing a vertex id. Edges may attach on any side."""

    vertex: int

    def connects_from(self, direction: Direction) -> bool:
        return True

    def __str__(self) -> str:
        return str(self.vertex)


@dataclass
class PathCell:
    """A line-drawing glyph plus the edge that owns each of its arms.

    ``owners`` has one entry per arm of ``glyph``. A plain glyph belongs to a
    single edge; a ``┼`` produced by ``merge`` belongs to two, one per axis.
    """

    glyph: str
    owners: dict[Direction, int] = field(default_factory=dict)

    @classmethod
    def new(cls, glyph: str, edge: int) -> PathCell:
        if glyph not in ARMS:
            raise ValueError(f"unknown path glyph {glyph!r}")
        return cls(glyph=glyph, owners={d: edge for d in ARMS[glyph]})

    def connects_from(self, direction: Direction) -> bool:
        return direction in ARMS[self.glyph]

    def merge(self, glyph: str, edge: int) -> None:
        """Lay a straight ``glyph`` of ``edge`` across this cell, forming ``┼``.

        Only a vertical line over a horizontal one (or the reverse) can be
        merged. The arms already present keep their owner; the arms of the
        new line are owned by ``edge``.
        """
        if {self.glyph, glyph} != {VERTICAL, HORIZONTAL}:
            raise GeometryError(
                f"edge {edge} cannot draw {glyph!r} over {self.glyph!r}",
                edge=edge,
            )
        for direction in ARMS[glyph]:
            self.owners[direction] = edge
        self.glyph = CROSS

    @property
    def edge(self) -> int | None:
        """The edge whose color paints this glyph.

        A crossing shows the vertical line's owner (Top, then Bottom). Any
        other glyph shows the owner of its first arm in Top, Left, Right,
        Bottom order.
        """
        if self.glyph == CROSS:
            for direction in (Direction.Top, Direction.Bottom):
                if direction in self.owners:
                    return self.owners[direction]
            return None
        for direction in Direction:
            if self.connects_from(direction):
                return self.owners[direction]
        return None

    def __str__(self) -> str:
        return self.glyph


Cell = EmptyCell | VertexCell | PathCell


# ─── Adjacency ────────────────────────────────────────────────────────────────


def connects_horizontally(left: Cell, right: Cell) -> bool:
    """True when a connector should be drawn between two side-by-side cells.

    Two vertices next to each other are never joined: they are the
    replicated cells of one oversized vertex.
    """
    if isinstance(left, EmptyCell) or isinstance(right, EmptyCell):
        return False
    if isinstance(left, VertexCell) and isinstance(right, VertexCell):
        return False
    return left.connects_from(Direction.Right) and right.connects_from(Direction.Left)


def edge_between(left: Cell, right: Cell) -> int:
    """The edge running from ``left`` into ``right``."""
    if isinstance(left, PathCell) and Direction.Right in left.owners:
        return left.owners[Direction.Right]
    if isinstance(right, PathCell) and Direction.Left in right.owners:
        return right.owners[Direction.Left]
    raise CellLookupError(f"no edge between {left!r} and {right!r}")
