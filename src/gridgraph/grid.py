"""Grid builder — the 2-D cell array the router draws into."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from gridgraph.cell import EMPTY, Cell, PathCell, VertexCell

logger = logging.getLogger(__name__)


class Grid:
    """A ``width × height`` array of cells addressed as ``(x, y)``.

    Stored row-major: ``rows[y][x]``. ``x`` grows to the right, ``y`` grows
    downwards, so iterating ``rows`` yields printed lines top to bottom.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.rows: list[list[Cell]] = [[EMPTY] * width for _ in range(height)]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        x, y = pos
        return self.rows[y][x]

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        x, y = pos
        self.rows[y][x] = cell

    def __iter__(self) -> Iterator[list[Cell]]:
        return iter(self.rows)

    def vertex_cells(self) -> Iterator[tuple[int, int, VertexCell]]:
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                if isinstance(cell, VertexCell):
                    yield x, y, cell

    def path_cells(self) -> Iterator[tuple[int, int, PathCell]]:
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                if isinstance(cell, PathCell):
                    yield x, y, cell

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"


def build_grid(sized_perm_row: Sequence[int], sized_perm_col: Sequence[int]) -> Grid:
    """Allocate the grid and place a vertex wherever both axes agree.

    A vertex reserving ``n`` columns and ``n`` rows appears as an ``n × n``
    block of vertex cells; the router may attach edges to any of them.
    """
    grid = Grid(len(sized_perm_row), len(sized_perm_col))
    for y, row_vertex in enumerate(sized_perm_col):
        for x, col_vertex in enumerate(sized_perm_row):
            if col_vertex == row_vertex:
                grid[x, y] = VertexCell(col_vertex)
    logger.debug("built %dx%d grid", grid.width, grid.height)
    return grid
