"""Text renderer — turns a routed grid into a printable diagram.

Each cell becomes one character and neighbouring cells are separated by one
more: a ``─`` connector where a line runs between them, a space otherwise.
So a 3×3 grid renders as three lines of five characters:

    0─╮ ·
    · 1 ·
    · ╰─2
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field

from gridgraph.cell import Cell, EmptyCell, PathCell, VertexCell, connects_horizontally, edge_between
from gridgraph.grid import Grid
from gridgraph.renderers.base import Painter, PlainPainter

# ─── Options ──────────────────────────────────────────────────────────────────


@dataclass
class RenderOptions:
    """Options for text rendering."""

    empty_glyph: str = "·"
    separator: str = " "
    connector: str = "─"
    painter: Painter = field(default_factory=PlainPainter)


# ─── Rendering ────────────────────────────────────────────────────────────────


def _pigment(text: str, token: Hashable | None, painter: Painter) -> str:
    if token is None:
        return text
    return painter.paint(text, token)


def _render_cell(
    cell: Cell,
    vertex_colors: Mapping[int, Hashable],
    edge_colors: Mapping[int, Hashable],
    options: RenderOptions,
) -> str:
    if isinstance(cell, EmptyCell):
        return options.empty_glyph
    if isinstance(cell, VertexCell):
        return _pigment(str(cell.vertex), vertex_colors.get(cell.vertex), options.painter)
    if isinstance(cell, PathCell):
        edge = cell.edge
        token = edge_colors.get(edge) if edge is not None else None
        return _pigment(cell.glyph, token, options.painter)
    raise TypeError(f"not a grid cell: {cell!r}")


def render_grid(
    grid: Grid,
    vertex_colors: Mapping[int, Hashable] | None = None,
    edge_colors: Mapping[int, Hashable] | None = None,
    options: RenderOptions | None = None,
) -> str:
    """Render ``grid`` to a multi-line string, top row first.

    Vertices are painted with ``vertex_colors[vertex]`` and lines with
    ``edge_colors[edge]``; anything without an entry is left unpainted.
    """
    if options is None:
        options = RenderOptions()
    vertex_colors = vertex_colors if vertex_colors is not None else {}
    edge_colors = edge_colors if edge_colors is not None else {}

    lines: list[str] = []
    for row in grid:
        parts: list[str] = []
        for x, cell in enumerate(row):
            if x > 0:
                left = row[x - 1]
                if connects_horizontally(left, cell):
                    edge = edge_between(left, cell)
                    parts.append(_pigment(options.connector, edge_colors.get(edge), options.painter))
                else:
                    parts.append(options.separator)
            parts.append(_render_cell(cell, vertex_colors, edge_colors, options))
        lines.append("".join(parts))
    return "\n".join(lines)
