"""Public pipeline: graph + layout + overlay → text diagram."""

from __future__ import annotations

import logging

from gridgraph.graph import Graph, Layout, check_layout
from gridgraph.grid import Grid, build_grid
from gridgraph.layout import SizedLayout, compute_needed_size, route_edges, size_layout
from gridgraph.overlay import ColorOverlay
from gridgraph.renderers.text import RenderOptions, render_grid

logger = logging.getLogger(__name__)


def full_layout(graph: Graph, layout: Layout) -> tuple[SizedLayout, Grid]:
    """Size, expand and route ``graph`` under ``layout``.

    Returns the sized layout and the routed grid. Nothing is cached: every
    call builds a fresh grid.
    """
    check_layout(graph, layout)

    needed_size = compute_needed_size(graph.edges, graph.sides, layout.inverse_row, layout.inverse_col)
    sized = size_layout(layout.perm_row, layout.perm_col, needed_size)
    grid = build_grid(sized.sized_perm_row, sized.sized_perm_col)
    route_edges(
        grid,
        graph.edges,
        graph.sides,
        layout.inverse_row,
        layout.inverse_col,
        sized.slots_row,
        sized.slots_col,
    )
    logger.debug(
        "laid out %d vertices and %d edges on a %dx%d grid",
        graph.vertex_count,
        graph.edge_count,
        grid.width,
        grid.height,
    )
    return sized, grid


def render(
    graph: Graph,
    layout: Layout,
    overlay: ColorOverlay | None = None,
    options: RenderOptions | None = None,
) -> str:
    """Render ``graph`` as a text diagram.

    The result depends only on the arguments, so rendering the same graph
    with the same overlay contents always gives the same string.
    """
    _, grid = full_layout(graph, layout)
    if overlay is None:
        return render_grid(grid, options=options)
    return render_grid(grid, overlay.vertex_view(), overlay.edge_view(), options)
