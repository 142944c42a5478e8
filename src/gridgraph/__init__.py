"""gridgraph — draw small graphs as text on a permuted grid.

Vertices sit where a row permutation and a column permutation agree; each
edge is an L-shaped connector whose corner side is chosen per edge.
"""

from gridgraph.api import full_layout, render
from gridgraph.cell import Direction, EmptyCell, PathCell, VertexCell
from gridgraph.errors import CellLookupError, GeometryError, GridGraphError, InvalidTopologyError
from gridgraph.graph import Graph, Layout, Side
from gridgraph.grid import Grid
from gridgraph.layout import EdgeShape, SizedLayout
from gridgraph.overlay import ColorOverlay
from gridgraph.renderers.base import Painter, PlainPainter
from gridgraph.renderers.text import RenderOptions
from gridgraph.traversal import TraversalStep, dijkstra, minimum_spanning_edges, prim, shortest_distances

__version__ = "0.1.0"

__all__ = [
    "CellLookupError",
    "ColorOverlay",
    "Direction",
    "EdgeShape",
    "EmptyCell",
    "GeometryError",
    "Graph",
    "Grid",
    "GridGraphError",
    "InvalidTopologyError",
    "Layout",
    "Painter",
    "PathCell",
    "PlainPainter",
    "RenderOptions",
    "Side",
    "SizedLayout",
    "TraversalStep",
    "VertexCell",
    "dijkstra",
    "full_layout",
    "minimum_spanning_edges",
    "prim",
    "render",
    "shortest_distances",
]
