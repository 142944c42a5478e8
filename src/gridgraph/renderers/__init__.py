from gridgraph.renderers.base import Painter, PlainPainter
from gridgraph.renderers.text import RenderOptions, render_grid

__all__ = ["Painter", "PlainPainter", "RenderOptions", "render_grid"]
