"""Color overlay — which vertices and edges to paint, and with what token."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass
class ColorOverlay:
    """Per-vertex and per-edge color tokens.

    The overlay belongs to whoever drives the traversal: it is reset at the
    start of a run and updated between frames. The renderer only ever sees
    the read-only views returned by ``vertex_view`` and ``edge_view``.
    Tokens are opaque; a ``Painter`` decides what they look like.
    """

    vertex_colors: dict[int, Hashable] = field(default_factory=dict)
    edge_colors: dict[int, Hashable] = field(default_factory=dict)

    def reset(self) -> None:
        self.vertex_colors.clear()
        self.edge_colors.clear()

    def color_vertex(self, vertex: int, token: Hashable) -> None:
        self.vertex_colors[vertex] = token

    def color_edge(self, edge: int, token: Hashable) -> None:
        self.edge_colors[edge] = token

    def vertex_view(self) -> Mapping[int, Hashable]:
        return MappingProxyType(self.vertex_colors)

    def edge_view(self) -> Mapping[int, Hashable]:
        return MappingProxyType(self.edge_colors)
