"""Exceptions raised by the layout and rendering pipeline."""

from __future__ import annotations


class GridGraphError(Exception):
    """Base class for every error raised by gridgraph."""


class InvalidTopologyError(GridGraphError, ValueError):
    """The graph or its layout is malformed.

    Raised before any layout work starts: a permutation that is not a
    bijection, an edge endpoint out of range, a self-loop, or a side tag
    list that does not match the edge list.
    """


class GeometryError(GridGraphError):
    """Routing produced a cell the diagram cannot represent.

    Either a vertex ran out of reserved slots in some direction or two
    edges tried to draw the same line through one cell. ``edge`` is the id
    of the edge being routed when the conflict was detected.
    """

    def __init__(self, message: str, edge: int | None = None) -> None:
        super().__init__(message)
        self.edge = edge


class CellLookupError(GridGraphError, LookupError):
    """No edge connects the two cells that were asked about."""
