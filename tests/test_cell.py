"""Tests for cell.py — glyph arms, crossing merges and adjacency rules."""

from __future__ import annotations

import pytest

from gridgraph.cell import (
    ARMS,
    CROSS,
    EMPTY,
    HORIZONTAL,
    VERTICAL,
    Direction,
    PathCell,
    VertexCell,
    connects_horizontally,
    edge_between,
)
from gridgraph.errors import CellLookupError, GeometryError

T, LT, RT, B = Direction.Top, Direction.Left, Direction.Right, Direction.Bottom


# ─── Connectivity Tests ───────────────────────────────────────────────────────


class TestConnectsFrom:
    @pytest.mark.parametrize(
        "glyph,arms",
        [
            ("│", {T, B}),
            ("─", {LT, RT}),
            ("╭", {RT, B}),
            ("╮", {LT, B}),
            ("╯", {T, LT}),
            ("╰", {T, RT}),
            ("┼", {T, LT, RT, B}),
        ],
    )
    def test_arm_table(self, glyph: str, arms: set[Direction]):
        """A glyph connects exactly where its strokes point."""
        cell = PathCell.new(glyph, 0)
        assert {d for d in Direction if cell.connects_from(d)} == arms

    def test_every_glyph_has_two_or_four_arms(self):
        """Lines and corners have two arms, the crossing four."""
        for glyph, arms in ARMS.items():
            assert len(arms) == (4 if glyph == CROSS else 2)

    def test_vertex_connects_everywhere(self):
        """Vertices are hubs."""
        assert all(VertexCell(3).connects_from(d) for d in Direction)

    def test_empty_connects_nowhere(self):
        """Empty cells have no arms."""
        assert not any(EMPTY.connects_from(d) for d in Direction)

    def test_unknown_glyph(self):
        """Only box-drawing glyphs make path cells."""
        with pytest.raises(ValueError):
            PathCell.new("+", 0)


# ─── Merge Tests ──────────────────────────────────────────────────────────────


class TestMerge:
    def test_horizontal_over_vertical(self):
        """─ over │ gives ┼; the new line owns Left/Right."""
        cell = PathCell.new(VERTICAL, 1)
        cell.merge(HORIZONTAL, 2)
        assert cell.glyph == CROSS
        assert cell.owners == {T: 1, B: 1, LT: 2, RT: 2}

    def test_vertical_over_horizontal(self):
        """│ over ─ gives ┼; the new line owns Top/Bottom."""
        cell = PathCell.new(HORIZONTAL, 1)
        cell.merge(VERTICAL, 2)
        assert cell.glyph == CROSS
        assert cell.owners == {LT: 1, RT: 1, T: 2, B: 2}

    def test_merge_order_only_changes_ownership(self):
        """Both orders give ┼; which edge owns which axis follows the order."""
        first = PathCell.new(VERTICAL, 7)
        first.merge(HORIZONTAL, 9)
        second = PathCell.new(HORIZONTAL, 9)
        second.merge(VERTICAL, 7)
        assert first.glyph == second.glyph == CROSS
        assert first.owners == second.owners

        swapped = PathCell.new(HORIZONTAL, 7)
        swapped.merge(VERTICAL, 9)
        assert swapped.glyph == CROSS
        assert swapped.owners[T] == 9
        assert swapped.owners[LT] == 7

    def test_same_orientation_rejected(self):
        """Two collinear lines in one cell are a collision."""
        cell = PathCell.new(VERTICAL, 1)
        with pytest.raises(GeometryError) as exc:
            cell.merge(VERTICAL, 2)
        assert exc.value.edge == 2
        assert cell.glyph == VERTICAL

    def test_corner_rejected(self):
        """Corners never merge."""
        cell = PathCell.new("╰", 1)
        with pytest.raises(GeometryError):
            cell.merge(HORIZONTAL, 2)

    def test_cross_rejected(self):
        """A crossing cannot take a third line."""
        cell = PathCell.new(VERTICAL, 1)
        cell.merge(HORIZONTAL, 2)
        with pytest.raises(GeometryError):
            cell.merge(VERTICAL, 3)


# ─── Color Owner Tests ────────────────────────────────────────────────────────


class TestEdgeOwner:
    def test_plain_glyph(self):
        """A single-edge glyph is colored by that edge."""
        for glyph in ("│", "─", "╭", "╮", "╯", "╰"):
            assert PathCell.new(glyph, 4).edge == 4

    def test_cross_prefers_top(self):
        """A crossing is colored by its vertical line."""
        cell = PathCell.new(HORIZONTAL, 1)
        cell.merge(VERTICAL, 2)
        assert cell.edge == 2

        cell = PathCell.new(VERTICAL, 1)
        cell.merge(HORIZONTAL, 2)
        assert cell.edge == 1

    def test_cross_falls_back_to_bottom(self):
        """Without a Top owner the Bottom owner is used."""
        cell = PathCell(glyph=CROSS, owners={B: 5, LT: 6, RT: 6})
        assert cell.edge == 5

    def test_cross_without_vertical_owner(self):
        """No vertical owner means no color."""
        cell = PathCell(glyph=CROSS, owners={LT: 6, RT: 6})
        assert cell.edge is None


# ─── Adjacency Tests ──────────────────────────────────────────────────────────


class TestAdjacency:
    def test_vertex_then_horizontal(self):
        """A line leaving a vertex to the right is connected."""
        assert connects_horizontally(VertexCell(0), PathCell.new(HORIZONTAL, 0))

    def test_corner_then_vertex(self):
        """╰ points right into a vertex."""
        assert connects_horizontally(PathCell.new("╰", 0), VertexCell(1))

    def test_two_vertices_never_join(self):
        """Neighbouring vertex cells are one widened vertex."""
        assert not connects_horizontally(VertexCell(0), VertexCell(0))

    def test_empty_never_joins(self):
        """Empty cells break any connection."""
        assert not connects_horizontally(EMPTY, VertexCell(0))
        assert not connects_horizontally(VertexCell(0), EMPTY)

    def test_missing_arm(self):
        """│ has no right arm."""
        assert not connects_horizontally(PathCell.new(VERTICAL, 0), PathCell.new(HORIZONTAL, 1))
        assert not connects_horizontally(PathCell.new(HORIZONTAL, 0), PathCell.new("╭", 1))

    def test_edge_between_prefers_left_cell(self):
        """The left cell's Right arm names the edge."""
        left = PathCell.new(VERTICAL, 1)
        left.merge(HORIZONTAL, 3)
        assert edge_between(left, VertexCell(0)) == 3

    def test_edge_between_from_right_cell(self):
        """With a vertex on the left, the right cell's Left arm names the edge."""
        assert edge_between(VertexCell(0), PathCell.new("╮", 8)) == 8

    def test_edge_between_two_vertices(self):
        """No path cell, no edge: a contract violation."""
        with pytest.raises(CellLookupError):
            edge_between(VertexCell(0), VertexCell(1))

    def test_edge_between_is_lookup_error(self):
        """CellLookupError is a LookupError."""
        with pytest.raises(LookupError):
            edge_between(EMPTY, EMPTY)
