"""Tests for ripplegrid grid model and index helpers."""

from __future__ import annotations

import pytest
from ripplegrid._grid import Cell, Grid
from ripplegrid._utils import (
    GRID_SIZE,
    below,
    check_index,
    index_to_rowcol,
    right_of,
    rowcol_to_index,
)


class TestIndexHelpers:
    def test_row_major_layout(self) -> None:
        assert index_to_rowcol(0) == (0, 0)
        assert index_to_rowcol(4) == (1, 1)
        assert index_to_rowcol(5) == (1, 2)
        assert index_to_rowcol(8) == (2, 2)

    def test_rowcol_inverse(self) -> None:
        for i in range(GRID_SIZE):
            assert rowcol_to_index(*index_to_rowcol(i)) == i

    def test_rowcol_out_of_grid(self) -> None:
        with pytest.raises(IndexError):
            rowcol_to_index(3, 0)
        with pytest.raises(IndexError):
            rowcol_to_index(0, -1)

    def test_right_of(self) -> None:
        assert right_of(0) == 1
        assert right_of(4) == 5
        assert right_of(2) is None
        assert right_of(5) is None
        assert right_of(8) is None

    def test_below(self) -> None:
        assert below(0) == 3
        assert below(5) == 8
        assert below(6) is None
        assert below(8) is None

    def test_check_index_rejects_out_of_range(self) -> None:
        with pytest.raises(IndexError, match="out of range"):
            check_index(9)
        with pytest.raises(IndexError):
            check_index(-1)

    def test_check_index_rejects_non_int(self) -> None:
        with pytest.raises(TypeError):
            check_index(True)
        with pytest.raises(TypeError):
            check_index(1.0)  # type: ignore[arg-type]


class TestGrid:
    def test_fresh_grid(self) -> None:
        g = Grid()
        assert len(g) == 9
        assert all(c == Cell(0, False) for c in g)
        assert g.locked_indices() == []

    def test_tuple_access(self) -> None:
        g = Grid.from_snapshot([(i, False) for i in range(9)])
        assert g[1, 2].value == 5
        assert g[2, 0] is g[6]

    def test_snapshot_is_immutable(self) -> None:
        g = Grid()
        snap = g.snapshot()
        assert isinstance(snap, tuple)
        with pytest.raises(AttributeError):
            snap[0].value = 3  # type: ignore[misc]

    def test_snapshot_detached_from_later_changes(self) -> None:
        g = Grid()
        snap = g.snapshot()
        g.add(0, 1)
        assert snap[0].value == 0
        assert g[0].value == 1

    def test_add_locks_at_threshold(self) -> None:
        g = Grid.from_snapshot([(13, False)] + [(0, False)] * 8)
        cell = g.add(0, 1)
        assert cell == Cell(14, False)
        cell = g.add(0, 2)
        assert cell == Cell(16, True)
        assert g.is_locked(0)

    def test_add_to_locked_cell_raises(self) -> None:
        g = Grid.from_snapshot([(15, True)] + [(0, False)] * 8)
        with pytest.raises(RuntimeError, match="locked"):
            g.add(0, 1)
        assert g[0] == Cell(15, True)

    def test_views(self) -> None:
        g = Grid.from_snapshot([Cell(15, True), (2, False)] + [(0, False)] * 7)
        assert g.values() == [15, 2, 0, 0, 0, 0, 0, 0, 0]
        assert g.locked_indices() == [0]
        rows = g.rows()
        assert len(rows) == 3
        assert rows[0] == (Cell(15, True), Cell(2, False), Cell(0, False))

    def test_equality(self) -> None:
        a = Grid()
        b = Grid()
        assert a == b
        a.add(3, 2)
        assert a != b

    def test_repr_marks_locked(self) -> None:
        g = Grid.from_snapshot([Cell(15, True)] + [Cell()] * 8)
        assert repr(g) == "<Grid [15* 0 0 0 0 0 0 0 0]>"


class TestFromSnapshot:
    def test_wrong_length(self) -> None:
        with pytest.raises(ValueError, match="Expected 9 cells"):
            Grid.from_snapshot([(0, False)] * 8)

    def test_malformed_entry(self) -> None:
        with pytest.raises(ValueError, match="Cell 2"):
            Grid.from_snapshot([(0, False)] * 2 + [5] + [(0, False)] * 6)

    def test_non_int_value(self) -> None:
        with pytest.raises(ValueError, match="value must be an int"):
            Grid.from_snapshot([(1.5, False)] + [(0, False)] * 8)

    def test_non_bool_locked(self) -> None:
        with pytest.raises(ValueError, match="locked must be a bool"):
            Grid.from_snapshot([(0, 1)] + [(0, False)] * 8)

    def test_locked_below_threshold_accepted(self) -> None:
        g = Grid.from_snapshot([(4, True)] + [(0, False)] * 8)
        assert g[0] == Cell(4, True)
