"""Grid: the 3x3 board of cells owned by the propagation engine."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from typing import Any

from ripplegrid._utils import COLS, GRID_SIZE, LOCK_THRESHOLD, check_index, rowcol_to_index


@dataclass(frozen=True)
class Cell:
    """A single cell's state. Immutable; the grid swaps in new records."""

    value: int = 0
    locked: bool = False


class Grid:
    """Fixed-size, row-major sequence of nine cells.

    Cells are addressed by index (``grid[4]``) or by ``(row, col)``
    (``grid[1, 1]``). Consumers should read :meth:`snapshot`, which is a
    tuple of frozen :class:`Cell` records and cannot be mutated.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Cell] = [Cell() for _ in range(GRID_SIZE)]

    @classmethod
    def from_snapshot(cls, cells: Iterable[Any]) -> Grid:
        """Build a grid from nine ``Cell`` records or ``(value, locked)`` pairs.

        Raises ValueError if the count is wrong or an entry is malformed.
        """
        items = list(cells)
        if len(items) != GRID_SIZE:
            raise ValueError(f"Expected {GRID_SIZE} cells, got {len(items)}")

        grid = cls()
        for i, item in enumerate(items):
            if isinstance(item, Cell):
                cell = item
            else:
                try:
                    value, locked = item
                except (TypeError, ValueError):
                    raise ValueError(f"Cell {i}: expected (value, locked), got {item!r}") from None
                cell = Cell(value, locked)
            if isinstance(cell.value, bool) or not isinstance(cell.value, int):
                raise ValueError(f"Cell {i}: value must be an int, got {cell.value!r}")
            if not isinstance(cell.locked, bool):
                raise ValueError(f"Cell {i}: locked must be a bool, got {cell.locked!r}")
            grid._cells[i] = cell
        return grid

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def _resolve(self, key: int | tuple[int, int]) -> int:
        if isinstance(key, tuple):
            row, col = key
            return rowcol_to_index(row, col)
        return check_index(key)

    def __getitem__(self, key: int | tuple[int, int]) -> Cell:
        return self._cells[self._resolve(key)]

    def __len__(self) -> int:
        return GRID_SIZE

    def __iter__(self) -> Iterator[Cell]:
        return iter(tuple(self._cells))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Grid):
            return self._cells == other._cells
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def is_locked(self, index: int) -> bool:
        return self._cells[check_index(index)].locked

    # ------------------------------------------------------------------
    # Mutation (engine only)
    # ------------------------------------------------------------------

    def add(self, index: int, delta: int) -> Cell:
        """Apply *delta* to an unlocked cell and lock it at the threshold.

        Returns the new cell record. Callers must check :meth:`is_locked`
        first; adding to a locked cell raises RuntimeError.
        """
        old = self._cells[check_index(index)]
        if old.locked:
            raise RuntimeError(f"Cell {index} is locked")
        value = old.value + delta
        new = replace(old, value=value, locked=value >= LOCK_THRESHOLD)
        self._cells[index] = new
        return new

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def snapshot(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    def values(self) -> list[int]:
        return [c.value for c in self._cells]

    def locked_indices(self) -> list[int]:
        return [i for i, c in enumerate(self._cells) if c.locked]

    def rows(self) -> list[tuple[Cell, ...]]:
        """Cells grouped by row, top to bottom."""
        c = self._cells
        return [tuple(c[i : i + COLS]) for i in range(0, GRID_SIZE, COLS)]

    def __repr__(self) -> str:
        cells = " ".join(
            f"{c.value}{'*' if c.locked else ''}" for c in self._cells
        )
        return f"<Grid [{cells}]>"
