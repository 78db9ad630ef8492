"""Grid geometry: fixed 3x3 dimensions and index <-> (row, col) conversion."""

from __future__ import annotations

GRID_SIZE = 9
COLS = 3
ROWS = GRID_SIZE // COLS
LOCK_THRESHOLD = 15


def check_index(index: int) -> int:
    """Validate a row-major cell index, returning it unchanged.

    Raises TypeError for non-integers (``bool`` included) and IndexError for
    anything outside ``0..GRID_SIZE-1``.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Cell index must be an int, got {type(index).__name__}")
    if not 0 <= index < GRID_SIZE:
        raise IndexError(f"Cell index {index} out of range 0..{GRID_SIZE - 1}")
    return index


def index_to_rowcol(index: int) -> tuple[int, int]:
    """0-based row-major index -> (row, col)."""
    check_index(index)
    return index // COLS, index % COLS


def rowcol_to_index(row: int, col: int) -> int:
    """(row, col) -> 0-based row-major index."""
    if not (0 <= row < ROWS and 0 <= col < COLS):
        raise IndexError(f"Cell ({row}, {col}) outside the {ROWS}x{COLS} grid")
    return row * COLS + col


def right_of(index: int) -> int | None:
    """Index of the cell to the right, or None on the rightmost column."""
    row, col = index_to_rowcol(index)
    if col < COLS - 1:
        return index + 1
    return None


def below(index: int) -> int | None:
    """Index of the cell below, or None on the bottom row."""
    row, col = index_to_rowcol(index)
    if row < ROWS - 1:
        return index + COLS
    return None
