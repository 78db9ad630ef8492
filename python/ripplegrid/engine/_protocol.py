"""Engine protocol and cascade record dataclasses."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ripplegrid._grid import Cell

EventKind = Literal["initial", "ripple"]


@dataclass(frozen=True)
class PendingUpdate:
    """A queued delta that has not been applied yet."""

    index: int
    delta: int
    depth: int = 0  # 0 for the click itself
    source: int | None = None  # cell whose rule produced this update


@dataclass(frozen=True)
class CellDelta:
    """A single applied update from a cascade."""

    index: int
    old_value: int
    new_value: int
    kind: EventKind
    depth: int = 0
    locked: bool = False  # this update pushed the cell over the threshold
    source: int | None = None  # cell whose rule produced this update

    @property
    def delta(self) -> int:
        return self.new_value - self.old_value


@dataclass(frozen=True)
class CascadeResult:
    """Result of one click and the cascade it triggered."""

    index: int  # the clicked cell
    deltas: tuple[CellDelta, ...]  # applied updates, in FIFO order
    grid: tuple[Cell, ...]  # snapshot after the cascade
    processed: int = 0  # dequeued updates, skipped ones included
    skipped: int = 0  # dequeued updates whose target was locked
    truncated: bool = False  # safety bound reached with work left over
    max_depth: int = 0

    @property
    def ignored(self) -> bool:
        """True when the clicked cell was locked and nothing happened."""
        return self.processed == 0

    @property
    def newly_locked(self) -> tuple[int, ...]:
        return tuple(d.index for d in self.deltas if d.locked)

    @property
    def touched(self) -> frozenset[int]:
        return frozenset(d.index for d in self.deltas)


@runtime_checkable
class Engine(Protocol):
    """Protocol for grid propagation engines."""

    def reset(self) -> None:
        """Replace the grid with nine fresh, unlocked zero cells."""
        ...

    def load(self, cells: Iterable[Any]) -> None:
        """Replace the grid with a given starting state."""
        ...

    def apply_click(self, index: int) -> CascadeResult:
        """Increment an unlocked cell and run the cascade to completion."""
        ...

    def snapshot(self) -> tuple[Cell, ...]:
        """Read-only view of the current grid."""
        ...

    def replay(self, clicks: Iterable[int]) -> list[CascadeResult]:
        """Apply a sequence of clicks in order."""
        ...
