"""PropagationEngine: breadth-first ripple cascade over the 3x3 grid.

A click adds 1 to an unlocked cell. Every applied update is then checked
against the ripple rules (multiples of 3 push -1 to the right, multiples of
5 push +2 downward), and the proposals are queued FIFO, so all updates at
cascade depth *k* land before any at depth *k+1*. Rules only ever point
right or down, so every cascade terminates; ``MAX_PROPAGATIONS`` is a hard
stop in case a custom rule set introduces a cycle.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import Any

from ripplegrid._grid import Cell, Grid
from ripplegrid._utils import check_index
from ripplegrid.engine._events import EventTracker
from ripplegrid.engine._protocol import CascadeResult, CellDelta, PendingUpdate
from ripplegrid.engine._rules import RuleRegistry

logger = logging.getLogger(__name__)

MAX_PROPAGATIONS = 100
CLICK_DELTA = 1


class PropagationEngine:
    """Owns the grid and turns clicks into cascades.

    Usage::

        engine = PropagationEngine()
        result = engine.apply_click(0)
        result.grid[0].value        # 1
        engine.events.get(0)        # "initial" until it expires
        engine.reset()
    """

    def __init__(
        self,
        rules: RuleRegistry | None = None,
        clock: Callable[[], float] | None = None,
        max_propagations: int = MAX_PROPAGATIONS,
    ) -> None:
        if max_propagations < 1:
            raise ValueError("max_propagations must be at least 1")
        self._grid = Grid()
        self._rules = rules if rules is not None else RuleRegistry()
        self._max_propagations = max_propagations
        self.events = EventTracker(clock=clock)

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def rules(self) -> RuleRegistry:
        return self._rules

    def snapshot(self) -> tuple[Cell, ...]:
        return self._grid.snapshot()

    def reset(self) -> None:
        """Replace the grid with nine fresh cells and drop pending events."""
        self._grid = Grid()
        self.events.clear()

    def load(self, cells: Iterable[Any]) -> None:
        """Start from a given state (see :meth:`Grid.from_snapshot`)."""
        self._grid = Grid.from_snapshot(cells)
        self.events.clear()

    def replay(self, clicks: Iterable[int]) -> list[CascadeResult]:
        return [self.apply_click(index) for index in clicks]

    # ------------------------------------------------------------------
    # Cascade
    # ------------------------------------------------------------------

    def apply_click(self, index: int) -> CascadeResult:
        """Increment cell *index* and propagate until the worklist drains.

        Clicking a locked cell changes nothing. Locked ripple targets, edge
        cells and the safety bound are all per-update no-ops; none of them
        raise. An index outside ``0..8`` is a caller bug and raises.
        """
        check_index(index)

        if self._grid.is_locked(index):
            logger.debug("Ignoring click on locked cell %d", index)
            return CascadeResult(index=index, deltas=(), grid=self._grid.snapshot())

        # Work on a copy; nothing is committed if a rule raises mid-cascade.
        grid = Grid.from_snapshot(self._grid.snapshot())

        queue: deque[PendingUpdate] = deque([PendingUpdate(index, CLICK_DELTA)])
        deltas: list[CellDelta] = []
        processed = 0
        skipped = 0
        max_depth = 0

        while queue and processed < self._max_propagations:
            update = queue.popleft()
            processed += 1

            target = update.index
            if grid.is_locked(target):
                skipped += 1
                logger.debug("Skipping %+d to locked cell %d", update.delta, target)
                continue

            old_value = grid[target].value
            cell = grid.add(target, update.delta)
            kind = "initial" if target == index else "ripple"
            deltas.append(CellDelta(
                index=target,
                old_value=old_value,
                new_value=cell.value,
                kind=kind,
                depth=update.depth,
                locked=cell.locked,
                source=update.source,
            ))
            max_depth = max(max_depth, update.depth)
            logger.debug(
                "Cell %d: %d -> %d (depth %d)",
                target, old_value, cell.value, update.depth,
            )
            if cell.locked:
                logger.info("Cell %d locked at %d", target, cell.value)

            for proposal in self._rules.evaluate(target, cell.value):
                if grid.is_locked(proposal.index):
                    continue
                queue.append(replace(proposal, depth=update.depth + 1, source=target))
                logger.debug(
                    "Cell %d ripples %+d to cell %d",
                    target, proposal.delta, proposal.index,
                )

        truncated = bool(queue)
        if truncated:
            logger.warning(
                "Cascade from cell %d stopped after %d updates; dropped %d pending",
                index, processed, len(queue),
            )

        self._grid = grid
        for d in deltas:
            self.events.signal(d.index, d.kind)

        return CascadeResult(
            index=index,
            deltas=tuple(deltas),
            grid=grid.snapshot(),
            processed=processed,
            skipped=skipped,
            truncated=truncated,
            max_depth=max_depth,
        )

    def __repr__(self) -> str:
        return f"<PropagationEngine {self._grid!r}>"
