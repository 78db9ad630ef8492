"""Transient per-cell visual events with lazy, clock-driven expiry.

The engine signals an ``"initial"`` event for the clicked cell and a
``"ripple"`` event for every other cell it changes. A presentation layer
polls :meth:`EventTracker.get` to pick an animation; entries expire after
``EVENT_TTL`` seconds. Nothing here feeds back into game state.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from ripplegrid._utils import check_index
from ripplegrid.engine._protocol import EventKind

EVENT_TTL = 0.4


@dataclass(frozen=True)
class VisualEvent:
    kind: EventKind
    expires_at: float


class EventTracker:
    """Most-recent-wins map of cell index -> visual event."""

    __slots__ = ("_events", "_clock", "ttl")

    def __init__(
        self,
        clock: Callable[[], float] | None = None,
        ttl: float = EVENT_TTL,
    ) -> None:
        self._events: dict[int, VisualEvent] = {}
        self._clock = clock if clock is not None else time.monotonic
        self.ttl = ttl

    def signal(self, index: int, kind: EventKind) -> VisualEvent:
        """Record an event for *index*, replacing any earlier one."""
        event = VisualEvent(kind=kind, expires_at=self._clock() + self.ttl)
        self._events[check_index(index)] = event
        return event

    def get(self, index: int) -> EventKind | None:
        """Live event tag for *index*, or None if absent or expired."""
        event = self._events.get(check_index(index))
        if event is None:
            return None
        if self._clock() >= event.expires_at:
            del self._events[index]
            return None
        return event.kind

    def active(self) -> dict[int, EventKind]:
        """All live event tags, pruning expired entries."""
        now = self._clock()
        expired = [i for i, e in self._events.items() if now >= e.expires_at]
        for i in expired:
            del self._events[i]
        return {i: e.kind for i, e in sorted(self._events.items())}

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self.active())
