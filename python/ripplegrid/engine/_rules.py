"""Ripple rules and the registry the engine evaluates them from.

A rule is a plain callable ``rule(index, value) -> PendingUpdate | None``
that looks at a cell's freshly updated value and proposes at most one
update for a neighbour. The engine fills in ``depth`` and ``source`` and
drops proposals aimed at locked cells.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Callable

from ripplegrid._utils import below, right_of
from ripplegrid.engine._protocol import PendingUpdate

Rule = Callable[[int, int], PendingUpdate | None]

RIGHT_DELTA = -1
BELOW_DELTA = 2


def rule_a(index: int, value: int) -> PendingUpdate | None:
    """Multiples of 3: the cell to the right loses 1."""
    if value == 0 or value % 3 != 0:
        return None
    target = right_of(index)
    if target is None:
        return None
    return PendingUpdate(index=target, delta=RIGHT_DELTA)


def rule_b(index: int, value: int) -> PendingUpdate | None:
    """Multiples of 5: the cell below gains 2."""
    if value == 0 or value % 5 != 0:
        return None
    target = below(index)
    if target is None:
        return None
    return PendingUpdate(index=target, delta=BELOW_DELTA)


DEFAULT_RULES: dict[str, Rule] = {"A": rule_a, "B": rule_b}


class RuleRegistry:
    """Ordered registry of ripple rules.

    Starts with Rule A then Rule B; rules fire in registration order, which
    fixes the discovery order of ripples within a cascade depth.
    """

    def __init__(self, rules: dict[str, Rule] | None = None) -> None:
        self._rules: dict[str, Rule] = dict(DEFAULT_RULES if rules is None else rules)

    def register(self, name: str, rule: Rule) -> None:
        if name in self._rules:
            raise ValueError(f"Rule '{name}' is already registered")
        self._rules[name] = rule

    def get(self, name: str) -> Rule | None:
        return self._rules.get(name)

    def has(self, name: str) -> bool:
        return name in self._rules

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._rules)

    def evaluate(self, index: int, value: int) -> list[PendingUpdate]:
        """Run every rule against a cell's new value, in order."""
        proposals: list[PendingUpdate] = []
        for rule in self._rules.values():
            update = rule(index, value)
            if update is not None:
                proposals.append(update)
        return proposals

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)
