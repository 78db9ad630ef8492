"""ripplegrid.engine - Breadth-first ripple propagation for the 3x3 grid."""

from ripplegrid.engine._engine import MAX_PROPAGATIONS, PropagationEngine
from ripplegrid.engine._events import EVENT_TTL, EventTracker, VisualEvent
from ripplegrid.engine._protocol import CascadeResult, CellDelta, Engine, PendingUpdate
from ripplegrid.engine._rules import DEFAULT_RULES, RuleRegistry, rule_a, rule_b

__all__ = [
    "CascadeResult",
    "CellDelta",
    "DEFAULT_RULES",
    "EVENT_TTL",
    "Engine",
    "EventTracker",
    "MAX_PROPAGATIONS",
    "PendingUpdate",
    "PropagationEngine",
    "RuleRegistry",
    "VisualEvent",
    "rule_a",
    "rule_b",
]
