"""ripplegrid: a 3x3 number grid where every click can ripple.

Usage::

    from ripplegrid import PropagationEngine

    engine = PropagationEngine()
    for _ in range(3):
        result = engine.apply_click(0)
    print([c.value for c in result.grid])   # [3, -1, 0, 0, 0, 0, 0, 0, 0]

    engine.reset()
"""

from ripplegrid._grid import Cell, Grid
from ripplegrid._utils import COLS, GRID_SIZE, LOCK_THRESHOLD, ROWS
from ripplegrid.engine import CascadeResult, CellDelta, PropagationEngine

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "COLS",
    "CascadeResult",
    "Cell",
    "CellDelta",
    "GRID_SIZE",
    "Grid",
    "LOCK_THRESHOLD",
    "PropagationEngine",
    "ROWS",
]
