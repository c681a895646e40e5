"""Manual edits triggered by the Add/Remove sand controls.

Both operations run between ticks and never touch the per-tick occupancy.
Having nothing to do is not an error: they return None and leave the grid
untouched.
"""

import logging
import math
from typing import Optional

from grid_state import Cell
from sand_constants import ADD_RADIUS
from simulation_state import SandState
from typedefs import Coord

logger = logging.getLogger(__name__)


def add_sand_target(size: int, angle: int, radius: int = ADD_RADIUS) -> Coord:
    """Point ``radius`` cells from the grid centre, on the side gravity points away from."""
    rad = math.radians(angle)
    center = size // 2
    return center + int(round(math.sin(rad) * radius)), center - int(round(math.cos(rad) * radius))


def add_sand(state: SandState) -> Optional[Coord]:
    grid = state.grid
    x, y = add_sand_target(grid.size, state.angle)
    if not grid.in_bounds(x, y) or not grid.is_empty(x, y):
        logger.debug("add_sand skipped at (%d, %d)", x, y)
        return None
    grid.set(x, y, Cell.FILLED)
    logger.debug("add_sand filled (%d, %d)", x, y)
    return x, y


def remove_sand(state: SandState) -> Optional[Coord]:
    grid = state.grid
    for y in range(grid.size):
        for x in range(grid.size):
            if grid.is_filled(x, y):
                grid.set(x, y, Cell.EMPTY)
                logger.debug("remove_sand cleared (%d, %d)", x, y)
                return x, y
    return None
