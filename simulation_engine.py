import logging
import math
from dataclasses import dataclass, field
from typing import List, Tuple

from movement_resolver import MovementResolver, TickOccupancy, direction_from_angle
from sand_constants import STEP_MS
from simulation_state import SandState
from typedefs import Coord, Direction

logger = logging.getLogger(__name__)


@dataclass
class TickResult:
    direction: Direction
    filled_count: int
    empty_count: int
    moves: List[Tuple[Coord, Coord]] = field(default_factory=list)


class SimulationEngine:
    def __init__(self, step_ms: int = STEP_MS):
        self.step_ms = step_ms

    def steps_for(self, duration_ms: int) -> int:
        return max(1, int(math.ceil(duration_ms / float(self.step_ms))))

    def tick(self, state: SandState) -> TickResult:
        grid = state.grid
        direction = direction_from_angle(state.angle)
        occupancy = TickOccupancy(grid.size)
        resolver = MovementResolver(grid, occupancy, direction)

        filled = 0
        moves: List[Tuple[Coord, Coord]] = []
        # Bottom-up, right-to-left.
        for y in range(grid.size - 1, -1, -1):
            for x in range(grid.size - 1, -1, -1):
                if not grid.is_filled(x, y):
                    continue
                if occupancy.is_marked(x, y):
                    continue
                filled += 1
                dst = resolver.apply(x, y)
                if dst is not None:
                    moves.append(((x, y), dst))

        state.filled_count = filled
        state.empty_count = grid.total_cells - filled
        logger.debug(
            "tick angle=%s dir=%s moved=%d filled=%d empty=%d",
            state.angle,
            direction,
            len(moves),
            state.filled_count,
            state.empty_count,
        )
        return TickResult(direction, state.filled_count, state.empty_count, moves)

    def run(self, state: SandState, steps: int) -> None:
        for _ in range(max(0, steps)):
            self.tick(state)


_ENGINE = SimulationEngine()


def tick(state: SandState) -> TickResult:
    return _ENGINE.tick(state)
