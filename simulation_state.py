from dataclasses import dataclass, field

from grid_state import GridState
from sand_constants import ANGLE_MAX, ANGLE_MIN, MATRIX_SIZE


def clamp_angle(angle: int) -> int:
    return max(ANGLE_MIN, min(ANGLE_MAX, int(angle)))


@dataclass
class SandState:
    grid: GridState = field(default_factory=lambda: GridState(MATRIX_SIZE))
    angle: int = 0
    filled_count: int = 0
    empty_count: int = 0

    def __post_init__(self) -> None:
        self.angle = clamp_angle(self.angle)
        self.recount()

    @property
    def total_cells(self) -> int:
        return self.grid.total_cells

    def set_angle(self, angle: int) -> None:
        self.angle = clamp_angle(angle)

    def recount(self) -> None:
        self.filled_count = self.grid.count_filled()
        self.empty_count = self.total_cells - self.filled_count

    def clear_sand(self) -> None:
        self.grid.clear()
        self.recount()
