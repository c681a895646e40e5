import math
from typing import List, Optional, Tuple

from grid_state import Cell, GridState
from typedefs import Coord, Direction


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def direction_from_angle(angle: float) -> Direction:
    # No snapping: sin(180deg) is a tiny positive float and yields dx == 1.
    rad = math.radians(angle)
    return _sign(math.sin(rad)), _sign(math.cos(rad))


class TickOccupancy:
    """Cells that already received a migrated grain during the current tick."""

    def __init__(self, size: int):
        self.size = size
        self._marked: List[List[bool]] = [[False] * size for _ in range(size)]
        self.writes: List[Coord] = []

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"Cell ({x}, {y}) outside {self.size}x{self.size} occupancy")

    def is_marked(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self._marked[y][x]

    def mark(self, x: int, y: int) -> None:
        self._check(x, y)
        if self._marked[y][x]:
            raise ValueError(f"Cell ({x}, {y}) received two grains in one tick")
        self._marked[y][x] = True
        self.writes.append((x, y))


class MovementResolver:
    def __init__(self, grid: GridState, occupancy: TickOccupancy, direction: Direction):
        dx, dy = direction
        if dx not in (-1, 0, 1) or dy not in (-1, 0, 1):
            raise ValueError(f"Malformed direction {direction!r}")
        self.grid = grid
        self.occupancy = occupancy
        self.dx = dx
        self.dy = dy

    def candidates(self, x: int, y: int) -> Tuple[Coord, Coord, Coord]:
        # With dx == 0 (or dy == 0) a fallback is the source itself and never qualifies.
        return (
            (x + self.dx, y + self.dy),
            (x + self.dx, y),
            (x, y + self.dy),
        )

    def _accepts(self, x: int, y: int) -> bool:
        return (
            self.grid.in_bounds(x, y)
            and not self.occupancy.is_marked(x, y)
            and self.grid.is_empty(x, y)
        )

    def resolve(self, x: int, y: int) -> Optional[Coord]:
        for nx, ny in self.candidates(x, y):
            if self._accepts(nx, ny):
                return nx, ny
        return None

    def migrate(self, src: Coord, dst: Coord) -> None:
        (x, y), (nx, ny) = src, dst
        self.occupancy.mark(nx, ny)
        self.grid.set(x, y, Cell.EMPTY)
        self.grid.set(nx, ny, Cell.FILLED)

    def apply(self, x: int, y: int) -> Optional[Coord]:
        dst = self.resolve(x, y)
        if dst is not None:
            self.migrate((x, y), dst)
        return dst
