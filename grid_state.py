from enum import Enum
from typing import Iterable, Iterator, List

from sand_constants import MATRIX_SIZE
from typedefs import Coord


class Cell(Enum):
    EMPTY = 0
    FILLED = 1


class GridState:
    """Square N x N matrix of cells addressed as (x, y) = (column, row).

    Every in-range coordinate holds a defined Cell, EMPTY until written.
    Out-of-range reads and writes raise IndexError; callers are expected to
    check ``in_bounds`` first.
    """

    def __init__(self, size: int = MATRIX_SIZE):
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self._cells: List[List[Cell]] = [[Cell.EMPTY for _ in range(size)] for _ in range(size)]

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.size}x{self.size} grid")

    def get(self, x: int, y: int) -> Cell:
        self._check(x, y)
        return self._cells[y][x]

    def is_filled(self, x: int, y: int) -> bool:
        return self.get(x, y) is Cell.FILLED

    def is_empty(self, x: int, y: int) -> bool:
        return self.get(x, y) is Cell.EMPTY

    def set(self, x: int, y: int, state: Cell) -> None:
        self._check(x, y)
        self._cells[y][x] = state

    def clear(self) -> None:
        for row in self._cells:
            for x in range(self.size):
                row[x] = Cell.EMPTY

    def load(self, coords: Iterable[Coord]) -> int:
        loaded = 0
        for x, y in coords:
            if not self.in_bounds(x, y):
                continue
            self._cells[y][x] = Cell.FILLED
            loaded += 1
        return loaded

    def filled_cells(self) -> Iterator[Coord]:
        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                if cell is Cell.FILLED:
                    yield x, y

    def count_filled(self) -> int:
        return sum(1 for _ in self.filled_cells())

    def copy(self) -> "GridState":
        clone = GridState(self.size)
        clone._cells = [list(row) for row in self._cells]
        return clone

    def __eq__(self, other) -> bool:
        if not isinstance(other, GridState):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __repr__(self) -> str:
        return f"GridState(size={self.size}, filled={self.count_filled()})"
