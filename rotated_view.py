"""Geometry for drawing the grid rotated by the gravity angle.

Kept free of any window toolkit: ``build_draw_commands`` returns plain data
that ``graphics.py`` turns into pygame calls.
"""

import math
from dataclasses import dataclass, field
from typing import List, Tuple

from grid_state import GridState
from sand_constants import CELL_SIZE

Point = Tuple[int, int]

MARGIN = 5


@dataclass(frozen=True)
class CellQuad:
    x: int
    y: int
    filled: bool
    # top-left, top-right, bottom-right, bottom-left
    corners: Tuple[Point, Point, Point, Point]


@dataclass
class DrawCommands:
    border: Tuple[int, int, int, int]
    center: Point
    cells: List[CellQuad] = field(default_factory=list)


def rotate_point(x: int, y: int, cx: int, cy: int, angle_rad: float) -> Point:
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    rx = int((x - cx) * cos_a - (y - cy) * sin_a + cx)
    ry = int((x - cx) * sin_a + (y - cy) * cos_a + cy)
    return rx, ry


def build_draw_commands(
    grid: GridState,
    angle: float,
    width: int,
    height: int,
    cell_size: int = CELL_SIZE,
) -> DrawCommands:
    end_x = width - 2 * MARGIN
    end_y = height - 2 * MARGIN
    cx = (MARGIN + end_x) // 2
    cy = (MARGIN + end_y) // 2
    border = (MARGIN, MARGIN, end_x - MARGIN, end_y - MARGIN)

    angle_rad = math.radians(angle)
    span = grid.size * cell_size
    start_x = cx - span // 2
    start_y = cy - span // 2

    commands = DrawCommands(border=border, center=(cx, cy))
    for row in range(grid.size):
        for col in range(grid.size):
            x0 = start_x + col * cell_size
            y0 = start_y + row * cell_size
            x1 = x0 + cell_size
            y1 = y0 + cell_size
            corners = (
                rotate_point(x0, y0, cx, cy, angle_rad),
                rotate_point(x1, y0, cx, cy, angle_rad),
                rotate_point(x1, y1, cx, cy, angle_rad),
                rotate_point(x0, y1, cx, cy, angle_rad),
            )
            commands.cells.append(CellQuad(col, row, grid.is_filled(col, row), corners))
    return commands
