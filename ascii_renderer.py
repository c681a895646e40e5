from grid_state import GridState
from sand_constants import EMPTY_CHAR, FILLED_CHAR


class AsciiRenderer:
    @staticmethod
    def render(grid: GridState, show_coords: bool = False) -> str:
        rows = [[EMPTY_CHAR for _ in range(grid.size)] for _ in range(grid.size)]
        for (x, y) in grid.filled_cells():
            rows[y][x] = FILLED_CHAR
        if not show_coords:
            return "\n".join("".join(row) for row in rows)

        label_w = max(2, len(str(grid.size - 1)))
        header = " " * (label_w + 1) + "".join(str(x % 10) for x in range(grid.size))
        lines = [header]
        for y, row in enumerate(rows):
            lines.append(f"{y:>{label_w}} " + "".join(row))
        return "\n".join(lines)


def render_ascii(grid: GridState, show_coords: bool = False) -> str:
    return AsciiRenderer.render(grid, show_coords)
