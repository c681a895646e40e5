from typing import Callable, Dict, Iterable, List, Set

from typedefs import Coord

SAND = "o"


def column_scene(size: int) -> Set[Coord]:
    """Ten-column block of sand filling the top half of the grid."""
    cx = cy = size // 2
    return {(x, y) for x in range(cx - 5, cx + 5) for y in range(cy)}


def funnel_scene(size: int) -> Set[Coord]:
    """Two triangular ramps meeting under the centre.

    The ramps load as sand like any other cell, so they slide down with the
    rest; pair with ``column`` for a block that pours over them.
    """
    cx = cy = size // 2
    half = size // 2
    cells: Set[Coord] = set()
    for x in range(cx):
        for y in range(x - cx + half, cy):
            cells.add((x, y))
    for x in range(cx + half, cx, -1):
        for y in range(cx + half - x, cy):
            cells.add((x, y))
    return cells


def default_scene(size: int) -> Set[Coord]:
    # The original start-up ramps are static obstacles, which a two-state grid
    # cannot express, so the reference scene is the sand block alone.
    return column_scene(size)


def column_funnel_scene(size: int) -> Set[Coord]:
    return column_scene(size) | funnel_scene(size)


def empty_scene(size: int) -> Set[Coord]:
    return set()


SCENES: Dict[str, Callable[[int], Set[Coord]]] = {
    "default": default_scene,
    "column": column_scene,
    "funnel": funnel_scene,
    "column_funnel": column_funnel_scene,
    "empty": empty_scene,
}


def get_scene(name: str, size: int) -> Set[Coord]:
    builder = SCENES.get(name)
    if builder is None:
        raise KeyError(f"Unknown scene '{name}' (choices: {', '.join(sorted(SCENES))})")
    return {(x, y) for (x, y) in builder(size) if 0 <= x < size and 0 <= y < size}


def parse_scene(lines: Iterable[str]) -> Set[Coord]:
    cells: Set[Coord] = set()
    for y, row in enumerate(lines):
        for x, ch in enumerate(row):
            if ch == SAND:
                cells.add((x, y))
    return cells


def scene_lines(cells: Iterable[Coord], size: int) -> List[str]:
    grid = [["." for _ in range(size)] for _ in range(size)]
    for x, y in cells:
        grid[y][x] = SAND
    return ["".join(row) for row in grid]
