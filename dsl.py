import logging
from typing import Callable, Dict, Iterable, List, Optional

from ascii_renderer import render_ascii
from grid_state import Cell, GridState
from sand_constants import MATRIX_SIZE
from sand_edits import add_sand, remove_sand
from scenes import get_scene
from simulation_engine import SimulationEngine
from simulation_state import SandState
from typedefs import Coord

logger = logging.getLogger(__name__)


def parse_coord(token: str) -> Coord:
    if "," in token:
        xs, ys = token.split(",", 1)
    elif "x" in token:
        xs, ys = token.split("x", 1)
    else:
        raise ValueError(f"Expected coordinate like '3,4', got '{token}'")
    return int(xs), int(ys)


def load_scene(state: SandState, name: str) -> None:
    state.grid.clear()
    loaded = state.grid.load(get_scene(name, state.grid.size))
    state.recount()
    logger.info("Loaded scene '%s' (%d cells)", name, loaded)


def describe(state: SandState) -> str:
    return (
        f"Angle: {state.angle} deg. | Cell Count: {state.total_cells} | "
        f"Empty Cells: {state.empty_count} | Filled Cells: {state.filled_count}"
    )


def run_script(
    script_text: str,
    default_scene_name: str = "empty",
    size: int = MATRIX_SIZE,
    angle: int = 0,
    engine: Optional[SimulationEngine] = None,
) -> SandState:
    engine = engine or SimulationEngine()
    state = SandState(grid=GridState(size), angle=angle)
    load_scene(state, default_scene_name)

    def handle_scene(args: List[str]) -> None:
        if not args:
            raise ValueError("scene <name> expected")
        try:
            load_scene(state, args[0])
        except KeyError as exc:
            raise ValueError(exc.args[0]) from exc

    def handle_angle(args: List[str]) -> None:
        if not args:
            raise ValueError("angle <degrees> expected")
        state.set_angle(int(args[0]))

    def handle_tick(args: List[str]) -> None:
        steps = int(args[0]) if args else 1
        engine.run(state, steps)

    def handle_wait_ms(args: List[str]) -> None:
        if not args:
            raise ValueError("wait_ms <millis> expected")
        engine.run(state, engine.steps_for(int(args[0])))

    def handle_add(args: List[str]) -> None:
        add_sand(state)
        state.recount()

    def handle_remove(args: List[str]) -> None:
        remove_sand(state)
        state.recount()

    def set_cell(args: List[str], cell: Cell, usage: str) -> None:
        if not args:
            raise ValueError(usage)
        x, y = parse_coord(args[0])
        if not state.grid.in_bounds(x, y):
            return
        state.grid.set(x, y, cell)
        state.recount()

    def handle_fill(args: List[str]) -> None:
        set_cell(args, Cell.FILLED, "fill <x,y>")

    def handle_clear(args: List[str]) -> None:
        set_cell(args, Cell.EMPTY, "clear <x,y>")

    def build_handlers() -> Dict[str, Callable[[List[str]], None]]:
        handlers: Dict[str, Callable[[List[str]], None]] = {}

        def register(names: Iterable[str], func: Callable[[List[str]], None]) -> None:
            for name in names:
                handlers[name] = func

        register(("scene",), handle_scene)
        register(("angle",), handle_angle)
        register(("tick", "wait", "step", "steps"), handle_tick)
        register(("wait_ms", "sleep"), handle_wait_ms)
        register(("add",), handle_add)
        register(("remove", "rm"), handle_remove)
        register(("fill",), handle_fill)
        register(("clear",), handle_clear)
        return handlers

    handlers = build_handlers()

    for raw in script_text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        commands = [cmd.strip() for cmd in line.split(";") if cmd.strip()]
        for cmd in commands:
            parts = cmd.split()
            name = parts[0].lower()
            args = parts[1:]

            handler = handlers.get(name)
            if handler is None:
                raise ValueError(f"Unknown script command '{name}'")
            handler(args)

    print("Script complete")
    print(describe(state))
    print(render_ascii(state.grid, show_coords=True))
    return state


def run_headless(duration_ms: int, scene_name: str = "default", size: int = MATRIX_SIZE, angle: int = 0) -> SandState:
    engine = SimulationEngine()
    state = SandState(grid=GridState(size), angle=angle)
    load_scene(state, scene_name)
    steps = engine.steps_for(duration_ms)
    engine.run(state, steps)
    print(f"Simulated {steps} steps (~{duration_ms} ms)")
    print(describe(state))
    print(render_ascii(state.grid, show_coords=True))
    return state
