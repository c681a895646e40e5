import logging

import pygame

from ascii_renderer import render_ascii
from dsl import describe, load_scene
from graphics import AngleSlider, Button, draw_grid, draw_info_panel
from grid_state import GridState
from rotated_view import build_draw_commands
from sand_constants import CELL_SIZE, FPS, MATRIX_SIZE, STEP_MS, WINDOW_SIZE
from sand_edits import add_sand, remove_sand
from simulation_engine import SimulationEngine
from simulation_state import SandState

logger = logging.getLogger(__name__)

PANEL_WIDTH = 150
CONTROLS_HEIGHT = 56


class ControlsLayout:
    def __init__(self, canvas_w: int, canvas_h: int):
        self.canvas_rect = pygame.Rect(0, 0, canvas_w, canvas_h)
        self.panel_rect = pygame.Rect(canvas_w, 0, PANEL_WIDTH, canvas_h)
        self.controls_rect = pygame.Rect(0, canvas_h, canvas_w + PANEL_WIDTH, CONTROLS_HEIGHT)
        top = canvas_h + 8
        self.add_button = Button("Add sand", pygame.Rect(8, top, 90, 24))
        self.remove_button = Button("Remove sand", pygame.Rect(106, top, 110, 24))
        slider_left = 280
        self.slider = AngleSlider(pygame.Rect(slider_left, top + 8, self.controls_rect.width - slider_left - 24, 8))

    @property
    def window_size(self):
        return self.controls_rect.width, self.canvas_rect.height + CONTROLS_HEIGHT


class SandView:
    """Owns the simulation state for the window; every mutation happens on the loop thread."""

    def __init__(self, state: SandState, engine: SimulationEngine):
        self.state = state
        self.engine = engine

    def step(self) -> None:
        self.engine.tick(self.state)

    def add(self) -> None:
        add_sand(self.state)
        self.state.recount()

    def remove(self) -> None:
        remove_sand(self.state)
        self.state.recount()

    def set_angle(self, angle: int) -> None:
        self.state.set_angle(angle)

    def info_lines(self):
        return [
            f"Angle: {self.state.angle} deg.",
            f"Cell Count: {self.state.total_cells}",
            f"Empty Cells: {self.state.empty_count}",
            f"Filled Cells: {self.state.filled_count}",
        ]


def run_game(scene_name: str = "default", size: int = MATRIX_SIZE, angle: int = 0, step_ms: int = STEP_MS) -> None:
    pygame.init()
    engine = SimulationEngine(step_ms)
    state = SandState(grid=GridState(size), angle=angle)
    load_scene(state, scene_name)
    view = SandView(state, engine)

    canvas_w = max(WINDOW_SIZE[0], size * CELL_SIZE * 3 // 2)
    canvas_h = max(WINDOW_SIZE[1] - CONTROLS_HEIGHT, size * CELL_SIZE * 3 // 2)
    layout = ControlsLayout(canvas_w, canvas_h)
    layout.slider.set_value(state.angle)

    screen = pygame.display.set_mode(layout.window_size)
    pygame.display.set_caption("Sand Simulation")
    canvas = screen.subsurface(layout.canvas_rect)
    font = pygame.font.SysFont(None, 18)
    small_font = pygame.font.SysFont(None, 14)
    clock = pygame.time.Clock()

    logger.info("Window %sx%s, grid %dx%d, tick %d ms", *layout.window_size, size, size, step_ms)

    step_acc = 0
    running = True
    paused = False

    while running:
        dt = clock.tick(FPS)
        step_acc += dt

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                    logger.info("Paused" if paused else "Resumed")
                elif event.key == pygame.K_n:
                    view.step()
                elif event.key == pygame.K_a:
                    view.add()
                elif event.key == pygame.K_r:
                    view.remove()
                elif event.key in (pygame.K_LEFT, pygame.K_RIGHT):
                    delta = -10 if event.key == pygame.K_LEFT else 10
                    if layout.slider.set_value(layout.slider.value + delta):
                        view.set_angle(layout.slider.value)
                elif event.key == pygame.K_p:
                    print(describe(state))
                    print(render_ascii(state.grid, show_coords=True))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if layout.add_button.hit(event.pos):
                    view.add()
                elif layout.remove_button.hit(event.pos):
                    view.remove()
            if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
                if layout.slider.handle_event(event):
                    view.set_angle(layout.slider.value)

        if not paused:
            while step_acc >= engine.step_ms:
                step_acc -= engine.step_ms
                view.step()
        else:
            step_acc = 0

        commands = build_draw_commands(state.grid, state.angle, canvas_w, canvas_h)
        draw_grid(canvas, commands)
        draw_info_panel(screen, layout.panel_rect, view.info_lines(), font)
        pygame.draw.rect(screen, (225, 225, 225), layout.controls_rect)
        layout.add_button.draw(screen, font)
        layout.remove_button.draw(screen, font)
        label = font.render("Angle:", True, (20, 20, 20))
        screen.blit(label, (layout.slider.rect.left - 52, layout.slider.rect.centery - 7))
        layout.slider.draw(screen, small_font)

        pygame.display.flip()

    pygame.quit()
