from typing import Tuple

import pygame

from rotated_view import DrawCommands
from sand_constants import ANGLE_MAX, ANGLE_MIN, BORDER_COLOR, CLEAR_COLOR, GRID_LINE_COLOR, SAND_COLOR

_OVERLAY_CACHE = {}

PANEL_BG = (235, 235, 235)
TEXT_COLOR = (20, 20, 20)
BUTTON_COLOR = (210, 210, 210)
BUTTON_HOVER = (190, 200, 220)
SLIDER_TRACK = (150, 150, 150)
SLIDER_KNOB = (70, 90, 140)


def _get_overlay(size: Tuple[int, int]) -> pygame.Surface:
    surface = _OVERLAY_CACHE.get(size)
    if surface is None:
        surface = pygame.Surface(size, pygame.SRCALPHA)
        _OVERLAY_CACHE[size] = surface
    return surface


def draw_grid(surface: pygame.Surface, commands: DrawCommands) -> None:
    surface.fill(CLEAR_COLOR)
    bx, by, bw, bh = commands.border
    pygame.draw.rect(surface, BORDER_COLOR, (bx, by, bw, bh), 1)

    # Grid lines are translucent, so they go on a separate alpha surface.
    overlay = _get_overlay(surface.get_size())
    overlay.fill((0, 0, 0, 0))
    for quad in commands.cells:
        pygame.draw.polygon(surface, SAND_COLOR if quad.filled else CLEAR_COLOR, quad.corners)
        pygame.draw.lines(overlay, GRID_LINE_COLOR, True, quad.corners)
    surface.blit(overlay, (0, 0))

    pygame.draw.circle(surface, BORDER_COLOR, commands.center, 2)


class Button:
    def __init__(self, label: str, rect: pygame.Rect):
        self.label = label
        self.rect = rect

    def hit(self, pos) -> bool:
        return self.rect.collidepoint(pos)

    def draw(self, surface: pygame.Surface, font) -> None:
        color = BUTTON_HOVER if self.hit(pygame.mouse.get_pos()) else BUTTON_COLOR
        pygame.draw.rect(surface, color, self.rect, border_radius=3)
        pygame.draw.rect(surface, BORDER_COLOR, self.rect, 1, border_radius=3)
        text = font.render(self.label, True, TEXT_COLOR)
        surface.blit(text, text.get_rect(center=self.rect.center))


class AngleSlider:
    def __init__(self, rect: pygame.Rect, value: int = 0, lo: int = ANGLE_MIN, hi: int = ANGLE_MAX):
        self.rect = rect
        self.lo = lo
        self.hi = hi
        self.value = value
        self.dragging = False

    def set_value(self, value: int) -> bool:
        value = max(self.lo, min(self.hi, int(value)))
        if value == self.value:
            return False
        self.value = value
        return True

    def value_at(self, px: int) -> int:
        frac = (px - self.rect.left) / float(max(1, self.rect.width))
        frac = max(0.0, min(1.0, frac))
        return int(round(self.lo + frac * (self.hi - self.lo)))

    def knob_x(self) -> int:
        frac = (self.value - self.lo) / float(self.hi - self.lo)
        return int(self.rect.left + frac * self.rect.width)

    def handle_event(self, event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and self.rect.inflate(0, 12).collidepoint(event.pos):
            self.dragging = True
            return self.set_value(self.value_at(event.pos[0]))
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            return self.set_value(self.value_at(event.pos[0]))
        return False

    def draw(self, surface: pygame.Surface, font) -> None:
        mid_y = self.rect.centery
        pygame.draw.line(surface, SLIDER_TRACK, (self.rect.left, mid_y), (self.rect.right, mid_y), 3)
        for tick_value in range(self.lo, self.hi + 1, 10):
            tx = int(self.rect.left + (tick_value - self.lo) / float(self.hi - self.lo) * self.rect.width)
            major = tick_value % 180 == 0
            pygame.draw.line(surface, SLIDER_TRACK, (tx, mid_y + 3), (tx, mid_y + (9 if major else 6)))
            if major:
                label = font.render(str(tick_value), True, TEXT_COLOR)
                surface.blit(label, label.get_rect(midtop=(tx, mid_y + 10)))
        pygame.draw.circle(surface, SLIDER_KNOB, (self.knob_x(), mid_y), 6)


def draw_info_panel(surface: pygame.Surface, rect: pygame.Rect, lines, font) -> None:
    pygame.draw.rect(surface, PANEL_BG, rect)
    for idx, line in enumerate(lines):
        text = font.render(line, True, TEXT_COLOR)
        surface.blit(text, (rect.left + 6, rect.top + 6 + idx * font.get_linesize()))
