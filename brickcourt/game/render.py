"""
Render Sink
===========

The court never touches a drawing surface directly. It issues three kinds of
calls to a renderer:
    clear()                               wipe the frame
    fill_rect(x, y, w, h, color)          filled rectangle, float coordinates
    draw_text(text, center, size)         centered line of text (welcome scene)

PygameRenderer implements them on a pygame Surface.
"""

from typing import Dict, Protocol, Tuple, Union, runtime_checkable

import pygame


Color = Union[str, Tuple[int, int, int]]


@runtime_checkable
class Renderer(Protocol):
    """Interface implemented by render sinks (pygame, test recorders, etc.)."""

    def clear(self) -> None:  # pragma: no cover - protocol definition
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float,
                  color: Color) -> None:  # pragma: no cover - protocol definition
        ...

    def draw_text(self, text: str, center: Tuple[float, float],
                  size: int) -> None:  # pragma: no cover - protocol definition
        ...


class PygameRenderer:
    """Renderer backed by a pygame Surface."""

    def __init__(self, surface: pygame.Surface,
                 background: Color = (0, 0, 0), foreground: Color = 'white'):
        self.surface = surface
        self.background = pygame.Color(background)
        self.foreground = pygame.Color(foreground)
        # Cache fonts to avoid recreating them every frame
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._colors: Dict[Color, pygame.Color] = {}

    def _color(self, color: Color) -> pygame.Color:
        cached = self._colors.get(color)
        if cached is None:
            cached = self._colors[color] = pygame.Color(color)
        return cached

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def clear(self) -> None:
        self.surface.fill(self.background)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        rect = pygame.Rect(round(x), round(y), max(1, round(width)), max(1, round(height)))
        pygame.draw.rect(self.surface, self._color(color), rect)

    def draw_text(self, text: str, center: Tuple[float, float], size: int) -> None:
        rendered = self._font(size).render(text, True, self.foreground)
        self.surface.blit(rendered, rendered.get_rect(center=(round(center[0]), round(center[1]))))
