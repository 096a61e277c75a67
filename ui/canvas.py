"""
Canvas and Viewport

The canvas is the drawing surface every view paints on. It is resized at the
start of each frame to whatever the active view needs, which can be far
taller than the window. The viewport is the window onto it: it knows the
window size and the scroll offset, and maps mouse positions from window to
canvas coordinates.
"""

import pygame
from typing import Optional, Tuple

from core.coords import clamp
from core.types import Coordinate
from .theme import get_theme, wrap_text


CURSOR_DEFAULT = "default"
CURSOR_POINTER = "pointer"

Color = Tuple[int, int, int]


class Canvas:
    """
    Off-screen drawing surface with a small immediate-mode API.

    Primitives: clear, circle, rect, wrapped centred text, cursor hint.
    """

    def __init__(self, width: int, height: int):
        self.surface = pygame.Surface((max(1, int(width)), max(1, int(height))))
        self.cursor = CURSOR_DEFAULT
        self.theme = get_theme()

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def resize(self, width: int, height: int) -> bool:
        """
        Resize the surface. Contents are not kept.

        Returns:
            True if the size actually changed
        """
        size = (max(1, int(width)), max(1, int(height)))
        if size == self.surface.get_size():
            return False
        self.surface = pygame.Surface(size)
        return True

    def clear(self, color: Optional[Color] = None):
        if color is None:
            color = self.theme.colors.BG_SPACE
        self.surface.fill(color)

    def circle(self, center: Coordinate, diameter: float, color: Color):
        """Filled circle; anything thinner than a pixel still shows as one"""
        radius = max(1, int(round(diameter / 2.0)))
        pygame.draw.circle(self.surface, color, center.as_int(), radius)

    def ring(self, center: Coordinate, radius: float, color: Color, weight: int = 1):
        if radius < 1:
            return
        pygame.draw.circle(self.surface, color, center.as_int(), int(round(radius)), weight)

    def rect(self, x: float, y: float, w: float, h: float,
             fill: Optional[Color] = None, stroke: Optional[Color] = None,
             weight: int = 0):
        """
        Rectangle with independent fill and stroke.

        Args:
            fill: Fill color, None for no fill
            stroke: Border color, None for no border
            weight: Border width in pixels
        """
        r = pygame.Rect(int(x), int(y), int(w), int(h))
        if fill is not None:
            pygame.draw.rect(self.surface, fill, r)
        if stroke is not None and weight > 0:
            pygame.draw.rect(self.surface, stroke, r, weight)

    def text(self, text: str, x: float, y: float, w: float, h: Optional[float] = None,
             size: int = 18, color: Optional[Color] = None) -> float:
        """
        Draw text centred in a box, wrapped to the box width.

        With h given the block is centred vertically too, otherwise it
        starts at y.

        Returns:
            Height of the drawn block
        """
        if color is None:
            color = self.theme.colors.FG_TEXT
        font = self.theme.fonts.sized(size)
        lines = wrap_text(font, text, max(1, int(w)))
        line_h = font.get_linesize() + self.theme.line_spacing
        block_h = line_h * len(lines)

        top = y if h is None else y + (h - block_h) / 2.0
        cx = x + w / 2.0
        for i, line in enumerate(lines):
            if not line:
                continue
            rendered = font.render(line, True, color)
            self.surface.blit(rendered, (int(cx - rendered.get_width() / 2.0), int(top + i * line_h)))
        return block_h

    def set_cursor(self, style: str):
        self.cursor = style


class Viewport:
    """
    The window's view of the canvas.

    Holds the window size and the scroll position.
    """

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        self.scroll_x = 0
        self.scroll_y = 0

    def resize(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)

    def scroll_by(self, dx: int, dy: int):
        self.scroll_x += int(dx)
        self.scroll_y += int(dy)

    def clamp_to(self, canvas_width: int, canvas_height: int):
        """Keep the scroll offset inside the canvas"""
        self.scroll_x = int(clamp(self.scroll_x, 0, max(0, canvas_width - self.width)))
        self.scroll_y = int(clamp(self.scroll_y, 0, max(0, canvas_height - self.height)))

    def to_canvas(self, window_pos: Tuple[int, int]) -> Coordinate:
        """Window-local mouse position → canvas-local coordinate"""
        return Coordinate(window_pos[0] + self.scroll_x, window_pos[1] + self.scroll_y)
