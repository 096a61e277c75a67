"""
Credits Screen
"""

from typing import List, Optional, Tuple

from core.config import CREDITS_MIN_HEIGHT
from core.types import Coordinate
from game.view_mode import ViewMode
from .base_screen import BaseScreen
from .canvas import Canvas, Viewport
from .components import Action, RectRegion, draw_box

CREDITS_TEXT = [
    "Planet radii, distances and periods: NASA Planetary Fact Sheet.",
    "Sizes in the Scale view share one multiplier, so the Sun really is that big.",
    "Distances in the Distance view are to scale; planet markers are not.",
    "Made with pygame, numpy and httpx.",
]


class CreditsScreen(BaseScreen):

    def __init__(self):
        super().__init__(ViewMode.CREDITS)

    def canvas_size(self, viewport, state) -> Tuple[int, int]:
        w, _ = self.window_canvas_size(viewport)
        return (w, max(viewport.height, CREDITS_MIN_HEIGHT))

    def draw(self, canvas: Canvas, viewport: Viewport, state,
             pointer: Optional[Coordinate] = None) -> List:
        self.draw_background(canvas, state)
        m = self.theme.margin
        y = self.draw_title(canvas, m * 4, "Credits")
        y += m * 2

        text_w = min(canvas.width - 2 * m, 640)
        x = (canvas.width - text_w) / 2.0
        for line in CREDITS_TEXT:
            y += canvas.text(line, x, y, text_w) + m

        bw, bh = self.theme.box_width, self.theme.box_height
        bx = (canvas.width - bw) / 2.0
        by = y + m * 2
        hovered = pointer is not None and RectRegion(bx, by, bw, bh).contains(pointer)
        back = draw_box(canvas, bx, by, bw, bh, "Go Back", hovered=hovered)
        back.action = Action.change_mode(ViewMode.UNINITIALIZED)
        return [back]
