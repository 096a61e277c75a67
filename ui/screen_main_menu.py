"""
Main Menu Screen

Startup screen (ViewMode.UNINITIALIZED) with one box per view:
  Scale    → planets sized relative to each other
  Distance → planets placed by distance from the Sun
  Credits  → credits screen
"""

from typing import List, Optional, Tuple

from core.types import Coordinate
from game.view_mode import ViewMode
from .base_screen import BaseScreen
from .canvas import Canvas, Viewport
from .components import Action, RectRegion, draw_box

# (label, target mode), top to bottom
MENU_ENTRIES = [
    ("Scale", ViewMode.SCALE),
    ("Distance", ViewMode.DISTANCE),
    ("Credits", ViewMode.CREDITS),
]


class MainMenuScreen(BaseScreen):
    """Menu: entry point, and where every other view returns to."""

    def __init__(self):
        super().__init__(ViewMode.UNINITIALIZED)

    def canvas_size(self, viewport, state) -> Tuple[int, int]:
        return self.window_canvas_size(viewport)

    def box_rects(self, canvas_width: int, canvas_height: int) -> List[Tuple[str, ViewMode, Tuple[float, float, float, float]]]:
        """Menu box positions: a centred column in the lower part of the canvas"""
        bw, bh, gap = self.theme.box_width, self.theme.box_height, self.theme.box_gap
        total = len(MENU_ENTRIES) * bh + (len(MENU_ENTRIES) - 1) * gap
        x = (canvas_width - bw) / 2.0
        y = max(canvas_height * 0.35, (canvas_height - total) / 2.0)
        rects = []
        for label, mode in MENU_ENTRIES:
            rects.append((label, mode, (x, y, bw, bh)))
            y += bh + gap
        return rects

    def draw(self, canvas: Canvas, viewport: Viewport, state,
             pointer: Optional[Coordinate] = None) -> List:
        self.draw_background(canvas, state)
        self.draw_title(canvas, viewport.height * 0.1, "The Solar System",
                        "Click a view to explore the planets")

        regions = []
        for label, mode, (x, y, w, h) in self.box_rects(canvas.width, canvas.height):
            hovered = pointer is not None and RectRegion(x, y, w, h).contains(pointer)
            box = draw_box(canvas, x, y, w, h, label, hovered=hovered)
            box.action = Action.change_mode(mode)
            regions.append(box)

        if not state.catalog.is_loaded():
            m = self.theme.margin
            canvas.text("Loading planet data...", m, canvas.height - 3 * m - 20,
                        canvas.width - 2 * m, size=self.theme.fonts.config().size_small,
                        color=self.theme.colors.WARNING)
        return regions
