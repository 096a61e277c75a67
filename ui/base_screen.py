"""
Base Screen Class

Abstract base class for the per-mode layouts.
Each frame the driver asks the active screen how big the canvas must be,
then lets it draw and collects the interactive regions it drew.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple, TYPE_CHECKING

from core.config import MIN_CANVAS_WIDTH
from core.types import Coordinate
from game.view_mode import ViewMode
from .canvas import Canvas, Viewport
from .components import Action, RectRegion, draw_box, draw_planet_details
from .theme import get_theme

if TYPE_CHECKING:
    from game.state_manager import AppState


class BaseScreen(ABC):
    """
    Abstract base class for all screens

    One screen per ViewMode. Screens hold no session state of their own;
    everything they show comes from the AppState passed in.
    """

    def __init__(self, mode: ViewMode):
        """
        Args:
            mode: The ViewMode this screen renders
        """
        self.mode = mode
        self.theme = get_theme()

    @abstractmethod
    def canvas_size(self, viewport: Viewport, state: "AppState") -> Tuple[int, int]:
        """
        Sizing policy for this mode

        Returns:
            (width, height) the canvas must have this frame
        """

    @abstractmethod
    def draw(self, canvas: Canvas, viewport: Viewport, state: "AppState",
             pointer: Optional[Coordinate] = None) -> List:
        """
        Draw the frame

        Args:
            canvas: Already resized and cleared
            viewport: Window size and scroll position
            state: Application state
            pointer: Mouse position in canvas coordinates (for hover)

        Returns:
            Interactive regions in drawing order (last = topmost)
        """

    # Utility methods (available to all screens)

    @staticmethod
    def window_canvas_size(viewport: Viewport) -> Tuple[int, int]:
        """Full window, with the width floor applied"""
        return (max(viewport.width, MIN_CANVAS_WIDTH), viewport.height)

    def draw_background(self, canvas: Canvas, state: "AppState"):
        for star in state.starfield.stars_for(canvas.width, canvas.height):
            canvas.circle(Coordinate(star.x, star.y), star.size, star.color)

    def draw_title(self, canvas: Canvas, y: float, title: str, subtitle: str = "") -> float:
        """
        Centred title block

        Returns:
            y just below the block
        """
        m = self.theme.margin
        w = canvas.width - 2 * m
        sizes = self.theme.fonts.config()
        y += canvas.text(title, m, y, w, size=sizes.size_title, color=self.theme.colors.FG_TITLE)
        if subtitle:
            y += canvas.text(subtitle, m, y, w, size=sizes.size_normal, color=self.theme.colors.FG_DIM)
        return y

    def draw_menu_button(self, canvas: Canvas, viewport: Viewport,
                         pointer: Optional[Coordinate]) -> RectRegion:
        """Small "Menu" box pinned to the visible top-left corner"""
        m = self.theme.margin
        x, y, w, h = viewport.scroll_x + m, viewport.scroll_y + m, 120, 44
        hovered = pointer is not None and RectRegion(x, y, w, h).contains(pointer)
        box = draw_box(canvas, x, y, w, h, "Menu", hovered=hovered, size=18)
        box.action = Action.change_mode(ViewMode.UNINITIALIZED)
        return box

    def draw_selection(self, canvas: Canvas, viewport: Viewport, state: "AppState",
                       pointer: Optional[Coordinate]) -> List[RectRegion]:
        """Detail panel for the selected planet, pinned to the visible area"""
        m = self.theme.margin
        w = min(480, viewport.width - 2 * m)
        x = viewport.scroll_x + (viewport.width - w) / 2.0
        y = viewport.scroll_y + m
        return draw_planet_details(canvas, state.selected, x, y, w, hover=pointer)

    def draw_loading(self, canvas: Canvas, viewport: Viewport, state: "AppState"):
        text = "Loading planet data..." if not state.catalog.is_loaded() else "No planet data available."
        m = self.theme.margin
        canvas.text(text, m, viewport.scroll_y + viewport.height / 2.0,
                    canvas.width - 2 * m, color=self.theme.colors.WARNING)
