"""
Distance Screen

Sun in the middle of the window, every planet on its own orbit ring.
Orbit radii are to scale with each other; marker sizes only keep the
planets' relative sizes. Clicking a marker opens the detail panel.
"""

from typing import List, Optional, Tuple

from core.types import Coordinate
from game.view_mode import ViewMode
from universe.layout import DistanceLayout, compute_distance_layout
from universe.planet import hex_to_rgb
from .base_screen import BaseScreen
from .canvas import Canvas, Viewport
from .components import Action, CircleRegion


class DistanceScreen(BaseScreen):

    def __init__(self):
        super().__init__(ViewMode.DISTANCE)
        self.layout: Optional[DistanceLayout] = None

    def compute_layout(self, viewport: Viewport, state) -> Optional[DistanceLayout]:
        canvas_w, _ = self.window_canvas_size(viewport)
        return compute_distance_layout(state.catalog.planets(), viewport.width,
                                       viewport.height, canvas_width=canvas_w)

    def canvas_size(self, viewport, state) -> Tuple[int, int]:
        self.layout = self.compute_layout(viewport, state)
        return self.window_canvas_size(viewport)

    def draw(self, canvas: Canvas, viewport: Viewport, state,
             pointer: Optional[Coordinate] = None) -> List:
        self.draw_background(canvas, state)
        layout = self.layout if self.layout is not None else self.compute_layout(viewport, state)

        regions = []
        if layout is None:
            self.draw_loading(canvas, viewport, state)
        else:
            for r in layout.orbit_radii:
                canvas.ring(layout.center, r, self.theme.colors.ORBIT)
            canvas.circle(layout.sun.center, layout.sun.diameter, hex_to_rgb(layout.sun.color))

            label_size = self.theme.fonts.config().size_small
            for body in layout.planets:
                planet = body.planet
                planet.position = body.center
                canvas.circle(body.center, body.diameter, planet.rgb())
                canvas.text(planet.name, body.center.x + body.radius + 4,
                            body.center.y - label_size / 2.0, 100, size=label_size,
                            color=self.theme.colors.FG_DIM)
                regions.append(CircleRegion(body.center.x, body.center.y, body.radius,
                                            action=Action.select(planet), label=planet.name))

        if state.selected is not None:
            regions.extend(self.draw_selection(canvas, viewport, state, pointer))
        else:
            regions.append(self.draw_menu_button(canvas, viewport, pointer))
        return regions
