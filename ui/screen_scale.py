"""
Scale Screen

Sun and planets stacked top to bottom, all sized with one multiplier.
The canvas grows as tall as the stack needs; the window scrolls over it.
Clicking a planet opens its detail panel.
"""

from typing import List, Optional, Tuple

from core.types import Coordinate
from game.view_mode import ViewMode
from universe.layout import ScaleLayout, compute_scale_layout
from universe.planet import hex_to_rgb
from .base_screen import BaseScreen
from .canvas import Canvas, Viewport
from .components import Action, CircleRegion


class ScaleScreen(BaseScreen):

    def __init__(self):
        super().__init__(ViewMode.SCALE)
        # computed by canvas_size(), drawn by draw() in the same frame
        self.layout: Optional[ScaleLayout] = None

    def compute_layout(self, viewport: Viewport, state) -> Optional[ScaleLayout]:
        canvas_w, _ = self.window_canvas_size(viewport)
        return compute_scale_layout(state.catalog.planets(), viewport.width,
                                    viewport.height, canvas_width=canvas_w)

    def canvas_size(self, viewport, state) -> Tuple[int, int]:
        self.layout = self.compute_layout(viewport, state)
        w, h = self.window_canvas_size(viewport)
        if self.layout is None:
            return (w, h)
        return (w, self.layout.canvas_height)

    def draw(self, canvas: Canvas, viewport: Viewport, state,
             pointer: Optional[Coordinate] = None) -> List:
        self.draw_background(canvas, state)
        layout = self.layout if self.layout is not None else self.compute_layout(viewport, state)

        regions = []
        if layout is None:
            self.draw_loading(canvas, viewport, state)
        else:
            canvas.circle(layout.sun.center, layout.sun.diameter, hex_to_rgb(layout.sun.color))

            label_size = self.theme.fonts.config().size_normal
            for body in layout.planets:
                planet = body.planet
                planet.position = body.center
                canvas.circle(body.center, body.diameter, planet.rgb())
                canvas.text(planet.name, body.center.x + body.radius + self.theme.margin,
                            body.center.y - label_size / 2.0, 160, size=label_size)
                regions.append(CircleRegion(body.center.x, body.center.y, body.radius,
                                            action=Action.select(planet), label=planet.name))

        if state.selected is not None:
            regions.extend(self.draw_selection(canvas, viewport, state, pointer))
        else:
            regions.append(self.draw_menu_button(canvas, viewport, pointer))
        return regions
