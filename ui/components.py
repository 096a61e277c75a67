"""
UI Components - Interactive regions and reusable drawings

- Action: what a click on a region does (exactly one thing)
- RectRegion / CircleRegion: clickable shapes drawn this frame
- draw_box: labelled menu / "Go Back" box
- draw_planet_details: detail panel for the selected planet
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, TYPE_CHECKING

from core.coords import point_in_circle, point_in_rectangle
from core.types import Coordinate
from game.view_mode import ViewMode
from .canvas import Canvas
from .theme import get_theme, wrap_text

if TYPE_CHECKING:
    from universe.planet import Planet


class ActionKind(Enum):
    CHANGE_MODE = "change_mode"
    SELECT_PLANET = "select_planet"
    CLEAR_SELECTION = "clear_selection"


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    mode: Optional[ViewMode] = None
    planet: Optional["Planet"] = None

    @staticmethod
    def change_mode(mode: ViewMode) -> "Action":
        return Action(ActionKind.CHANGE_MODE, mode=mode)

    @staticmethod
    def select(planet: "Planet") -> "Action":
        return Action(ActionKind.SELECT_PLANET, planet=planet)

    @staticmethod
    def clear_selection() -> "Action":
        return Action(ActionKind.CLEAR_SELECTION)


@dataclass
class RectRegion:
    """Axis-aligned clickable box. action=None blocks clicks without doing anything."""
    x: float
    y: float
    w: float
    h: float
    action: Optional[Action] = None
    label: str = ""

    def contains(self, point: Coordinate) -> bool:
        return point_in_rectangle(point, self.x, self.y, self.w, self.h)


@dataclass
class CircleRegion:
    cx: float
    cy: float
    r: float
    action: Optional[Action] = None
    label: str = ""

    def contains(self, point: Coordinate) -> bool:
        return point_in_circle(point, self.cx, self.cy, self.r)


def hit_test(regions: Sequence, point: Coordinate):
    """
    Topmost region under the point (the one drawn last), or None.
    """
    for region in reversed(regions):
        if region.contains(point):
            return region
    return None


def draw_box(canvas: Canvas, x: float, y: float, w: float, h: float,
             label: str, hovered: bool = False, size: int = 20) -> RectRegion:
    """
    Draw a labelled box and return its (inert) region; callers set the action.
    """
    theme = get_theme()
    fill = theme.colors.BG_BOX_HOVER if hovered else theme.colors.BG_BOX
    stroke = theme.colors.BORDER_FOCUS if hovered else theme.colors.BORDER_NORMAL
    canvas.rect(x, y, w, h, fill=fill, stroke=stroke, weight=theme.border_width)
    canvas.text(label, x + theme.padding, y, w - 2 * theme.padding, h, size=size)
    return RectRegion(x, y, w, h, label=label)


def format_days(days: float) -> str:
    if abs(days) < 2.0:
        return f"{abs(days) * 24.0:.1f} hours"
    return f"{abs(days):,.1f} days"


def _block_height(font, text: str, width: float) -> float:
    line_h = font.get_linesize() + get_theme().line_spacing
    return line_h * len(wrap_text(font, text, max(1, int(width))))


def planet_detail_lines(planet: "Planet") -> List[str]:
    """Human-readable facts shown when a planet is selected"""
    rotation = format_days(planet.rotation_period)
    if planet.is_retrograde:
        rotation += " (retrograde)"
    return [
        planet.name,
        f"Radius: {planet.radius:,.1f} km",
        f"Diameter: {planet.diameter():,.1f} km",
        f"Distance from the Sun: {planet.distance_from_sun / 1e6:,.1f} million km",
        f"Day length: {rotation}",
        f"Year length: {format_days(planet.orbital_period)}",
    ]


def draw_planet_details(canvas: Canvas, planet: "Planet", x: float, y: float,
                        w: float, hover: Optional[Coordinate] = None) -> List[RectRegion]:
    """
    Detail panel with a "Go Back" box underneath the facts.

    Returns:
        [panel blocker, Go Back region], in drawing order
    """
    theme = get_theme()
    pad = theme.padding
    lines = planet_detail_lines(planet)

    sizes = theme.fonts.config()
    text_w = w - 2 * pad
    title_h = _block_height(theme.fonts.large(), lines[0], text_w)
    body_h = sum(_block_height(theme.fonts.normal(), line, text_w) for line in lines[1:])
    box_w, box_h = 160, 48
    h = pad + title_h + pad + body_h + pad + box_h + pad

    canvas.rect(x, y, w, h, fill=theme.colors.BG_PANEL,
                stroke=planet.rgb(), weight=theme.border_width)
    panel = RectRegion(x, y, w, h, action=None, label="details")

    ty = y + pad
    ty += canvas.text(lines[0], x + pad, ty, text_w,
                      size=sizes.size_large, color=planet.rgb())
    ty += pad
    for line in lines[1:]:
        ty += canvas.text(line, x + pad, ty, text_w,
                          size=sizes.size_normal)
    ty += pad

    bx = x + (w - box_w) / 2.0
    probe = RectRegion(bx, ty, box_w, box_h)
    hovered = hover is not None and probe.contains(hover)
    back = draw_box(canvas, bx, ty, box_w, box_h, "Go Back", hovered=hovered)
    back.action = Action.clear_selection()
    return [panel, back]
