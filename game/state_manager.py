"""
Session State and Frame Driver

AppState owns everything that lives for the whole session (catalog, loader,
view mode, selection, click edge). StateManager runs one frame at a time:
size the canvas, clear it, let the active screen draw, hit-test the
pointer, and act on at most one click.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, TYPE_CHECKING

from core.types import Coordinate
from universe.catalogue_loader import CatalogLoader, PlanetCatalog
from universe.planet import Planet
from universe.starfield import Starfield
from ui.canvas import CURSOR_DEFAULT, CURSOR_POINTER, Canvas, Viewport
from ui.components import Action, ActionKind, hit_test
from .view_mode import InvalidViewModeError, ViewMode, ViewModeMachine, check_mode

if TYPE_CHECKING:
    from ui.base_screen import BaseScreen


class PressEdge:
    """
    Turns "button is down" samples into single presses.

    update() is True only on the frame the button goes down, so a press held
    across many frames counts once.
    """

    def __init__(self):
        self._was_pressed = False

    def update(self, pressed: bool) -> bool:
        edge = pressed and not self._was_pressed
        self._was_pressed = pressed
        return edge


@dataclass
class AppState:
    """Session state, built once by the application"""
    catalog: PlanetCatalog = field(default_factory=PlanetCatalog)
    loader: Optional[CatalogLoader] = None
    view: Optional[ViewModeMachine] = None
    press: PressEdge = field(default_factory=PressEdge)
    selected: Optional[Planet] = None
    starfield: Starfield = field(default_factory=Starfield)

    def __post_init__(self):
        if self.view is None:
            self.view = ViewModeMachine(is_ready=self.catalog.is_loaded)

    @property
    def mode(self) -> ViewMode:
        return self.view.mode


@dataclass
class FrameResult:
    """What happened during one frame (handy for tests and debugging)"""
    mode: ViewMode
    regions: List = field(default_factory=list)
    hovered: Optional[object] = None
    clicked: bool = False
    action: Optional[Action] = None


class StateManager:
    """
    Frame driver

    Responsibilities:
    - Screen registration (one per ViewMode)
    - Per-frame sizing, clearing and drawing
    - Hover cursor and click dispatch
    """

    def __init__(self, state: AppState):
        """
        Args:
            state: Session state shared with every screen
        """
        self.state = state
        self.screens: Dict[ViewMode, "BaseScreen"] = {}

    def register_screen(self, mode: ViewMode, screen: "BaseScreen"):
        self.screens[check_mode(mode)] = screen
        print(f"Registered screen: {mode.value}")

    def screen_for(self, mode) -> "BaseScreen":
        """
        Raises:
            InvalidViewModeError: mode is not a ViewMode or has no screen
        """
        mode = check_mode(mode)
        screen = self.screens.get(mode)
        if screen is None:
            raise InvalidViewModeError(f"no screen registered for {mode.value}")
        return screen

    def frame(self, canvas: Canvas, viewport: Viewport,
              pointer: Coordinate, pressed: bool) -> FrameResult:
        """
        Run one frame.

        Args:
            canvas: Drawing surface (resized here)
            viewport: Window size and scroll
            pointer: Mouse position in canvas coordinates
            pressed: Left button currently held
        """
        if self.state.loader is not None:
            self.state.loader.poll()

        mode = self.state.mode
        screen = self.screen_for(mode)

        # Size, clear, draw
        w, h = screen.canvas_size(viewport, self.state)
        canvas.resize(w, h)
        canvas.clear()
        regions = screen.draw(canvas, viewport, self.state, pointer)

        # Hover
        hovered = hit_test(regions, pointer)
        actionable = hovered is not None and hovered.action is not None
        canvas.set_cursor(CURSOR_POINTER if actionable else CURSOR_DEFAULT)

        # Click: one action per press
        result = FrameResult(mode=mode, regions=regions, hovered=hovered)
        if self.state.press.update(pressed):
            result.clicked = True
            if actionable:
                self.dispatch(hovered.action)
                result.action = hovered.action
        return result

    def dispatch(self, action: Action):
        """Apply exactly one click action"""
        if action.kind is ActionKind.CHANGE_MODE:
            self.state.view.request(action.mode)
        elif action.kind is ActionKind.SELECT_PLANET:
            self.state.selected = action.planet
            print(f"Selected planet: {action.planet.name}")
        elif action.kind is ActionKind.CLEAR_SELECTION:
            self.state.selected = None
        else:
            raise ValueError(f"unknown action: {action!r}")
