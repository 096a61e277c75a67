"""
UI Module - Drawing surface, components and per-mode screens
"""
from .theme import get_theme, Colors, Fonts
from .canvas import Canvas, Viewport
from .base_screen import BaseScreen
from .components import Action, ActionKind, RectRegion, CircleRegion, hit_test
from .screen_main_menu import MainMenuScreen
from .screen_scale import ScaleScreen
from .screen_distance import DistanceScreen
from .screen_credits import CreditsScreen

__all__ = [
    "get_theme", "Colors", "Fonts",
    "Canvas", "Viewport",
    "BaseScreen",
    "Action", "ActionKind", "RectRegion", "CircleRegion", "hit_test",
    "MainMenuScreen", "ScaleScreen", "DistanceScreen", "CreditsScreen",
]
