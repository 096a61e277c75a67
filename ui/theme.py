"""
UI Theme - Deep Space Style

Defines colors, fonts, and text helpers shared by every view.
"""

import pygame
from typing import Dict, List
from dataclasses import dataclass


class Colors:
    """
    Color palette

    Near-black sky with soft white text and pale blue interactive boxes.
    """

    # Background
    BG_SPACE = (4, 6, 18)
    BG_PANEL = (14, 20, 40)
    BG_BOX = (20, 32, 64)
    BG_BOX_HOVER = (36, 56, 104)

    # Foreground
    FG_TEXT = (235, 235, 245)
    FG_DIM = (150, 155, 175)
    FG_TITLE = (255, 214, 110)

    # Borders
    BORDER_NORMAL = (120, 150, 220)
    BORDER_FOCUS = (190, 215, 255)

    # Orbits in the distance view
    ORBIT = (60, 70, 100)

    WARNING = (255, 200, 60)


@dataclass
class FontConfig:
    """Font configuration"""
    family: str = "Verdana"
    size_title: int = 40
    size_large: int = 24
    size_normal: int = 18
    size_small: int = 14


class Fonts:
    """
    Font manager

    Loads fonts on demand and caches them by pixel size.
    """

    _initialized = False
    _family = None
    _cache: Dict[int, pygame.font.Font] = {}
    _config = FontConfig()

    @classmethod
    def initialize(cls, config: FontConfig = None):
        """
        Initialize fonts

        Args:
            config: Font configuration (optional)
        """
        if config is not None:
            cls._config = config

        pygame.font.init()
        cls._cache = {}

        # Pick the first installed family; pygame's bundled font otherwise
        cls._family = None
        for family in (cls._config.family, "DejaVu Sans", "Arial"):
            if pygame.font.match_font(family):
                cls._family = family
                break

        cls._initialized = True

    @classmethod
    def config(cls) -> FontConfig:
        return cls._config

    @classmethod
    def sized(cls, size: int) -> pygame.font.Font:
        """Font at an arbitrary pixel size"""
        if not cls._initialized:
            cls.initialize()

        size = max(6, int(size))
        font = cls._cache.get(size)
        if font is None:
            if cls._family is not None:
                font = pygame.font.SysFont(cls._family, size)
            else:
                font = pygame.font.Font(None, size)
            cls._cache[size] = font
        return font

    @classmethod
    def large(cls) -> pygame.font.Font:
        return cls.sized(cls._config.size_large)

    @classmethod
    def normal(cls) -> pygame.font.Font:
        return cls.sized(cls._config.size_normal)


def wrap_text(font: pygame.font.Font, text: str, max_width: int) -> List[str]:
    """
    Split text into lines no wider than max_width.

    Explicit newlines are kept. A single word wider than max_width gets a
    line of its own rather than being cut.
    """
    lines: List[str] = []
    for paragraph in text.split("\n"):
        words = paragraph.split()
        if not words:
            lines.append("")
            continue
        line = words[0]
        for word in words[1:]:
            candidate = f"{line} {word}"
            if font.size(candidate)[0] <= max_width:
                line = candidate
            else:
                lines.append(line)
                line = word
        lines.append(line)
    return lines


class Theme:
    """
    Complete theme configuration

    Bundles colors, fonts, and spacing into single object.
    """

    def __init__(self):
        """Initialize theme"""
        self.colors = Colors()
        self.fonts = Fonts()

        # Spacing and sizing
        self.padding = 12
        self.margin = 16
        self.border_width = 2
        self.line_spacing = 4

        # Menu boxes
        self.box_width = 240
        self.box_height = 64
        self.box_gap = 24


# Global theme instance
_theme = None

def get_theme() -> Theme:
    """Get global theme instance"""
    global _theme
    if _theme is None:
        _theme = Theme()
        _theme.fonts.initialize()
    return _theme
