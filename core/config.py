"""
Application configuration

Window, timing and data-source settings. Defaults live here; main_app.main()
overrides them from the command line.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path


# Bundled planet list, used when no --source is given
DEFAULT_CATALOG = Path(__file__).resolve().parent.parent / "universe" / "data" / "planets.json"

# Narrower canvases wrap the menu and credits text badly
MIN_CANVAS_WIDTH = 688

# Credits screen never gets shorter than this
CREDITS_MIN_HEIGHT = 600


@dataclass
class AppConfig:
    """Runtime settings for SolarScaleApp"""
    width: int = 1280
    height: int = 800
    fps: int = 60
    title: str = "Solar Scale"

    # Planet list: https:// URL or local JSON path
    source: str = str(DEFAULT_CATALOG)
    http_timeout_s: float = 10.0

    # Background
    star_count: int = 400
    star_seed: int = 1977

    # Pixels per mouse-wheel notch
    scroll_step: int = 60
