"""
Shared fixtures. pygame runs headless (dummy video/audio drivers).
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
import pygame

from game.state_manager import AppState, StateManager
from game.view_mode import ViewMode
from ui.canvas import Canvas, Viewport
from ui.screen_credits import CreditsScreen
from ui.screen_distance import DistanceScreen
from ui.screen_main_menu import MainMenuScreen
from ui.screen_scale import ScaleScreen
from universe.catalogue_loader import PlanetCatalog
from universe.planet import Planet
from universe.starfield import Starfield


# name, radius km, distance 10^6 km, rotation d, orbit d, colour
PLANET_ROWS = [
    ("Mercury", 2439.7, 57.9, 58.646, 87.969, "#B1ADAD"),
    ("Venus", 6051.8, 108.2, -243.025, 224.701, "#E3BB76"),
    ("Earth", 6371.0, 149.6, 0.997, 365.256, "#2F6A9F"),
    ("Jupiter", 69911.0, 778.6, 0.414, 4332.59, "#C88B3A"),
]


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def planets():
    return [Planet(*row) for row in PLANET_ROWS]


@pytest.fixture
def catalog(planets):
    cat = PlanetCatalog()
    cat.populate(planets)
    return cat


@pytest.fixture
def state(catalog):
    return AppState(catalog=catalog, starfield=Starfield(max_count=50, seed=1))


@pytest.fixture
def driver(state):
    manager = StateManager(state)
    manager.register_screen(ViewMode.UNINITIALIZED, MainMenuScreen())
    manager.register_screen(ViewMode.SCALE, ScaleScreen())
    manager.register_screen(ViewMode.DISTANCE, DistanceScreen())
    manager.register_screen(ViewMode.CREDITS, CreditsScreen())
    return manager


@pytest.fixture
def viewport():
    return Viewport(800, 600)


@pytest.fixture
def canvas():
    return Canvas(800, 600)
