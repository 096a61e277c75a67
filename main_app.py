"""
Solar Scale - Main Application

Window, frame loop and startup order:
- load the planet list in the background
- menu, scale, distance and credits screens
- canvas taller than the window scrolls with the mouse wheel
"""

import argparse
import pygame
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from core.config import AppConfig
from game.state_manager import AppState, StateManager
from game.view_mode import ViewMode, ViewModeMachine
from ui.canvas import CURSOR_POINTER, Canvas, Viewport
from ui.screen_main_menu import MainMenuScreen
from ui.screen_scale import ScaleScreen
from ui.screen_distance import DistanceScreen
from ui.screen_credits import CreditsScreen
from ui.theme import get_theme
from universe.catalogue_loader import CatalogLoader, PlanetCatalog
from universe.starfield import Starfield


class SolarScaleApp:
    """
    Main application

    Owns the window, the session state and the frame driver.
    """

    def __init__(self, config: AppConfig = None):
        """Initialize application"""
        self.config = config or AppConfig()

        # Initialize Pygame
        pygame.init()
        self.window = pygame.display.set_mode((self.config.width, self.config.height), pygame.RESIZABLE)
        pygame.display.set_caption(self.config.title)
        self.clock = pygame.time.Clock()

        # Initialize theme
        self.theme = get_theme()

        # Session state, in dependency order
        catalog = PlanetCatalog()
        self.state = AppState(
            catalog=catalog,
            loader=CatalogLoader(catalog, self.config.source, timeout=self.config.http_timeout_s),
            view=ViewModeMachine(is_ready=catalog.is_loaded),
            starfield=Starfield(self.config.star_count, self.config.star_seed),
        )

        # Frame driver and screens
        self.state_manager = StateManager(self.state)
        self._register_screens()

        self.viewport = Viewport(self.config.width, self.config.height)
        self.canvas = Canvas(self.config.width, self.config.height)
        self._cursor = None

        self.state.loader.start()

        self.running = True
        print(f"\n{self.config.title}")
        print("=" * 60)
        print("Initialized successfully!")
        print("=" * 60)

    def _register_screens(self):
        """Register one screen per view mode"""
        self.state_manager.register_screen(ViewMode.UNINITIALIZED, MainMenuScreen())
        self.state_manager.register_screen(ViewMode.SCALE, ScaleScreen())
        self.state_manager.register_screen(ViewMode.DISTANCE, DistanceScreen())
        self.state_manager.register_screen(ViewMode.CREDITS, CreditsScreen())

    def run(self):
        """Main loop"""
        print("\nStarting main loop...")

        while self.running:
            self.clock.tick(self.config.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False

                # Handle window resize
                elif event.type == pygame.VIDEORESIZE:
                    self.handle_resize(event.w, event.h)

                elif event.type == pygame.MOUSEWHEEL:
                    self.viewport.scroll_by(-event.x * self.config.scroll_step,
                                            -event.y * self.config.scroll_step)

            self.viewport.clamp_to(*self.canvas.size)
            pointer = self.viewport.to_canvas(pygame.mouse.get_pos())
            pressed = pygame.mouse.get_pressed()[0]

            self.state_manager.frame(self.canvas, self.viewport, pointer, pressed)

            # Canvas may have changed size this frame
            self.viewport.clamp_to(*self.canvas.size)
            self.window.fill(self.theme.colors.BG_SPACE)
            self.window.blit(self.canvas.surface, (-self.viewport.scroll_x, -self.viewport.scroll_y))
            self.apply_cursor(self.canvas.cursor)

            pygame.display.flip()

        # Cleanup
        self.quit()

    def apply_cursor(self, style: str):
        if style == self._cursor:
            return
        self._cursor = style
        if style == CURSOR_POINTER:
            pygame.mouse.set_cursor(pygame.SYSTEM_CURSOR_HAND)
        else:
            pygame.mouse.set_cursor(pygame.SYSTEM_CURSOR_ARROW)

    def handle_resize(self, width: int, height: int):
        """Handle window resize event"""
        self.window = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.viewport.resize(width, height)
        print(f"Window resized to: {width}x{height}")

    def quit(self):
        """Cleanup and quit"""
        print("\nShutting down...")
        pygame.quit()
        sys.exit(0)


def parse_args(argv=None) -> AppConfig:
    defaults = AppConfig()
    parser = argparse.ArgumentParser(description="Planets to scale and to distance")
    parser.add_argument("--source", default=defaults.source,
                        help="planet list: https:// URL or JSON file (default: bundled data)")
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--fps", type=int, default=defaults.fps)
    parser.add_argument("--stars", type=int, default=defaults.star_count,
                        help="maximum number of background stars")
    args = parser.parse_args(argv)

    return AppConfig(width=args.width, height=args.height, fps=args.fps,
                     source=args.source, star_count=args.stars)


def main(argv=None):
    """Entry point"""
    try:
        app = SolarScaleApp(parse_args(argv))
        app.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        pygame.quit()
        sys.exit(0)
    except Exception as e:
        print(f"\n\nFATAL ERROR: {e}")
        import traceback
        traceback.print_exc()
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
