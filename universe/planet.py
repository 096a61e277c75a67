"""
planet.py
=========
Planet entity and the physical constants the layouts depend on.

Units:
  Radii and distances in km, periods in days, screen sizes in pixels.
  A negative rotation period means retrograde rotation (Venus, Uranus).
"""

from __future__ import annotations
import math
import re
from typing import Optional, Tuple

from core.types import Coordinate


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SUN_RADIUS_KM = 696_340.0
SUN_DIAMETER_KM = 2.0 * SUN_RADIUS_KM
SUN_COLOR = "#FFCC33"

# distance_from_sun arrives in millions of km
DISTANCE_UNIT_KM = 1_000_000.0

# Planets never shrink below this on screen
MIN_VISIBLE_PX = 2

WHITE_HEX = "#FFFFFF"
WHITE_RGB = (255, 255, 255)

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def is_valid_hex_color(value) -> bool:
    """'#FFF', '#ffffff' and '123456' pass; '#12345', 'red' and '' do not."""
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """Parse a validated hex colour. Raises ValueError on anything else."""
    m = _HEX_RE.fullmatch(value) if isinstance(value, str) else None
    if m is None:
        raise ValueError(f"not a hex colour: {value!r}")
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


# ---------------------------------------------------------------------------
# Planet
# ---------------------------------------------------------------------------

class Planet:
    """
    A planet of the catalog.

    Physical attributes are fixed at construction. Only `position` changes,
    once per frame, when a layout places the planet on the canvas.
    """

    __slots__ = ("_name", "_radius", "_distance_from_sun", "_rotation_period",
                 "_orbital_period", "_color", "position")

    def __init__(self, name: str, radius: float, distance_from_sun: float,
                 rotation_period: float, orbital_period: float,
                 color: str = WHITE_HEX):
        """
        Args:
            name: Unique name within the catalog
            radius: Mean radius in km (> 0)
            distance_from_sun: Mean orbital distance in millions of km
            rotation_period: Sidereal day in days, negative if retrograde
            orbital_period: Sidereal year in days (> 0)
            color: Hex colour; invalid values fall back to white
        """
        if radius <= 0:
            raise ValueError(f"{name}: radius must be positive, got {radius}")
        if distance_from_sun < 0:
            raise ValueError(f"{name}: distance_from_sun must be >= 0, got {distance_from_sun}")
        if orbital_period <= 0:
            raise ValueError(f"{name}: orbital_period must be positive, got {orbital_period}")

        if not is_valid_hex_color(color):
            print(f"Warning: planet '{name}' has invalid colour {color!r}, using {WHITE_HEX}")
            color = WHITE_HEX

        self._name = name
        self._radius = float(radius)
        self._distance_from_sun = float(distance_from_sun) * DISTANCE_UNIT_KM
        self._rotation_period = float(rotation_period)
        self._orbital_period = float(orbital_period)
        self._color = color
        self.position: Optional[Coordinate] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def distance_from_sun(self) -> float:
        """Distance in km"""
        return self._distance_from_sun

    @property
    def rotation_period(self) -> float:
        return self._rotation_period

    @property
    def orbital_period(self) -> float:
        return self._orbital_period

    @property
    def color(self) -> str:
        return self._color

    @property
    def is_retrograde(self) -> bool:
        return self._rotation_period < 0

    def diameter(self) -> float:
        return 2.0 * self._radius

    def screen_size(self, km_per_pixel: float) -> int:
        """Diameter in whole pixels at the given scale, never below MIN_VISIBLE_PX."""
        return max(MIN_VISIBLE_PX, int(math.floor(self.diameter() / km_per_pixel)))

    def rgb(self) -> Tuple[int, int, int]:
        try:
            return hex_to_rgb(self._color)
        except ValueError as e:
            print(f"Warning: {self._name}: {e}, drawing white")
            return WHITE_RGB

    def __repr__(self) -> str:
        return (f"Planet({self._name!r}, radius={self._radius}, "
                f"distance_from_sun={self._distance_from_sun:.4g})")
