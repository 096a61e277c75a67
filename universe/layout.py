"""
layout.py
=========
Screen layouts for the two planet views.

Scale view:
  Bodies stacked top to bottom, sized relative to each other. One linear
  multiplier (px per km) makes the largest planet 90% of the short side;
  the sun uses the same multiplier, so only its lower edge fits on screen.

Distance view:
  Sun at the centre, each planet on its own orbit. Orbits start just outside
  the sun and the largest marker; the multiplier makes the farthest orbit's
  diameter 90% of the short side. Markers keep the planets' relative sizes
  at a much smaller scale, with the 2 px floor.

"Short side" is always min(window width, window height).
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from core.coords import shortest_side
from core.types import Coordinate
from .planet import Planet, SUN_DIAMETER_KM, SUN_COLOR, MIN_VISIBLE_PX


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Largest body (scale) / farthest orbit (distance) as a fraction of the short side
TARGET_FRACTION = 0.9

# Gap between consecutive bodies in the scale view
SPACER_FRACTION = 0.1

# Distance view marker sizes, fractions of the short side
DISTANCE_MARKER_FRACTION = 0.05
DISTANCE_SUN_FRACTION = 0.04

GOLDEN_ANGLE_RAD = math.pi * (3.0 - math.sqrt(5.0))


@dataclass(slots=True)
class BodyPlacement:
    """Where one body goes on the canvas this frame"""
    name: str
    center: Coordinate
    diameter: float            # rendered, px
    color: str
    planet: Optional[Planet] = None   # None for the sun

    @property
    def radius(self) -> float:
        return self.diameter / 2.0

    @property
    def top(self) -> float:
        return self.center.y - self.radius

    @property
    def bottom(self) -> float:
        return self.center.y + self.radius


@dataclass(slots=True)
class ScaleLayout:
    multiplier: float          # px per km
    spacer: float
    sun: BodyPlacement
    planets: List[BodyPlacement] = field(default_factory=list)
    required_height: float = 0.0

    @property
    def canvas_height(self) -> int:
        return int(math.ceil(self.required_height))


@dataclass(slots=True)
class DistanceLayout:
    multiplier: float          # px per km of orbital distance
    marker_km_per_pixel: float
    center: Coordinate
    inner_radius: float        # orbit radius of a body at distance 0
    sun: BodyPlacement
    planets: List[BodyPlacement] = field(default_factory=list)
    orbit_radii: List[float] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Scale view
# ---------------------------------------------------------------------------

def scale_multiplier(planets: Sequence[Planet], screen_width: float,
                     screen_height: float) -> Optional[float]:
    """px per km that makes the largest planet 90% of the short side"""
    if not planets:
        return None
    largest = max(p.diameter() for p in planets)
    return TARGET_FRACTION * shortest_side(screen_width, screen_height) / largest


def compute_scale_layout(planets: Sequence[Planet], screen_width: float,
                         screen_height: float,
                         canvas_width: Optional[float] = None) -> Optional[ScaleLayout]:
    """
    Lay the sun and the planets out top to bottom.

    The height accounting and the placement share one running offset, so
    required_height is exactly the last planet's bottom edge plus a spacer.

    Args:
        planets: Planets in catalog order
        screen_width, screen_height: Window size the layout must suit
        canvas_width: Width of the canvas to centre on (default: screen width)

    Returns:
        ScaleLayout, or None while the catalog is empty
    """
    m = scale_multiplier(planets, screen_width, screen_height)
    if m is None:
        return None

    cx = (canvas_width if canvas_width is not None else screen_width) / 2.0
    spacer = SPACER_FRACTION * shortest_side(screen_width, screen_height)

    sun_d = SUN_DIAMETER_KM * m
    sun = BodyPlacement("Sun", Coordinate(cx, 0.0), sun_d, SUN_COLOR)

    offset = sun.radius + spacer
    placed: List[BodyPlacement] = []
    for p in planets:
        d = max(float(MIN_VISIBLE_PX), p.diameter() * m)
        placed.append(BodyPlacement(p.name, Coordinate(cx, offset + d / 2.0), d, p.color, p))
        offset += d + spacer

    return ScaleLayout(multiplier=m, spacer=spacer, sun=sun,
                       planets=placed, required_height=offset)


# ---------------------------------------------------------------------------
# Distance view
# ---------------------------------------------------------------------------

def compute_distance_layout(planets: Sequence[Planet], screen_width: float,
                            screen_height: float,
                            canvas_width: Optional[float] = None) -> Optional[DistanceLayout]:
    """
    Place planets on concentric orbits around a centred sun.

    Orbits start outside the sun and the largest marker, so no planet is
    drawn under the sun disk:

        radius = inner_radius + distance_from_sun * multiplier

    and the multiplier puts the farthest orbit at 90% of the short side
    (diameter). Orbit spacing stays proportional to distance.

    Returns:
        DistanceLayout, or None while the catalog is empty
    """
    if not planets:
        return None

    side = shortest_side(screen_width, screen_height)
    cx = (canvas_width if canvas_width is not None else screen_width) / 2.0
    cy = screen_height / 2.0
    center = Coordinate(cx, cy)

    largest = max(p.diameter() for p in planets)
    marker_kmpp = largest / (DISTANCE_MARKER_FRACTION * side)
    markers = [float(p.screen_size(marker_kmpp)) for p in planets]

    sun = BodyPlacement("Sun", center, max(float(MIN_VISIBLE_PX), DISTANCE_SUN_FRACTION * side), SUN_COLOR)
    inner = sun.radius + max(markers) / 2.0 + MIN_VISIBLE_PX

    farthest = max(p.distance_from_sun for p in planets)
    span = max(0.0, TARGET_FRACTION * side / 2.0 - inner)
    # all planets at distance 0: everything sits on the innermost ring
    m = span / farthest if farthest > 0 else 0.0

    placed: List[BodyPlacement] = []
    radii: List[float] = []
    for i, (p, d) in enumerate(zip(planets, markers)):
        r = inner + p.distance_from_sun * m
        a = i * GOLDEN_ANGLE_RAD
        pos = Coordinate(cx + r * math.cos(a), cy + r * math.sin(a))
        placed.append(BodyPlacement(p.name, pos, d, p.color, p))
        radii.append(r)

    return DistanceLayout(multiplier=m, marker_km_per_pixel=marker_kmpp, center=center,
                          inner_radius=inner, sun=sun, planets=placed, orbit_radii=radii)
