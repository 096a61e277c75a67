"""
Background starfield

Random stars sprinkled behind every view. Generated from a fixed seed for
the current canvas size and cached, so consecutive frames show the same sky.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np


# Stars per square pixel before the count cap applies
STAR_DENSITY = 1.0 / 2500.0

_STAR_TINTS = np.array([
    (255, 255, 255),
    (180, 200, 255),   # hot
    (255, 240, 180),   # sun-like
    (255, 200, 120),   # cool
], dtype=np.int32)


@dataclass(frozen=True, slots=True)
class Star:
    x: float
    y: float
    size: float
    color: Tuple[int, int, int]


def generate_stars(width: int, height: int, max_count: int, seed: int = 0) -> List[Star]:
    """
    Scatter stars over a width x height area.

    Count follows STAR_DENSITY, capped at max_count.
    """
    if width <= 0 or height <= 0 or max_count <= 0:
        return []

    n = min(max_count, int(width * height * STAR_DENSITY))
    rng = np.random.default_rng(seed)
    xs = rng.uniform(0, width, n)
    ys = rng.uniform(0, height, n)
    sizes = rng.choice([1.0, 1.0, 1.0, 1.5, 2.0], n)
    brightness = rng.uniform(0.35, 1.0, n)
    tints = _STAR_TINTS[rng.integers(0, len(_STAR_TINTS), n)]
    cols = np.clip(tints * brightness[:, None], 0, 255).astype(np.int32)

    return [Star(float(x), float(y), float(s), (int(c[0]), int(c[1]), int(c[2])))
            for x, y, s, c in zip(xs, ys, sizes, cols)]


class Starfield:
    """Caches one star list per canvas size"""

    def __init__(self, max_count: int = 400, seed: int = 0):
        self.max_count = max_count
        self.seed = seed
        self._size: Optional[Tuple[int, int]] = None
        self._stars: List[Star] = []

    def stars_for(self, width: int, height: int) -> List[Star]:
        if self._size != (width, height):
            self._size = (width, height)
            self._stars = generate_stars(width, height, self.max_count, self.seed)
        return self._stars
