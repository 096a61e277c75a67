from __future__ import annotations
import math

from .types import Coordinate

def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x

def point_in_rectangle(point: Coordinate, x: float, y: float, w: float, h: float) -> bool:
    """True if point lies inside [x, x+w] x [y, y+h], edges included."""
    return x <= point.x <= x + w and y <= point.y <= y + h

def point_in_circle(point: Coordinate, cx: float, cy: float, r: float) -> bool:
    """True if point is no farther than r from (cx, cy)."""
    return math.hypot(point.x - cx, point.y - cy) <= r

def shortest_side(w: float, h: float) -> float:
    return min(w, h)
