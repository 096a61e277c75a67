from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class Coordinate:
    # pixels; used for screen positions and pointer samples alike
    x: float
    y: float

    def as_int(self) -> tuple[int, int]:
        return (int(round(self.x)), int(round(self.y)))
