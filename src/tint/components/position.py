from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class Position:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)
