import math
from typing import NamedTuple


class City(NamedTuple):
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def distance_to(self, other: "City") -> float:
        return distance(self, other)


def distance(a: City, b: City) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)
