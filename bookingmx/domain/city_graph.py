"""
Undirected, weighted adjacency list keyed by city name.

Edges are stored on both endpoints. Nothing is ever removed; a graph
is built fresh for each dataset.
"""

import math
from dataclasses import dataclass
from numbers import Real

from bookingmx.domain.errors import InvalidInput


@dataclass(frozen=True)
class Neighbor:
    """One adjacency entry: the city on the other end and the edge length."""
    city: str
    distance: float


def is_valid_distance(value: object) -> bool:
    """True for finite, non-negative real numbers. Booleans don't count."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value >= 0


class CityGraph:

    def __init__(self):
        self._adj: dict[str, list[Neighbor]] = {}

    def add_city(self, name: str) -> None:
        """Add a city. Adding one that already exists does nothing."""
        if not isinstance(name, str) or not name:
            raise InvalidInput("invalid city name")
        self._adj.setdefault(name, [])

    def add_edge(self, from_city: str, to_city: str, distance: float) -> None:
        """Connect two known cities. Duplicate edges accumulate."""
        if not self.has_city(from_city) or not self.has_city(to_city):
            raise InvalidInput("unknown city")
        if not is_valid_distance(distance):
            raise InvalidInput("invalid distance")

        self._adj[from_city].append(Neighbor(to_city, distance))
        self._adj[to_city].append(Neighbor(from_city, distance))

    def neighbors(self, city: str) -> list[Neighbor]:
        """Return a copy of the city's adjacency list."""
        if not self.has_city(city):
            raise InvalidInput("unknown city")
        return list(self._adj[city])

    def has_city(self, name: object) -> bool:
        return isinstance(name, str) and name in self._adj

    def cities(self) -> list[str]:
        """City names in insertion order."""
        return list(self._adj)
