"""
Dataset validation, graph building, and nearby-city lookup.

validate_graph_data() is meant to be called speculatively before a
dataset is committed, so it reports problems as a value instead of
raising. build_graph() trusts its input and lets CityGraph errors
propagate.
"""

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterable, Mapping

from bookingmx.domain.city_graph import CityGraph, is_valid_distance
from bookingmx.domain.errors import InvalidInput

log = logging.getLogger(__name__)

DEFAULT_MAX_DISTANCE = 250


@dataclass(frozen=True)
class GraphEdge:
    from_city: str
    to_city: str
    distance: float


@dataclass(frozen=True)
class NearbyCity:
    city: str
    distance: float


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    reason: str | None = None


def _edge_fields(edge: Any) -> tuple[Any, Any, Any]:
    """Return (from, to, distance) for a GraphEdge or a {from, to, distance} mapping."""
    if isinstance(edge, GraphEdge):
        return edge.from_city, edge.to_city, edge.distance
    if isinstance(edge, Mapping):
        return edge.get("from"), edge.get("to"), edge.get("distance")
    return None, None, None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def validate_graph_data(data: Mapping[str, Any]) -> ValidationResult:
    """Check a {cities, edges} dataset. Never raises; stops at the first problem."""
    cities = data.get("cities") if isinstance(data, Mapping) else None
    edges = data.get("edges") if isinstance(data, Mapping) else None

    if not _is_sequence(cities) or not _is_sequence(edges):
        return ValidationResult(False, "cities/edges must be arrays")

    try:
        city_set = set(cities)
    except TypeError:
        # Unhashable entries can't be city names.
        return ValidationResult(False, "invalid city entry")

    if len(city_set) != len(cities):
        return ValidationResult(False, "duplicate cities")

    for city in cities:
        if not isinstance(city, str) or not city.strip():
            return ValidationResult(False, "invalid city entry")

    for edge in edges:
        from_city, to_city, distance = _edge_fields(edge)
        endpoints = (from_city, to_city)
        if not all(isinstance(c, str) and c in city_set for c in endpoints):
            return ValidationResult(False, "edge references unknown city")
        if not is_valid_distance(distance):
            return ValidationResult(False, "invalid distance")

    return ValidationResult(True)


def build_graph(cities: Iterable[str], edges: Iterable[Any]) -> CityGraph:
    """Add every city, then every edge, in input order."""
    graph = CityGraph()
    for city in cities:
        graph.add_city(city)
    for edge in edges:
        graph.add_edge(*_edge_fields(edge))
    log.debug("built graph with %d cities", len(graph.cities()))
    return graph


def get_nearby_cities(
    graph: CityGraph,
    destination: str,
    max_distance: float = DEFAULT_MAX_DISTANCE,
) -> list[NearbyCity]:
    """
    Direct neighbors of destination within max_distance, closest first.

    Only one hop is considered; no paths through intermediate cities.
    Ties keep insertion order. An unknown destination yields [].
    max_distance must be a real number (infinity means no limit).
    """
    if not isinstance(graph, CityGraph):
        raise InvalidInput("graph must be CityGraph")
    if isinstance(max_distance, bool) or not isinstance(max_distance, Real) or math.isnan(max_distance):
        raise InvalidInput("invalid max distance")
    if not graph.has_city(destination):
        return []

    nearby = [n for n in graph.neighbors(destination) if n.distance <= max_distance]
    nearby.sort(key=lambda n: n.distance)
    return [NearbyCity(city=n.city, distance=n.distance) for n in nearby]


SAMPLE_DATA: dict[str, list] = {
    "cities": [
        "Guadalajara", "Tlaquepaque", "Zapopan", "Tepatitlán",
        "Lagos de Moreno", "Tala", "Tequila",
    ],
    "edges": [
        GraphEdge("Guadalajara", "Zapopan", 12),
        GraphEdge("Guadalajara", "Tlaquepaque", 10),
        GraphEdge("Guadalajara", "Tepatitlán", 78),
        GraphEdge("Guadalajara", "Tequila", 60),
        GraphEdge("Zapopan", "Tala", 35),
        GraphEdge("Tepatitlán", "Lagos de Moreno", 85),
    ],
}
