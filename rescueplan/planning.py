"""Choosing cities in which to stockpile disaster supplies.

A road network maps each city name to the set of cities it has a direct road
to. A city is covered when it holds supplies itself or is adjacent to a city
that does.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import AbstractSet

RoadNetwork = Mapping[str, Iterable[str]]


def is_covered(
    city: str,
    road_network: RoadNetwork,
    supply_locations: AbstractSet[str],
) -> bool:
    """Return whether ``city`` holds supplies or neighbours a city that does."""
    if city in supply_locations:
        return True
    return any(neighbor in supply_locations for neighbor in road_network.get(city, ()))


def place_emergency_supplies(
    road_network: RoadNetwork,
    num_cities: int,
) -> set[str] | None:
    """Find at most ``num_cities`` supply cities that cover every city.

    Roads are assumed to be bidirectional and every city to be a key of
    ``road_network``. Cities are explored in sorted name order, so the result
    is deterministic. Returns the chosen cities, or ``None`` when no such
    choice exists.

    Raises:
        ValueError: if ``num_cities`` is negative.
    """
    if num_cities < 0:
        raise ValueError("Number of supply cities cannot be negative.")

    cities = sorted(road_network)
    neighbors = {city: sorted(road_network[city]) for city in cities}

    def plan(chosen: frozenset[str]) -> frozenset[str] | None:
        uncovered = next(
            (city for city in cities if not is_covered(city, road_network, chosen)),
            None,
        )
        if uncovered is None:
            return chosen
        if len(chosen) >= num_cities:
            return None

        # Any cover must put supplies in the uncovered city or one of its neighbours.
        for candidate in (uncovered, *neighbors[uncovered]):
            result = plan(chosen | {candidate})
            if result is not None:
                return result
        return None

    result = plan(frozenset())
    return None if result is None else set(result)


def make_symmetric(source: RoadNetwork) -> dict[str, set[str]]:
    """Return a copy of ``source`` in which every road also runs backwards."""
    result: dict[str, set[str]] = {city: set(dests) for city, dests in source.items()}
    for origin, dests in source.items():
        for dest in dests:
            result.setdefault(origin, set()).add(dest)
            result.setdefault(dest, set()).add(origin)
    return result