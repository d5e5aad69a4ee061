"""Reading disaster-planning test cases from text.

Each data line has the form::

    City Name (X, Y): Neighbour One, Neighbour Two

Blank lines and lines starting with ``#`` are ignored. Roads listed in one
direction are made bidirectional once the whole file has been read.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ["ParseError", "Point", "DisasterTest", "load_disaster"]

_CITY_PATTERN = re.compile(
    r"^([A-Za-z0-9 .\-]+)\(\s*(-?[0-9]+(?:\.[0-9]+)?)\s*,\s*(-?[0-9]+(?:\.[0-9]+)?)\s*\)$"
)


class ParseError(ValueError):
    """Raised when a disaster-planning file is malformed."""


@dataclass(frozen=True, order=True)
class Point:
    """A location in logical drawing space."""

    x: float
    y: float


@dataclass
class DisasterTest:
    """A road network together with where each city should be drawn."""

    network: dict[str, set[str]] = field(default_factory=dict)
    city_locations: dict[str, Point] = field(default_factory=dict)


def _parse_city(city_info: str, result: DisasterTest) -> str:
    match = _CITY_PATTERN.match(city_info.strip())
    if match is None:
        raise ParseError(f"Can't parse this data; is it city info? {city_info}")

    name = match.group(1).strip()
    if not name:
        raise ParseError("City names can't be empty.")

    result.city_locations[name] = Point(float(match.group(2)), float(match.group(3)))
    result.network[name] = set()
    return name


def _parse_links(city: str, links: str, result: DisasterTest) -> None:
    if not links.strip():
        result.network[city] = set()
        return

    parts = links.split(",")
    # A single trailing delimiter is tolerated.
    if parts[-1] == "":
        parts.pop()

    for dest in parts:
        clean = dest.strip()
        if not clean:
            raise ParseError("Blank name in list of outgoing cities?")
        if clean in result.network[city]:
            raise ParseError("City appears twice in outgoing list?")
        result.network[city].add(clean)


def _parse_city_line(line: str, result: DisasterTest) -> None:
    if line.count(":") != 1:
        raise ParseError("Each data line should have exactly one colon on it.")

    city_info, _, links = line.partition(":")
    name = _parse_city(city_info, result)
    _parse_links(name, links, result)


def _add_reverse_edges(result: DisasterTest) -> None:
    for source in sorted(result.network):
        for dest in sorted(result.network[source]):
            if dest not in result.network:
                raise ParseError(f"Outgoing link found to nonexistent city '{dest}'")
            result.network[dest].add(source)


def _validate_locations(result: DisasterTest) -> None:
    seen: dict[Point, str] = {}
    for city in sorted(result.city_locations):
        location = result.city_locations[city]
        if location in seen:
            raise ParseError(f"{city} is at the same location as {seen[location]}")
        seen[location] = city


def load_disaster(source: str | Iterable[str]) -> DisasterTest:
    """Parse a test case from a string or an iterable of lines.

    Raises:
        ParseError: if the data is malformed.
    """
    lines = source.splitlines() if isinstance(source, str) else source
    result = DisasterTest()

    for raw in lines:
        line = raw.rstrip("\n")
        if not line.strip() or line.startswith("#"):
            continue
        _parse_city_line(line, result)

    _add_reverse_edges(result)
    _validate_locations(result)
    return result