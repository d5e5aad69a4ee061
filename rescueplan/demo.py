"""Console demo for disaster planning, plus drawing helpers for road networks.

The demo lets the user pick a ``.dst`` scenario file and prints the road
network it describes. It then finds the smallest set of cities in which to
stockpile supplies and prints that too.
"""

from __future__ import annotations

import argparse
import math
import os
import sys
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import AbstractSet, TextIO

from rescueplan.parser import DisasterTest, ParseError, load_disaster
from rescueplan.planning import place_emergency_supplies

__all__ = [
    "CityState",
    "Geometry",
    "geometry_for",
    "city_state",
    "shorthand_for",
    "solve_optimally",
    "sample_problems",
    "pluralize",
    "format_map",
    "format_best_cities",
    "make_selection_from",
    "main",
]

PROBLEM_SUFFIX = ".dst"
DEFAULT_DIRECTORY = "res/"

# Space left free around the drawing area, in pixels.
BUFFER_SPACE = 60.0
# Lower bound on the width or height of the data range, for collinear points.
LOGICAL_PADDING = 1e-5
# Longest label drawn inside a city.
MAX_LABEL_LENGTH = 3


class CityState(Enum):
    """How a city is covered by a set of supply locations."""

    UNCOVERED = 0
    COVERED_INDIRECTLY = 1
    COVERED_DIRECTLY = 2


@dataclass(frozen=True)
class Geometry:
    """Mapping from logical city coordinates to window coordinates."""

    min_data_x: float
    min_data_y: float
    max_data_x: float
    max_data_y: float
    min_draw_x: float
    min_draw_y: float
    max_draw_x: float
    max_draw_y: float

    def to_physical(self, x: float, y: float) -> tuple[float, float]:
        """Convert a logical point to a point in the window."""
        px = (x - self.min_data_x) / (self.max_data_x - self.min_data_x) * (
            self.max_draw_x - self.min_draw_x
        ) + self.min_draw_x
        py = (y - self.min_data_y) / (self.max_data_y - self.min_data_y) * (
            self.max_draw_y - self.min_draw_y
        ) + self.min_draw_y
        return px, py


def geometry_for(test: DisasterTest, width: float, height: float) -> Geometry:
    """Fit the cities of ``test`` into a window of the given size.

    The data's aspect ratio is kept and the drawing is centred in the window.

    Raises:
        ValueError: if there are no cities or the window is too small to draw in.
    """
    if not test.city_locations:
        raise ValueError("Cannot compute geometry for a network with no cities.")
    if width <= 2 * BUFFER_SPACE or height <= 2 * BUFFER_SPACE:
        raise ValueError("Window is too small to draw the network.")

    xs = [point.x for point in test.city_locations.values()]
    ys = [point.y for point in test.city_locations.values()]
    min_data_x = min(xs) - LOGICAL_PADDING
    min_data_y = min(ys) - LOGICAL_PADDING
    max_data_x = max(xs) + LOGICAL_PADDING
    max_data_y = max(ys) + LOGICAL_PADDING

    win_width = width - 2 * BUFFER_SPACE
    win_height = height - 2 * BUFFER_SPACE
    win_aspect = win_width / win_height
    data_aspect = (max_data_x - min_data_x) / (max_data_y - min_data_y)

    # Whichever dimension is the limiting one sets the scale.
    if data_aspect >= win_aspect:
        data_width = win_width
        data_height = data_width / data_aspect
    else:
        data_height = win_height
        data_width = data_aspect * data_height

    min_draw_x = (win_width - data_width) / 2.0 + BUFFER_SPACE
    min_draw_y = (win_height - data_height) / 2.0 + BUFFER_SPACE
    return Geometry(
        min_data_x=min_data_x,
        min_data_y=min_data_y,
        max_data_x=max_data_x,
        max_data_y=max_data_y,
        min_draw_x=min_draw_x,
        min_draw_y=min_draw_y,
        max_draw_x=min_draw_x + data_width,
        max_draw_y=min_draw_y + data_height,
    )


def city_state(
    city: str,
    network: Mapping[str, Iterable[str]],
    selected: AbstractSet[str],
) -> CityState:
    """Report whether ``city`` holds supplies, neighbours them, or neither."""
    if city in selected:
        return CityState.COVERED_DIRECTLY
    if any(neighbor in selected for neighbor in network.get(city, ())):
        return CityState.COVERED_INDIRECTLY
    return CityState.UNCOVERED


def shorthand_for(name: str) -> str:
    """Return a short label: the first three letters of one word, else initials."""
    components = name.split(" ")
    if len(components) == 1:
        return components[0][:MAX_LABEL_LENGTH]

    initials = [component[0] for component in components if component]
    return "".join(initials[:MAX_LABEL_LENGTH])


def solve_optimally(test: DisasterTest) -> set[str]:
    """Return a smallest set of supply cities covering the network.

    Uses binary search on the number of cities allowed.
    """
    low, high = 0, len(test.network)
    result = place_emergency_supplies(test.network, high) or set()

    while low < high:
        mid = low + (high - low) // 2
        attempt = place_emergency_supplies(test.network, mid)
        if attempt is not None:
            high = mid
            result = attempt
        else:
            low = mid + 1
    return set(result)


def sample_problems(directory: str | os.PathLike[str]) -> list[str]:
    """List, in sorted order, the scenario file names in ``directory``."""
    return sorted(name for name in os.listdir(directory) if name.endswith(PROBLEM_SUFFIX))


def pluralize(count: int, singular: str, plural: str) -> str:
    """Return ``count`` followed by the word in the right number."""
    return f"{count} {singular if count == 1 else plural}"


def format_map(network: Mapping[str, Iterable[str]]) -> str:
    """Describe a road network, one city and its neighbours at a time."""
    lines = [f"This transportation grid has {pluralize(len(network), 'city', 'cities')}."]
    for city in sorted(network):
        neighbors = sorted(network[city])
        lines.append(
            f"  The city {city} is adjacent to "
            f"{pluralize(len(neighbors), 'city', 'cities')}."
        )
        lines.extend(f"    {neighbor}" for neighbor in neighbors)
    return "\n".join(lines) + "\n"


def format_best_cities(cities: Iterable[str]) -> str:
    """Describe the cities used in a solution."""
    chosen = sorted(cities)
    lines = [
        f"You need to stockpile in {pluralize(len(chosen), 'city', 'cities')} "
        "to provide coverage."
    ]
    lines.extend(f"  {city}" for city in chosen)
    return "\n".join(lines) + "\n"


def _read_integer(prompt: str, input_fn: Callable[[str], str], output: TextIO) -> int:
    while True:
        text = input_fn(prompt)
        try:
            return int(text.strip())
        except ValueError:
            output.write("Illegal integer format. Try again.\n")


def make_selection_from(
    title: str,
    options: Sequence[str],
    input_fn: Callable[[str], str] | None = None,
    output: TextIO | None = None,
) -> int:
    """Prompt until the user picks one of ``options``; return its index.

    Raises:
        ValueError: if ``options`` is empty.
    """
    if not options:
        raise ValueError("Internal error: Requesting the user to pick an item from an empty list.")
    read = input_fn if input_fn is not None else input
    out = output if output is not None else sys.stdout

    out.write(f"{title}\n")
    for index, option in enumerate(options):
        out.write(f"{index} {option}\n")

    while True:
        choice = _read_integer("Your choice: ", read, out)
        if 0 <= choice < len(options):
            return choice
        out.write(f"Please enter a number between 0 and {len(options) - 1}\n")


def _ask_yes_no(prompt: str, input_fn: Callable[[str], str], output: TextIO) -> bool:
    while True:
        answer = input_fn(prompt).strip().lower()
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        output.write("Please type a word that starts with 'Y' or 'N'.\n")


def _make_file_selection(
    suffix: str,
    directory: str,
    input_fn: Callable[[str], str],
    output: TextIO,
) -> Path:
    options = sorted(name for name in os.listdir(directory or ".") if name.endswith(suffix))
    index = make_selection_from(
        "Please choose a demo file from this list:", options, input_fn, output
    )
    return Path(directory or ".") / options[index]


def _run_scenario(path: str | os.PathLike[str], output: TextIO) -> None:
    with open(path, encoding="utf-8") as handle:
        scenario = load_disaster(handle)

    output.write(format_map(scenario.network))
    output.write("Running your code to find the fewest number of cities needed... ")
    output.flush()
    cities = solve_optimally(scenario)
    output.write("done!\n")
    output.write(format_best_cities(cities))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the disaster-planning console demo."""
    parser = argparse.ArgumentParser(
        prog="rescueplan",
        description="Find the fewest cities needed to stockpile disaster supplies.",
    )
    parser.add_argument("files", nargs="*", help="scenario files to solve")
    parser.add_argument(
        "--directory",
        default=DEFAULT_DIRECTORY,
        help="directory to choose scenario files from when none are given",
    )
    args = parser.parse_args(argv)

    output = sys.stdout
    output.write("Disaster Planning\n")
    try:
        if args.files:
            for path in args.files:
                _run_scenario(path, output)
        else:
            while True:
                path = _make_file_selection(PROBLEM_SUFFIX, args.directory, input, output)
                _run_scenario(path, output)
                if not _ask_yes_no("Try another demo file? ", input, output):
                    break
    except (OSError, ParseError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        output.write("\n")
    output.write("\nExiting...\n")
    return 0