# rescueplan

A small toolkit built around one question: given a road network, can
emergency supplies be stockpiled in at most *k* cities so that every city
either holds supplies or is directly connected to a city that does?

It also carries a few supporting pieces: a reader for network files, value
types for work shifts with calendar-layout helpers, colour and font values,
and a console buffer that records styled text as HTML.

No third-party libraries are needed.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Planning supplies (`rescueplan.planning`)

```python
from rescueplan.planning import is_covered, make_symmetric, place_emergency_supplies

network = make_symmetric({
    "A": {"B"},
    "B": {"C", "D"},
    "C": {"D"},
    "D": {"F", "G"},
    "E": {"F"},
    "F": {"G"},
})

print(place_emergency_supplies(network, 1))   # None: one city is not enough
print(place_emergency_supplies(network, 2))   # {'B', 'F'}
print(is_covered("E", network, {"B", "F"}))   # True
```

- `place_emergency_supplies(road_network, num_cities)` returns a set of at
  most `num_cities` cities that covers the whole network, or `None` when no
  such set exists. Cities are tried in sorted name order, so the answer is
  deterministic. A negative `num_cities` raises `ValueError`.
- `make_symmetric(source)` returns a copy of an adjacency map in which every
  road also runs the other way.
- `is_covered(city, road_network, supply_locations)` checks one city.

## Network files (`rescueplan.parser`)

`load_disaster(source)` reads a scenario from a string or an iterable of
lines (an open file works) and returns a `DisasterTest` with two fields:
`network` (city name to set of neighbours) and `city_locations` (city name to
a `Point` with `x` and `y`). Lines look like:

    # comment
    Springfield (0, 0): Shelbyville, Capital City
    Shelbyville (1, 0):
    Capital City (0.5, 1.5):

Blank lines and lines starting with `#` are skipped. Each data line needs
exactly one colon. Links listed in one direction are made bidirectional.
Malformed input raises `ParseError`, a subclass of `ValueError`. This covers
unparseable city info, blank or duplicate link names, links to unknown
cities, and two cities at the same location.

## Console demo (`rescueplan.demo`)

    rescueplan
    rescueplan path/to/scenario.dst other.dst
    rescueplan --directory some/dir/

With no file arguments, the command lists the `.dst` files in `--directory`
(default `res/`) and asks you to pick one. It prints the network and the
fewest cities needed to cover it, then offers to run another. With file
arguments, it solves each file in turn. It exits with status 1 and a message
on a missing file or malformed data.

The module also exposes the pieces the demo is built from:

- `solve_optimally(test)` finds a smallest covering set by binary search on
  the budget.
- `format_map(network)`, `format_best_cities(cities)` and
  `pluralize(count, singular, plural)` produce the printed text.
- `sample_problems(directory)` lists the `.dst` files in a directory.
- `make_selection_from(title, options, input_fn, output)` is a numbered-menu
  prompt.
- Layout helpers for anyone drawing a network:
  - `geometry_for(test, width, height)` returns a `Geometry` whose
    `to_physical(x, y)` maps city coordinates into a window, keeping the
    aspect ratio.
  - `city_state(city, network, selected)` returns a `CityState`.
  - `shorthand_for(name)` gives a label of at most three characters.

## Shifts (`rescueplan.shift`, `rescueplan.schedule_view`)

`Day` is an ordered enum from `SUNDAY` to `SATURDAY`. `Shift(day,
start_hour, end_hour, value)` is an immutable, ordered value. It raises
`ValueError` if it ends before it starts. It has `length()`,
`overlaps_with(other)`, and a readable `str()` such as
`{ Monday, 08:00 - 12:00, value $5 }`.

`rescueplan.schedule_view` offers helpers for showing a week of shifts as a
calendar:

- `standard_shifts()` returns the standard week of shifts.
- `randomize_values(shifts, rng, low, high)` assigns each shift a random
  per-hour rate times its length.
- `hour_range(shifts)` gives the earliest start and latest end.
- `hour_to_string(hour)` gives a twelve-hour clock label.
- `cell_bounding_boxes(bounds, low_hour, high_hour)` and `Rect.expand(delta)`
  compute cell geometry.
- `assign_subcolumns(shifts)` places overlapping shifts side by side.
- `total_profit`, `total_length` and `solution_description(chosen,
  available_hours)` summarise a chosen set of shifts.

## Colours, fonts and styled console text

- `rescueplan.color.Color(red, green, blue)` is an immutable RGB value. It
  provides:
  - `from_hex`, `from_hsv` and `random` constructors;
  - `red`, `green` and `blue` properties;
  - `to_rgb()` and `to_html()`;
  - presets such as `Color.WHITE` and `Color.GRAY`.

  Out-of-range values raise `ValueError`.
- `rescueplan.font.Font` is an immutable family, style, size and colour. It
  has `with_family`, `with_style`, `with_size` and `with_color`, plus
  `library_string()`, which returns a `Family-STYLE-size` string.
- `rescueplan.console.ColorConsole` is a writable text stream. Each run of
  text keeps the `TextStyle` it was written in. Style is changed with
  `set_style(color, style, size)` or temporarily with the `styled(...)`
  context manager. `ConsoleStyle` flags can be combined with `|`. Use
  `clear()` to discard text and `render_html()` to get everything as an HTML
  document.

## What this package does not do

- There is no graphical window. The network and calendar helpers compute
  positions and labels, but nothing here draws them.
- There is no shift-scheduling solver. `rescueplan.shift` and
  `rescueplan.schedule_view` describe, lay out and total shifts, but do not
  choose the most valuable schedule.