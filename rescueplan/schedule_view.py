"""Layout and summary helpers for showing a week of shifts as a calendar."""

from __future__ import annotations

import random as _random
from collections.abc import Iterable
from dataclasses import dataclass

from rescueplan.shift import Day, Shift

__all__ = [
    "Rect",
    "standard_shifts",
    "hour_to_string",
    "cell_bounding_boxes",
    "assign_subcolumns",
    "hour_range",
    "randomize_values",
    "total_profit",
    "total_length",
    "solution_description",
]

# Hours an employee may work in the standard scenario.
STANDARD_HOURS = 30

# Range of per-hour values used when randomising shift values.
LOW_WEIGHT = 0
HIGH_WEIGHT = 99 // 8

_WEEKEND_HOURS = ((8, 14), (12, 18))
_WEEKDAY_HOURS = ((8, 12), (12, 16), (16, 20), (8, 16), (12, 20))


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float

    def expand(self, delta: float) -> Rect:
        """Grow the rectangle by ``delta`` on every side (shrink if negative)."""
        return Rect(
            self.x - delta,
            self.y - delta,
            self.width + 2 * delta,
            self.height + 2 * delta,
        )


def standard_shifts() -> list[Shift]:
    """Return the week's available shifts, each worth nothing, in order."""
    shifts = []
    for day in Day:
        hours = _WEEKEND_HOURS if day in (Day.SUNDAY, Day.SATURDAY) else _WEEKDAY_HOURS
        shifts.extend(Shift(day, start, end, 0) for start, end in hours)
    return sorted(shifts)


def hour_to_string(hour: int) -> str:
    """Return a twelve-hour clock label such as ``9AM`` or ``12PM``."""
    hour %= 24
    if hour == 0:
        return "12AM"
    if hour < 12:
        return f"{hour}AM"
    if hour == 12:
        return "12PM"
    return f"{hour - 12}PM"


def cell_bounding_boxes(bounds: Rect, low_hour: int, high_hour: int) -> list[Rect]:
    """Split ``bounds`` into one row per hour from ``low_hour`` to ``high_hour``."""
    cell_height = bounds.height / (high_hour - low_hour + 1)
    return [
        Rect(bounds.x, bounds.y + cell_height * (hour - low_hour), bounds.width, cell_height)
        for hour in range(low_hour, high_hour + 1)
    ]


def assign_subcolumns(shifts: Iterable[Shift]) -> dict[Shift, int]:
    """Place each shift in the first subcolumn where it does not overlap another.

    Shifts are taken in sorted order, which sorts by start time within a day,
    so the greedy choice uses as few subcolumns as possible.
    """
    assignment: dict[Shift, int] = {}
    bottoms: list[int] = []
    for shift in sorted(set(shifts)):
        column = next(
            (index for index, bottom in enumerate(bottoms) if bottom <= shift.start_hour),
            len(bottoms),
        )
        if column == len(bottoms):
            bottoms.append(shift.end_hour)
        else:
            bottoms[column] = shift.end_hour
        assignment[shift] = column
    return assignment


def hour_range(shifts: Iterable[Shift]) -> tuple[int, int]:
    """Return the earliest start and latest end, or midnight to midnight if empty."""
    shifts = list(shifts)
    if not shifts:
        return 0, 24
    return min(s.start_hour for s in shifts), max(s.end_hour for s in shifts)


def randomize_values(
    shifts: Iterable[Shift],
    rng: _random.Random | None = None,
    low: int = LOW_WEIGHT,
    high: int = HIGH_WEIGHT,
) -> list[Shift]:
    """Give each shift a random per-hour rate in ``[low, high]`` times its length."""
    source = rng if rng is not None else _random
    return sorted(
        {
            Shift(s.day, s.start_hour, s.end_hour, source.randint(low, high) * s.length())
            for s in shifts
        }
    )


def total_profit(shifts: Iterable[Shift]) -> int:
    """Return the combined value of the shifts."""
    return sum(shift.value for shift in shifts)


def total_length(shifts: Iterable[Shift]) -> int:
    """Return the combined number of hours of the shifts."""
    return sum(shift.length() for shift in shifts)


def solution_description(chosen: Iterable[Shift], available_hours: int = STANDARD_HOURS) -> str:
    """Summarise a chosen schedule in one sentence."""
    chosen = list(chosen)
    return (
        f"Best solution produces {total_profit(chosen)} value, using "
        f"{total_length(chosen)} of {available_hours} available hours."
    )