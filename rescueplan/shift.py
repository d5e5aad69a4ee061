"""Work shifts: a day, an hour range and the value of working it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = ["Day", "Shift"]


class Day(IntEnum):
    """Days of the week, in calendar order starting on Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True, order=True)
class Shift:
    """A shift on one day, from ``start_hour`` up to ``end_hour``.

    Shifts order by day, then start hour, then end hour, then value.
    """

    day: Day
    start_hour: int
    end_hour: int
    value: int

    def __post_init__(self) -> None:
        if self.start_hour > self.end_hour:
            raise ValueError("Shift ends before it starts?")
        object.__setattr__(self, "day", Day(self.day))

    def length(self) -> int:
        """Return the number of hours the shift lasts."""
        return self.end_hour - self.start_hour

    def overlaps_with(self, other: Shift) -> bool:
        """Return whether the two shifts share any working hour."""
        if self.day != other.day:
            return False
        return (
            self.start_hour <= other.start_hour < self.end_hour
            or other.start_hour <= self.start_hour < other.end_hour
        )

    def __str__(self) -> str:
        return (
            f"{{ {self.day}, {self.start_hour:02d}:00 - {self.end_hour:02d}:00,"
            f" value ${self.value} }}"
        )