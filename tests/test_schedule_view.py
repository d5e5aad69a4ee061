import random

import pytest

from rescueplan.schedule_view import (
    Rect,
    assign_subcolumns,
    cell_bounding_boxes,
    hour_range,
    hour_to_string,
    randomize_values,
    solution_description,
    standard_shifts,
    total_length,
    total_profit,
)
from rescueplan.shift import Day, Shift


def test_rect_expand_round_trip():
    rect = Rect(10.0, 20.0, 100.0, 50.0)
    assert rect.expand(5).expand(-5) == rect


def test_rect_expand_keeps_centre():
    rect = Rect(0.0, 0.0, 40.0, 20.0)
    grown = rect.expand(3)
    assert grown.x + grown.width / 2 == pytest.approx(rect.x + rect.width / 2)
    assert grown.y + grown.height / 2 == pytest.approx(rect.y + rect.height / 2)


def test_standard_shifts_are_sorted_unique_and_free():
    shifts = standard_shifts()
    assert shifts == sorted(shifts)
    assert len(set(shifts)) == len(shifts)
    assert all(shift.value == 0 for shift in shifts)
    assert {shift.day for shift in shifts} == set(Day)


def test_standard_shifts_hour_range():
    assert hour_range(standard_shifts()) == (8, 20)


def test_hour_range_default_when_empty():
    assert hour_range([]) == (0, 24)


@pytest.mark.parametrize("hour, label", [(0, "12AM"), (12, "12PM"), (24, "12AM")])
def test_hour_to_string_noon_and_midnight(hour, label):
    assert hour_to_string(hour) == label


def test_hour_to_string_suffixes():
    assert all(hour_to_string(h).endswith("AM") for h in range(1, 12))
    assert all(hour_to_string(h).endswith("PM") for h in range(13, 24))


def test_cell_bounding_boxes_tile_the_bounds():
    bounds = Rect(5.0, 10.0, 30.0, 130.0)
    boxes = cell_bounding_boxes(bounds, 8, 20)
    assert len(boxes) == 20 - 8 + 1
    assert boxes[0].y == pytest.approx(bounds.y)
    assert boxes[-1].y + boxes[-1].height == pytest.approx(bounds.y + bounds.height)
    for upper, lower in zip(boxes, boxes[1:]):
        assert upper.y + upper.height == pytest.approx(lower.y)
    assert all(box.x == bounds.x and box.width == bounds.width for box in boxes)


def test_assign_subcolumns_never_stacks_overlaps():
    day_shifts = [s for s in standard_shifts() if s.day is Day.MONDAY]
    columns = assign_subcolumns(day_shifts)
    assert set(columns) == set(day_shifts)
    for a in day_shifts:
        for b in day_shifts:
            if a != b and a.overlaps_with(b):
                assert columns[a] != columns[b]


def test_assign_subcolumns_sequential_shifts_share_a_column():
    shifts = [
        Shift(Day.MONDAY, 8, 12, 0),
        Shift(Day.MONDAY, 12, 16, 0),
        Shift(Day.MONDAY, 16, 20, 0),
    ]
    assert set(assign_subcolumns(shifts).values()) == {0}


def test_assign_subcolumns_empty():
    assert assign_subcolumns([]) == {}


def test_randomize_values_scales_by_length():
    rng = random.Random(1)
    shifts = randomize_values(standard_shifts(), rng, 0, 12)
    base = {(s.day, s.start_hour, s.end_hour) for s in standard_shifts()}
    assert {(s.day, s.start_hour, s.end_hour) for s in shifts} == base
    for shift in shifts:
        assert shift.value % shift.length() == 0
        assert 0 <= shift.value // shift.length() <= 12


def test_randomize_values_is_reproducible_with_seed():
    first = randomize_values(standard_shifts(), random.Random(7))
    second = randomize_values(standard_shifts(), random.Random(7))
    assert first == second


def test_totals_of_empty_schedule():
    assert total_profit([]) == 0
    assert total_length([]) == 0


def test_totals_of_single_shift():
    shift = Shift(Day.MONDAY, 8, 16, 11)
    assert total_profit([shift]) == shift.value
    assert total_length([shift]) == shift.length()


def test_totals_add_across_shifts():
    a = Shift(Day.MONDAY, 8, 12, 3)
    b = Shift(Day.TUESDAY, 12, 20, 5)
    assert total_profit([a, b]) == total_profit([a]) + total_profit([b])
    assert total_length([a, b]) == total_length([a]) + total_length([b])


def test_solution_description_uses_default_hours():
    chosen = [Shift(Day.MONDAY, 8, 12, 3)]
    text = solution_description(chosen)
    assert text == (
        f"Best solution produces {total_profit(chosen)} value, using "
        f"{total_length(chosen)} of 30 available hours."
    )


def test_solution_description_custom_hours():
    assert solution_description([], 12).endswith("using 0 of 12 available hours.")