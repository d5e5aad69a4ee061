import pytest

from rescueplan.shift import Day, Shift


def test_day_names():
    assert str(Day(0)) == "Sunday"
    assert str(Day(3)) == "Wednesday"
    assert str(Shift(Day(6), 8, 14, 0).day) == "Saturday"


def test_shift_rejects_end_before_start():
    with pytest.raises(ValueError):
        Shift(Day.MONDAY, 12, 8, 0)


def test_zero_length_shift_allowed():
    shift = Shift(Day.MONDAY, 9, 9, 0)
    assert shift.length() == 0


def test_length_of_four_hour_shift():
    assert Shift(Day.TUESDAY, 8, 12, 7).length() == 4


def test_str_format_pads_hours():
    assert str(Shift(Day.MONDAY, 8, 12, 3)) == "{ Monday, 08:00 - 12:00, value $3 }"


def test_adjacent_shifts_do_not_overlap():
    first = Shift(Day.MONDAY, 8, 12, 0)
    second = Shift(Day.MONDAY, 12, 16, 0)
    assert not first.overlaps_with(second)
    assert not second.overlaps_with(first)


def test_overlapping_shifts_overlap_both_ways():
    first = Shift(Day.MONDAY, 8, 16, 0)
    second = Shift(Day.MONDAY, 12, 20, 0)
    assert first.overlaps_with(second)
    assert second.overlaps_with(first)


def test_shift_overlaps_itself():
    shift = Shift(Day.FRIDAY, 8, 12, 0)
    assert shift.overlaps_with(shift)


def test_different_days_never_overlap():
    assert not Shift(Day.MONDAY, 8, 16, 0).overlaps_with(Shift(Day.TUESDAY, 8, 16, 0))


def test_ordering_day_then_hours_then_value():
    shifts = [
        Shift(Day.TUESDAY, 8, 12, 0),
        Shift(Day.MONDAY, 12, 16, 0),
        Shift(Day.MONDAY, 8, 16, 5),
        Shift(Day.MONDAY, 8, 16, 1),
        Shift(Day.MONDAY, 8, 12, 9),
    ]
    ordered = sorted(shifts)
    assert ordered == [shifts[4], shifts[3], shifts[2], shifts[1], shifts[0]]


def test_equal_shifts_hash_together():
    a = Shift(Day.SUNDAY, 8, 14, 2)
    b = Shift(Day.SUNDAY, 8, 14, 2)
    assert a == b
    assert len({a, b}) == 1


def test_value_distinguishes_shifts():
    assert Shift(Day.SUNDAY, 8, 14, 2) != Shift(Day.SUNDAY, 8, 14, 3)


def test_day_given_as_int_is_normalised():
    assert Shift(1, 8, 12, 0).day is Day.MONDAY