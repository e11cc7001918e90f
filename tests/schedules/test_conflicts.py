from datetime import date

import pytest

from src.class_attendance.class_attendance.core.exceptions import InvalidTimeRange, ValidationError
from src.class_attendance.class_attendance.schedules.conflicts import find_conflicts, has_conflict
from src.class_attendance.class_attendance.schedules.slot import Weekday, WeeklySlot


def slot(day: str, start: str, end: str) -> WeeklySlot:
    return WeeklySlot.from_strings(day, start, end)


def test_touching_endpoints_conflict():
    assert has_conflict([slot("Mon", "08:00", "10:00")], [slot("Mon", "10:00", "12:00")])


def test_different_days_never_conflict():
    assert not has_conflict([slot("Mon", "08:00", "10:00")], [slot("Tue", "08:00", "10:00")])


def test_disjoint_same_day_does_not_conflict():
    assert not has_conflict([slot("Mon", "08:00", "09:59")], [slot("Mon", "10:00", "12:00")])


def test_containment_conflicts():
    assert has_conflict([slot("Fri", "09:00", "12:00")], [slot("Fri", "10:00", "11:00")])


def test_identical_slot_conflicts_with_itself():
    s = slot("Thu", "14:00", "16:00")
    assert has_conflict([s], [s])


def test_empty_sets_never_conflict():
    s = [slot("Mon", "08:00", "10:00")]
    assert not has_conflict([], s)
    assert not has_conflict(s, [])
    assert not has_conflict([], [])


def test_symmetric():
    a = [slot("Mon", "08:00", "10:00"), slot("Wed", "09:00", "11:00")]
    b = [slot("Wed", "10:30", "12:00")]
    c = [slot("Tue", "08:00", "10:00")]
    assert has_conflict(a, b) == has_conflict(b, a) is True
    assert has_conflict(a, c) == has_conflict(c, a) is False


def test_enrollment_scenario_wednesday_overlap():
    candidate = [slot("Wed", "09:00", "11:00")]
    existing = [slot("Wed", "10:30", "12:00")]
    assert has_conflict(candidate, existing)


def test_accepts_generators():
    existing = [slot("Mon", "08:00", "10:00")]
    assert has_conflict((s for s in [slot("Mon", "09:00", "09:30")]), iter(existing))


def test_find_conflicts_lists_every_pair_in_order():
    candidate = [slot("Mon", "08:00", "10:00"), slot("Wed", "08:00", "10:00")]
    existing = [slot("Mon", "09:00", "11:00"), slot("Wed", "07:00", "08:00"), slot("Fri", "08:00", "10:00")]
    assert find_conflicts(candidate, existing) == [
        (candidate[0], existing[0]),
        (candidate[1], existing[1]),
    ]


def test_slot_must_start_before_it_ends():
    with pytest.raises(InvalidTimeRange):
        slot("Mon", "10:00", "10:00")
    with pytest.raises(InvalidTimeRange):
        slot("Mon", "11:00", "10:00")


def test_slot_contains_is_inclusive_and_day_bound():
    s = slot("Mon", "08:00", "10:00")
    assert s.contains(Weekday.MON, s.start)
    assert s.contains(Weekday.MON, s.end)
    assert not s.contains(Weekday.TUE, s.start)
    assert str(s) == "Mon 08:00-10:00"
    assert s.duration_minutes == 120


@pytest.mark.parametrize(
    "label,day",
    [
        ("Mon", Weekday.MON),
        ("monday", Weekday.MON),
        ("Lunes", Weekday.MON),
        ("Miércoles", Weekday.WED),
        ("miercoles", Weekday.WED),
        ("SÁBADO", Weekday.SAT),
        (" sun ", Weekday.SUN),
        (Weekday.FRI, Weekday.FRI),
    ],
)
def test_weekday_parse(label, day):
    assert Weekday.parse(label) == day


@pytest.mark.parametrize("label", ["", "Funday", None, 3])
def test_weekday_parse_rejects_unknown(label):
    with pytest.raises(ValidationError):
        Weekday.parse(label)


def test_weekday_from_date():
    assert Weekday.from_date(date(2025, 3, 12)) == Weekday.WED
    assert Weekday.from_date(date(2025, 3, 16)) == Weekday.SUN
