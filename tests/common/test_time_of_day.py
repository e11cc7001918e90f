from datetime import time

import pytest

from src.class_attendance.class_attendance.common.time_of_day import TimeOfDay, difference
from src.class_attendance.class_attendance.core.exceptions import InvalidTimeFormat, ValidationError


@pytest.mark.parametrize(
    "text,minutes",
    [("00:00", 0), ("08:05", 485), ("12:30", 750), ("23:59", 1439)],
)
def test_parse_minutes_since_midnight(text, minutes):
    assert TimeOfDay.parse(text).minutes == minutes


@pytest.mark.parametrize("text", ["00:00", "07:09", "10:30", "19:45", "23:59"])
def test_canonical_text_round_trips(text):
    assert TimeOfDay.parse(text).format() == text
    assert str(TimeOfDay.parse(text)) == text


def test_parse_is_injective_over_the_whole_day():
    seen = {TimeOfDay.parse(f"{h:02d}:{m:02d}").minutes for h in range(24) for m in range(60)}
    assert len(seen) == 24 * 60
    assert min(seen) == 0 and max(seen) == 1439


@pytest.mark.parametrize(
    "text",
    ["24:00", "08:60", "8:00", "08:0", "0800", "08:00:00", "08-00", "", " 08:00", "08:00 ", "ab:cd", "1:2:3"],
)
def test_parse_rejects_malformed(text):
    with pytest.raises(InvalidTimeFormat):
        TimeOfDay.parse(text)


def test_parse_rejects_non_string():
    with pytest.raises(InvalidTimeFormat):
        TimeOfDay.parse(None)


def test_invalid_time_format_is_a_validation_error():
    with pytest.raises(ValidationError):
        TimeOfDay.parse("25:00")


def test_difference_is_signed_without_wraparound():
    start = TimeOfDay.parse("08:00")
    assert difference(TimeOfDay.parse("08:25"), start) == 25
    assert difference(TimeOfDay.parse("07:55"), start) == -5
    assert difference(TimeOfDay.parse("00:05"), TimeOfDay.parse("23:55")) == -1430


def test_from_time_drops_seconds():
    t = TimeOfDay.from_time(time(9, 5, 59))
    assert t == TimeOfDay.parse("09:05")
    assert t.to_time() == time(9, 5)


def test_ordering_follows_minutes():
    assert TimeOfDay.parse("08:00") < TimeOfDay.parse("08:01") < TimeOfDay.parse("10:00")


def test_out_of_range_minutes_rejected():
    with pytest.raises(InvalidTimeFormat):
        TimeOfDay(1440)
    with pytest.raises(InvalidTimeFormat):
        TimeOfDay(-1)
