from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from datetime import date
from enum import Enum

from ..common.time_of_day import TimeOfDay
from ..core.exceptions import InvalidTimeRange, ValidationError


class Weekday(str, Enum):
    """Ngày trong tuần của một buổi học định kỳ."""

    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"
    SAT = "SAT"
    SUN = "SUN"

    @classmethod
    def from_date(cls, value: date) -> "Weekday":
        return _ORDER[value.weekday()]

    @classmethod
    def parse(cls, label: str) -> "Weekday":
        """Accept English names/abbreviations and the Spanish labels of legacy rows."""
        if isinstance(label, Weekday):
            return label
        day = _LABELS.get(_fold(label)) if isinstance(label, str) else None
        if day is None:
            raise ValidationError(f"Ngày không hợp lệ: {label!r}")
        return day

    @property
    def short_name(self) -> str:
        return self.value.capitalize()


_ORDER = (Weekday.MON, Weekday.TUE, Weekday.WED, Weekday.THU, Weekday.FRI, Weekday.SAT, Weekday.SUN)


def _fold(label: str) -> str:
    # "Miércoles" -> "miercoles"
    decomposed = unicodedata.normalize("NFKD", label.strip().lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


_LABELS: dict[str, Weekday] = {}
for _day, _names in zip(
    _ORDER,
    (
        ("monday", "lunes"),
        ("tuesday", "martes"),
        ("wednesday", "miercoles"),
        ("thursday", "jueves"),
        ("friday", "viernes"),
        ("saturday", "sabado"),
        ("sunday", "domingo"),
    ),
):
    _LABELS[_day.value.lower()] = _day
    for _name in _names:
        _LABELS[_name] = _day


@dataclass(frozen=True)
class WeeklySlot:
    """One recurring meeting of a class group: weekday + [start, end] on that day."""

    day: Weekday
    start: TimeOfDay
    end: TimeOfDay

    def __post_init__(self) -> None:
        if not self.start < self.end:
            raise InvalidTimeRange(f"Giờ kết thúc ({self.end}) phải lớn hơn giờ bắt đầu ({self.start})")

    @classmethod
    def from_strings(cls, day: str, start: str, end: str) -> "WeeklySlot":
        return cls(day=Weekday.parse(day), start=TimeOfDay.parse(start), end=TimeOfDay.parse(end))

    def overlaps(self, other: "WeeklySlot") -> bool:
        # Closed intervals: a class ending at 10:00 clashes with one starting at 10:00.
        return self.day == other.day and self.start <= other.end and other.start <= self.end

    def contains(self, day: Weekday, at: TimeOfDay) -> bool:
        return self.day == day and self.start <= at <= self.end

    @property
    def duration_minutes(self) -> int:
        return self.end.minutes - self.start.minutes

    def __str__(self) -> str:
        return f"{self.day.short_name} {self.start}-{self.end}"
