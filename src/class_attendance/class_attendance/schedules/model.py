from __future__ import annotations

from dataclasses import dataclass

from ..common.time_of_day import TimeOfDay
from .slot import Weekday, WeeklySlot


@dataclass(frozen=True)
class Schedule:
    """Thực thể miền (domain): Lịch học hằng tuần của một nhóm lớp."""

    schedule_id: int
    group_id: int
    day: Weekday
    start: TimeOfDay
    end: TimeOfDay

    def to_slot(self) -> WeeklySlot:
        return WeeklySlot(day=self.day, start=self.start, end=self.end)
