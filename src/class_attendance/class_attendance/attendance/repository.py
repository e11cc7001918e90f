from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..common.time_of_day import TimeOfDay
from ..core.enums import AttendanceState
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_occurrence(
        self, *, student_id: int, group_id: int, work_date: date, class_start: TimeOfDay
    ) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_recent_for_student(self, student_id: int, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student_group(self, *, student_id: int, group_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        student_id: int,
        group_id: int,
        work_date: date,
        marked_time: TimeOfDay,
        class_start: TimeOfDay,
        state: AttendanceState,
        note: Optional[str] = None,
    ) -> int:
        raise NotImplementedError
