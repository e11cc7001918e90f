from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.time_of_day import TimeOfDay
from ..core.enums import AttendanceState, StrategyKind


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi điểm danh của sinh viên trong một buổi học."""

    attendance_id: int
    student_id: int
    group_id: int
    work_date: date
    marked_time: TimeOfDay
    class_start: TimeOfDay
    state: AttendanceState
    note: Optional[str] = None


@dataclass(frozen=True)
class MarkResult:
    """Kết quả điểm danh kèm thông tin chiến lược đã áp dụng."""

    attendance_id: int
    state: AttendanceState
    strategy_kind: StrategyKind
    tolerance_minutes: int
    delta_minutes: int
    class_start: TimeOfDay
