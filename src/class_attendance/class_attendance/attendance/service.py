from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.time_of_day import TimeOfDay, difference
from ..common.validators import require_positive_id, require_role
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceState, Role
from ..core.exceptions import ValidationError
from ..enrollments.repository import EnrollmentRepository
from ..groups.service import GroupConfigService
from ..schedules.service import ScheduleService
from ..schedules.slot import Weekday
from .classifier import classify
from .model import AttendanceRecord, MarkResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        enrollments: EnrollmentRepository,
        schedules: ScheduleService,
        group_config: GroupConfigService,
    ):
        self._attendance = attendance
        self._enrollments = enrollments
        self._schedules = schedules
        self._group_config = group_config

    def _class_start_for(self, *, group_id: int, work_date: date, marked: TimeOfDay) -> TimeOfDay:
        day = Weekday.from_date(work_date)
        for slot in self._schedules.slots_for_group(group_id):
            if slot.contains(day, marked):
                return slot.start
        raise ValidationError(f"Không có buổi học nào vào {day.short_name} {marked}")

    def mark(
        self,
        *,
        current_role: Role,
        student_id: int,
        group_id: int,
        work_date: date,
        marked_time: str,
        class_start: Optional[str] = None,
        note: Optional[str] = None,
    ) -> MarkResult:
        """Classify and record one attendance mark.

        ``class_start`` overrides the scheduled start (manual/test marking);
        otherwise the start comes from the group's slot that contains the mark.
        """
        require_role(current_role, Role.STUDENT, Role.TEACHER)
        student_id = require_positive_id(student_id, "Sinh viên")
        group_id = require_positive_id(group_id, "Nhóm lớp")

        # Parse errors propagate before anything is classified or written.
        marked = TimeOfDay.parse(marked_time)
        start = TimeOfDay.parse(class_start) if class_start is not None else None

        if not self._enrollments.is_enrolled(student_id=student_id, group_id=group_id):
            raise ValidationError("Sinh viên chưa đăng ký nhóm lớp này")

        if start is None:
            start = self._class_start_for(group_id=group_id, work_date=work_date, marked=marked)

        # One mark per class occurrence; a group may meet twice on the same day.
        existing = self._attendance.get_for_occurrence(
            student_id=student_id, group_id=group_id, work_date=work_date, class_start=start
        )
        if existing:
            raise ValidationError("Sinh viên đã điểm danh buổi học này rồi")

        policy = self._group_config.get_policy(group_id)
        state = classify(marked, start, policy.tolerance_minutes, policy.strategy_kind)

        attendance_id = self._attendance.create(
            student_id=student_id,
            group_id=group_id,
            work_date=work_date,
            marked_time=marked,
            class_start=start,
            state=state,
            note=(note or "").strip() or None,
        )
        if attendance_id <= 0:
            raise ValidationError("Điểm danh thất bại")

        logger.info(
            "student %s group %s %s: marked %s vs start %s -> %s (%s, tol=%s)",
            student_id,
            group_id,
            work_date,
            marked,
            start,
            state.value,
            policy.strategy_kind.value,
            policy.tolerance_minutes,
        )
        return MarkResult(
            attendance_id=attendance_id,
            state=state,
            strategy_kind=policy.strategy_kind,
            tolerance_minutes=policy.tolerance_minutes,
            delta_minutes=difference(marked, start),
            class_start=start,
        )

    def can_mark(self, student_id: int, group_id: int, *, at: datetime | None = None) -> bool:
        """Whether the student is enrolled and a class of the group is in progress at ``at``."""
        at = at or now_local()
        if not self._enrollments.is_enrolled(student_id=int(student_id), group_id=int(group_id)):
            return False

        day = Weekday.from_date(at.date())
        now = TimeOfDay.from_time(at.time())
        return any(slot.contains(day, now) for slot in self._schedules.slots_for_group(int(group_id)))

    def get_history(self, student_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT) -> list[AttendanceRecord]:
        return list(self._attendance.get_recent_for_student(int(student_id), int(limit)))

    def state_counts(self, student_id: int, group_id: int) -> dict[AttendanceState, int]:
        counts = {state: 0 for state in AttendanceState}
        for r in self._attendance.list_for_student_group(student_id=int(student_id), group_id=int(group_id)):
            counts[r.state] += 1
        return counts
