from __future__ import annotations

import logging
from datetime import date

from ..common.validators import require_positive_id, require_role
from ..core.enums import Role
from ..core.exceptions import ScheduleConflictError, ValidationError
from ..groups.repository import GroupRepository
from ..schedules.conflicts import find_conflicts, has_conflict
from ..schedules.service import ScheduleService
from ..schedules.slot import WeeklySlot
from .model import Enrollment
from .repository import EnrollmentRepository

logger = logging.getLogger(__name__)


class EnrollmentService:
    def __init__(self, enrollments: EnrollmentRepository, groups: GroupRepository, schedules: ScheduleService):
        self._enrollments = enrollments
        self._groups = groups
        self._schedules = schedules

    def _slot_sets(self, student_id: int, group_id: int) -> tuple[list[WeeklySlot], list[WeeklySlot]]:
        candidate = self._schedules.slots_for_group(group_id)
        existing = self._schedules.slots_for_groups(self._enrollments.list_group_ids_for_student(student_id))
        return candidate, existing

    def has_schedule_conflict(self, student_id: int, group_id: int) -> bool:
        candidate, existing = self._slot_sets(int(student_id), int(group_id))
        return has_conflict(candidate, existing)

    def enroll(
        self,
        *,
        current_role: Role,
        student_id: int,
        group_id: int,
        enrolled_on: date,
        semester: int,
        year: int,
    ) -> int:
        require_role(current_role, Role.ADMIN, Role.STUDENT)
        student_id = require_positive_id(student_id, "Sinh viên")
        group_id = require_positive_id(group_id, "Nhóm lớp")

        if int(semester) not in (1, 2):
            raise ValidationError("Học kỳ phải là 1 hoặc 2")

        group = self._groups.get_by_id(group_id)
        if not group:
            raise ValidationError(f"Nhóm lớp {group_id} không tồn tại")
        if self._enrollments.is_enrolled(student_id=student_id, group_id=group_id):
            raise ValidationError("Sinh viên đã đăng ký nhóm lớp này rồi")
        if group.is_full:
            raise ValidationError("Nhóm lớp đã đủ số lượng")

        candidate, existing = self._slot_sets(student_id, group_id)
        if has_conflict(candidate, existing):
            new_slot, taken = find_conflicts(candidate, existing)[0]
            logger.warning("student %s: group %s rejected, %s clashes with %s", student_id, group_id, new_slot, taken)
            raise ScheduleConflictError(f"Trùng lịch học: {new_slot} trùng với {taken}")

        enrollment_id = self._enrollments.create(
            student_id=student_id,
            group_id=group_id,
            enrolled_on=enrolled_on,
            semester=int(semester),
            year=int(year),
        )
        if enrollment_id <= 0:
            raise ValidationError("Đăng ký học thất bại")
        logger.info("student %s enrolled in group %s (id=%s)", student_id, group_id, enrollment_id)
        return enrollment_id

    def list_for_student(self, student_id: int) -> list[Enrollment]:
        return list(self._enrollments.list_for_student(int(student_id)))
