from __future__ import annotations

import logging
from typing import Iterable

from ..common.time_of_day import TimeOfDay
from ..common.validators import require_positive_id, require_role
from ..core.enums import Role
from ..core.exceptions import ScheduleConflictError, ValidationError
from .conflicts import find_conflicts
from .repository import ScheduleRepository
from .slot import Weekday, WeeklySlot

logger = logging.getLogger(__name__)


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    def add_slot(
        self,
        *,
        current_role: Role,
        group_id: int,
        day: str,
        start: str,
        end: str,
    ) -> int:
        require_role(current_role, Role.ADMIN, Role.TEACHER)
        group_id = require_positive_id(group_id, "Nhóm lớp")

        slot = WeeklySlot(day=Weekday.parse(day), start=TimeOfDay.parse(start), end=TimeOfDay.parse(end))

        clashes = find_conflicts([slot], self.slots_for_group(group_id))
        if clashes:
            _, existing = clashes[0]
            logger.warning("group %s: slot %s overlaps existing %s", group_id, slot, existing)
            raise ScheduleConflictError(f"Lịch {slot} trùng với lịch đã có {existing}")

        schedule_id = self._schedules.add(group_id=group_id, day=slot.day, start=slot.start, end=slot.end)
        if schedule_id <= 0:
            raise ValidationError("Thêm lịch học thất bại")
        logger.info("group %s: added slot %s (id=%s)", group_id, slot, schedule_id)
        return schedule_id

    def delete_slot(self, *, current_role: Role, schedule_id: int) -> None:
        require_role(current_role, Role.ADMIN, Role.TEACHER)

        if not self._schedules.delete(schedule_id=require_positive_id(schedule_id, "Lịch học")):
            raise ValidationError("Xóa lịch thất bại")

    def clear_group(self, *, current_role: Role, group_id: int) -> int:
        require_role(current_role, Role.ADMIN, Role.TEACHER)
        return self._schedules.delete_for_group(group_id=require_positive_id(group_id, "Nhóm lớp"))

    def slots_for_group(self, group_id: int) -> list[WeeklySlot]:
        return [s.to_slot() for s in self._schedules.list_for_group(int(group_id))]

    def slots_for_groups(self, group_ids: Iterable[int]) -> list[WeeklySlot]:
        ids = [int(g) for g in group_ids]
        if not ids:
            return []
        return [s.to_slot() for s in self._schedules.list_for_groups(ids)]

    def describe_group(self, group_id: int) -> list[str]:
        return [str(slot) for slot in self.slots_for_group(group_id)]
