from __future__ import annotations

from typing import Iterable

import pytest

from src.class_attendance.class_attendance.common.time_of_day import TimeOfDay
from src.class_attendance.class_attendance.core.enums import Role
from src.class_attendance.class_attendance.core.exceptions import (
    AuthorizationError,
    InvalidTimeFormat,
    InvalidTimeRange,
    ScheduleConflictError,
    ValidationError,
)
from src.class_attendance.class_attendance.schedules.model import Schedule
from src.class_attendance.class_attendance.schedules.service import ScheduleService
from src.class_attendance.class_attendance.schedules.slot import Weekday, WeeklySlot


class InMemorySchedules:
    def __init__(self):
        self._rows: dict[int, Schedule] = {}
        self._id = 0

    def list_for_group(self, group_id: int):
        return [s for s in self._rows.values() if s.group_id == group_id]

    def list_for_groups(self, group_ids: Iterable[int]):
        ids = set(group_ids)
        return [s for s in self._rows.values() if s.group_id in ids]

    def add(self, *, group_id: int, day: Weekday, start: TimeOfDay, end: TimeOfDay) -> int:
        self._id += 1
        self._rows[self._id] = Schedule(schedule_id=self._id, group_id=group_id, day=day, start=start, end=end)
        return self._id

    def delete(self, *, schedule_id: int) -> bool:
        return self._rows.pop(schedule_id, None) is not None

    def delete_for_group(self, *, group_id: int) -> int:
        doomed = [k for k, s in self._rows.items() if s.group_id == group_id]
        for k in doomed:
            del self._rows[k]
        return len(doomed)


def test_add_slot_and_describe():
    svc = ScheduleService(InMemorySchedules())

    svc.add_slot(current_role=Role.TEACHER, group_id=1, day="Lunes", start="08:00", end="10:00")
    svc.add_slot(current_role=Role.ADMIN, group_id=1, day="Wed", start="14:00", end="16:00")

    assert svc.describe_group(1) == ["Mon 08:00-10:00", "Wed 14:00-16:00"]
    assert svc.slots_for_group(1)[0] == WeeklySlot.from_strings("Mon", "08:00", "10:00")
    assert svc.slots_for_group(2) == []


def test_add_slot_validates_input():
    svc = ScheduleService(InMemorySchedules())

    with pytest.raises(ValidationError):
        svc.add_slot(current_role=Role.ADMIN, group_id=1, day="Someday", start="08:00", end="10:00")
    with pytest.raises(InvalidTimeFormat):
        svc.add_slot(current_role=Role.ADMIN, group_id=1, day="Mon", start="8:00", end="10:00")
    with pytest.raises(InvalidTimeRange):
        svc.add_slot(current_role=Role.ADMIN, group_id=1, day="Mon", start="10:00", end="09:00")
    with pytest.raises(ValidationError):
        svc.add_slot(current_role=Role.ADMIN, group_id=0, day="Mon", start="08:00", end="10:00")

    assert svc.slots_for_group(1) == []


def test_group_slots_cannot_overlap_each_other():
    repo = InMemorySchedules()
    svc = ScheduleService(repo)
    svc.add_slot(current_role=Role.ADMIN, group_id=1, day="Mon", start="08:00", end="10:00")

    with pytest.raises(ScheduleConflictError):
        svc.add_slot(current_role=Role.ADMIN, group_id=1, day="Mon", start="10:00", end="12:00")

    # Another group may use the same time range.
    svc.add_slot(current_role=Role.ADMIN, group_id=2, day="Mon", start="08:00", end="10:00")
    assert len(repo.list_for_group(1)) == 1


def test_students_cannot_edit_schedules():
    svc = ScheduleService(InMemorySchedules())
    with pytest.raises(AuthorizationError):
        svc.add_slot(current_role=Role.STUDENT, group_id=1, day="Mon", start="08:00", end="10:00")
    with pytest.raises(AuthorizationError):
        svc.clear_group(current_role=Role.STUDENT, group_id=1)


def test_delete_and_clear():
    svc = ScheduleService(InMemorySchedules())
    first = svc.add_slot(current_role=Role.ADMIN, group_id=1, day="Mon", start="08:00", end="10:00")
    svc.add_slot(current_role=Role.ADMIN, group_id=1, day="Tue", start="08:00", end="10:00")
    svc.add_slot(current_role=Role.ADMIN, group_id=1, day="Thu", start="08:00", end="10:00")

    svc.delete_slot(current_role=Role.TEACHER, schedule_id=first)
    with pytest.raises(ValidationError):
        svc.delete_slot(current_role=Role.TEACHER, schedule_id=first)

    assert svc.clear_group(current_role=Role.TEACHER, group_id=1) == 2
    assert svc.describe_group(1) == []


def test_slots_for_groups_merges_groups():
    svc = ScheduleService(InMemorySchedules())
    svc.add_slot(current_role=Role.ADMIN, group_id=1, day="Mon", start="08:00", end="10:00")
    svc.add_slot(current_role=Role.ADMIN, group_id=2, day="Tue", start="08:00", end="10:00")
    svc.add_slot(current_role=Role.ADMIN, group_id=3, day="Wed", start="08:00", end="10:00")

    days = {s.day for s in svc.slots_for_groups([1, 3])}

    assert days == {Weekday.MON, Weekday.WED}
    assert svc.slots_for_groups([]) == []
