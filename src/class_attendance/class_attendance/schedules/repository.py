from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from ..common.time_of_day import TimeOfDay
from .model import Schedule
from .slot import Weekday


class ScheduleRepository(Protocol):
    def list_for_group(self, group_id: int) -> Sequence[Schedule]:
        raise NotImplementedError

    def list_for_groups(self, group_ids: Iterable[int]) -> Sequence[Schedule]:
        raise NotImplementedError

    def add(self, *, group_id: int, day: Weekday, start: TimeOfDay, end: TimeOfDay) -> int:
        """Insert a slot. Returns schedule_id."""

        raise NotImplementedError

    def delete(self, *, schedule_id: int) -> bool:
        raise NotImplementedError

    def delete_for_group(self, *, group_id: int) -> int:
        """Remove every slot of a group. Returns the number of deleted rows."""

        raise NotImplementedError
