from __future__ import annotations

from typing import Iterable, Sequence

from ..common.time_of_day import TimeOfDay
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_time_of_day
from .model import Schedule
from .repository import ScheduleRepository
from .slot import Weekday

_COLUMNS = "schedule_id, group_id, day, start_time, end_time"


def _to_schedule(r: dict) -> Schedule:
    return Schedule(
        schedule_id=int(r["schedule_id"]),
        group_id=int(r["group_id"]),
        day=Weekday.parse(r["day"]),
        start=to_time_of_day(r["start_time"]),
        end=to_time_of_day(r["end_time"]),
    )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_group(self, group_id: int) -> Sequence[Schedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM schedules
                WHERE group_id=%s
                ORDER BY FIELD(day, 'MON','TUE','WED','THU','FRI','SAT','SUN'), start_time
                """,
                (int(group_id),),
            )
            return [_to_schedule(r) for r in fetchall(cur)]

    def list_for_groups(self, group_ids: Iterable[int]) -> Sequence[Schedule]:
        ids = [int(g) for g in group_ids]
        if not ids:
            return []

        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM schedules
                WHERE group_id IN ({placeholders})
                ORDER BY group_id, FIELD(day, 'MON','TUE','WED','THU','FRI','SAT','SUN'), start_time
                """,
                tuple(ids),
            )
            return [_to_schedule(r) for r in fetchall(cur)]

    def add(self, *, group_id: int, day: Weekday, start: TimeOfDay, end: TimeOfDay) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO schedules(group_id, day, start_time, end_time)
                VALUES(%s,%s,%s,%s)
                """,
                (int(group_id), day.value, start.to_time(), end.to_time()),
            )
            return int(cur.lastrowid or 0)

    def delete(self, *, schedule_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM schedules WHERE schedule_id=%s", (int(schedule_id),))
            return cur.rowcount > 0

    def delete_for_group(self, *, group_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM schedules WHERE group_id=%s", (int(group_id),))
            return int(cur.rowcount or 0)
