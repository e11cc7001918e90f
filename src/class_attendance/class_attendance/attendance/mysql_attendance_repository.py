from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.time_of_day import TimeOfDay
from ..core.enums import AttendanceState
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_time_of_day
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "attendance_id, student_id, group_id, work_date, marked_time, class_start, state, note"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        student_id=int(r["student_id"]),
        group_id=int(r["group_id"]),
        work_date=r["work_date"],
        marked_time=to_time_of_day(r["marked_time"]),
        class_start=to_time_of_day(r["class_start"]),
        state=AttendanceState(r["state"]),
        note=r.get("note"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_occurrence(
        self, *, student_id: int, group_id: int, work_date: date, class_start: TimeOfDay
    ) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE student_id=%s AND group_id=%s AND work_date=%s AND class_start=%s
                """,
                (int(student_id), int(group_id), work_date, class_start.to_time()),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_recent_for_student(self, student_id: int, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE student_id=%s
                ORDER BY work_date DESC, marked_time DESC
                LIMIT %s
                """,
                (int(student_id), int(limit)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_student_group(self, *, student_id: int, group_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE student_id=%s AND group_id=%s
                ORDER BY work_date ASC, class_start ASC
                """,
                (int(student_id), int(group_id)),
            )
            return [_to_record(r) for r in fetchall(cur)]

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(student_id, group_id, work_date, marked_time, class_start, state, note)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(student_id), int(group_id), work_date, marked_time.to_time(), class_start.to_time(), state.value, note),
            )
            return int(cur.lastrowid or 0)
