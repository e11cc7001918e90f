from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Enrollment
from .repository import EnrollmentRepository


class MySQLEnrollmentRepository(EnrollmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def is_enrolled(self, *, student_id: int, group_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS found FROM enrollments WHERE student_id=%s AND group_id=%s",
                (int(student_id), int(group_id)),
            )
            return fetchone(cur) is not None

    def list_group_ids_for_student(self, student_id: int) -> Sequence[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT group_id FROM enrollments WHERE student_id=%s", (int(student_id),))
            return [int(r["group_id"]) for r in fetchall(cur)]

    def list_for_student(self, student_id: int) -> Sequence[Enrollment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT enrollment_id, student_id, group_id, enrolled_on, semester, year
                FROM enrollments
                WHERE student_id=%s
                ORDER BY year DESC, semester DESC, enrollment_id
                """,
                (int(student_id),),
            )
            return [
                Enrollment(
                    enrollment_id=int(r["enrollment_id"]),
                    student_id=int(r["student_id"]),
                    group_id=int(r["group_id"]),
                    enrolled_on=r["enrolled_on"],
                    semester=int(r["semester"]),
                    year=int(r["year"]),
                )
                for r in fetchall(cur)
            ]

    def create(self, *, student_id: int, group_id: int, enrolled_on: date, semester: int, year: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO enrollments(student_id, group_id, enrolled_on, semester, year)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(student_id), int(group_id), enrolled_on, int(semester), int(year)),
            )
            return int(cur.lastrowid or 0)
