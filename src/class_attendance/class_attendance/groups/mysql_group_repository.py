from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Group
from .repository import GroupRepository


class MySQLGroupRepository(GroupRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, group_id: int) -> Optional[Group]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    g.group_id, g.name, g.subject_name, g.teacher_id, g.semester, g.year, g.capacity,
                    g.tolerance_minutes, g.strategy_kind,
                    (SELECT COUNT(*) FROM enrollments e WHERE e.group_id = g.group_id) AS enrolled_count
                FROM class_groups g
                WHERE g.group_id=%s
                """,
                (int(group_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Group(
                group_id=int(r["group_id"]),
                name=r["name"],
                subject_name=r["subject_name"],
                teacher_id=int(r["teacher_id"]) if r.get("teacher_id") is not None else None,
                semester=int(r["semester"]),
                year=int(r["year"]),
                capacity=int(r["capacity"]),
                enrolled_count=int(r.get("enrolled_count") or 0),
                tolerance_minutes=int(r["tolerance_minutes"]) if r.get("tolerance_minutes") is not None else None,
                strategy_kind=r.get("strategy_kind"),
            )

    def update_tolerance(self, *, group_id: int, tolerance_minutes: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE class_groups SET tolerance_minutes=%s WHERE group_id=%s",
                (int(tolerance_minutes), int(group_id)),
            )
            return cur.rowcount > 0

    def update_strategy_kind(self, *, group_id: int, strategy_kind: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE class_groups SET strategy_kind=%s WHERE group_id=%s",
                (strategy_kind, int(group_id)),
            )
            return cur.rowcount > 0
