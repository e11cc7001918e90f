from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_STRATEGY_KIND, DEFAULT_TOLERANCE_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .enrollments.mysql_enrollment_repository import MySQLEnrollmentRepository
from .enrollments.service import EnrollmentService
from .groups.mysql_group_repository import MySQLGroupRepository
from .groups.service import GroupConfigService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.service import ScheduleService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    groups_repo: MySQLGroupRepository
    schedules_repo: MySQLScheduleRepository
    enrollments_repo: MySQLEnrollmentRepository
    attendance_repo: MySQLAttendanceRepository

    group_config_service: GroupConfigService
    schedule_service: ScheduleService
    enrollment_service: EnrollmentService
    attendance_service: AttendanceService


def build_container(
    *,
    db_config: dict,
    default_tolerance: int = DEFAULT_TOLERANCE_MINUTES,
    default_strategy: str = DEFAULT_STRATEGY_KIND.value,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    groups_repo = MySQLGroupRepository(conn)
    schedules_repo = MySQLScheduleRepository(conn)
    enrollments_repo = MySQLEnrollmentRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    group_config_service = GroupConfigService(
        groups_repo,
        default_tolerance=int(default_tolerance),
        default_strategy=default_strategy,
    )
    schedule_service = ScheduleService(schedules_repo)
    enrollment_service = EnrollmentService(enrollments_repo, groups_repo, schedule_service)
    attendance_service = AttendanceService(attendance_repo, enrollments_repo, schedule_service, group_config_service)

    return Container(
        conn=conn,
        groups_repo=groups_repo,
        schedules_repo=schedules_repo,
        enrollments_repo=enrollments_repo,
        attendance_repo=attendance_repo,
        group_config_service=group_config_service,
        schedule_service=schedule_service,
        enrollment_service=enrollment_service,
        attendance_service=attendance_service,
    )
