from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Vai trò người dùng dùng cho phân quyền."""

    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"


class AttendanceState(str, Enum):
    """Trạng thái điểm danh chuẩn hoá lưu trong CSDL."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    ABSENT = "ABSENT"


class StrategyKind(str, Enum):
    """Chiến lược phân loại điểm danh, cấu hình theo từng nhóm lớp."""

    STANDARD_PRESENT = "STANDARD_PRESENT"
    STANDARD_LATE_WINDOW = "STANDARD_LATE_WINDOW"
    STANDARD_ABSENT_ONLY = "STANDARD_ABSENT_ONLY"
