"""Ví dụ: dùng service layer trực tiếp.

Điểm danh một sinh viên theo cấu hình của nhóm lớp (thời gian cho phép + chiến lược).
"""

from datetime import date

from src.class_attendance.class_attendance.core.enums import Role
from src.class_attendance.class_attendance.main import create_container


def main():
    container = create_container()
    result = container.attendance_service.mark(
        current_role=Role.TEACHER,
        student_id=1,
        group_id=1,
        work_date=date.today(),
        marked_time="08:25",
        class_start="08:00",
    )
    print(result.state.value, f"(delta={result.delta_minutes} min, {result.strategy_kind.value})")


if __name__ == "__main__":
    main()
