from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Enrollment:
    """Thực thể miền (domain): Đăng ký học của sinh viên vào một nhóm lớp."""

    enrollment_id: int
    student_id: int
    group_id: int
    enrolled_on: date
    semester: int
    year: int
