from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import Enrollment


class EnrollmentRepository(Protocol):
    def is_enrolled(self, *, student_id: int, group_id: int) -> bool:
        raise NotImplementedError

    def list_group_ids_for_student(self, student_id: int) -> Sequence[int]:
        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[Enrollment]:
        raise NotImplementedError

    def create(self, *, student_id: int, group_id: int, enrolled_on: date, semester: int, year: int) -> int:
        raise NotImplementedError
