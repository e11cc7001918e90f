from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import StrategyKind


@dataclass(frozen=True)
class Group:
    """Thực thể miền (domain): Nhóm lớp học phần."""

    group_id: int
    name: str
    subject_name: str
    teacher_id: Optional[int]
    semester: int
    year: int
    capacity: int
    enrolled_count: int = 0
    # Raw stored configuration; None means "not configured".
    tolerance_minutes: Optional[int] = None
    strategy_kind: Optional[str] = None

    @property
    def is_full(self) -> bool:
        return self.enrolled_count >= self.capacity


@dataclass(frozen=True)
class GroupPolicy:
    """Cấu hình đã kiểm tra, truyền trực tiếp vào bộ phân loại điểm danh."""

    tolerance_minutes: int
    strategy_kind: StrategyKind
