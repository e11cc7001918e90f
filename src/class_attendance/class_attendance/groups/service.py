from __future__ import annotations

import logging

from ..attendance.strategies import parse_strategy_kind
from ..common.validators import require_positive_id, require_role
from ..core.constants import (
    DEFAULT_STRATEGY_KIND,
    DEFAULT_TOLERANCE_MINUTES,
    MAX_TOLERANCE_MINUTES,
    MIN_TOLERANCE_MINUTES,
    RECOMMENDED_TOLERANCE_RANGES,
)
from ..core.enums import Role, StrategyKind
from ..core.exceptions import InvalidToleranceRange, ValidationError
from .model import Group, GroupPolicy
from .repository import GroupRepository

logger = logging.getLogger(__name__)


class GroupConfigService:
    """Per-group attendance configuration: tolerance and classification strategy.

    This is the validation boundary for the classifier: values that leave
    ``get_policy`` are in range and map to a known strategy.
    """

    def __init__(
        self,
        groups: GroupRepository,
        *,
        default_tolerance: int = DEFAULT_TOLERANCE_MINUTES,
        default_strategy: StrategyKind = DEFAULT_STRATEGY_KIND,
    ):
        self._groups = groups
        self._default_tolerance = self._require_tolerance(default_tolerance)
        self._default_strategy = parse_strategy_kind(default_strategy)

    @staticmethod
    def is_valid_tolerance(value) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and MIN_TOLERANCE_MINUTES <= value <= MAX_TOLERANCE_MINUTES

    @staticmethod
    def valid_range() -> tuple[int, int]:
        return MIN_TOLERANCE_MINUTES, MAX_TOLERANCE_MINUTES

    @staticmethod
    def recommended_ranges() -> dict[str, tuple[int, int]]:
        return dict(RECOMMENDED_TOLERANCE_RANGES)

    def _require_tolerance(self, value) -> int:
        if not self.is_valid_tolerance(value):
            raise InvalidToleranceRange(
                f"Thời gian cho phép phải từ {MIN_TOLERANCE_MINUTES} đến {MAX_TOLERANCE_MINUTES} phút (nhận: {value!r})"
            )
        return value

    def _require_group(self, group_id: int) -> Group:
        group_id = require_positive_id(group_id, "Nhóm lớp")
        group = self._groups.get_by_id(group_id)
        if not group:
            raise ValidationError(f"Nhóm lớp {group_id} không tồn tại")
        return group

    def configure_tolerance(self, *, current_role: Role, group_id: int, tolerance_minutes: int) -> None:
        require_role(current_role, Role.ADMIN, Role.TEACHER)
        group = self._require_group(group_id)
        tolerance = self._require_tolerance(tolerance_minutes)

        if not self._groups.update_tolerance(group_id=group.group_id, tolerance_minutes=tolerance):
            raise ValidationError("Cập nhật thời gian cho phép thất bại")
        logger.info("group %s tolerance set to %s min", group.group_id, tolerance)

    def configure_strategy(self, *, current_role: Role, group_id: int, strategy_kind: str) -> StrategyKind:
        require_role(current_role, Role.ADMIN, Role.TEACHER)
        group = self._require_group(group_id)
        kind = parse_strategy_kind(strategy_kind)

        if not self._groups.update_strategy_kind(group_id=group.group_id, strategy_kind=kind.value):
            raise ValidationError("Cập nhật chiến lược điểm danh thất bại")
        logger.info("group %s strategy set to %s", group.group_id, kind.value)
        return kind

    def get_policy(self, group_id: int) -> GroupPolicy:
        """Resolve the stored configuration of a group into a trusted policy.

        Unset values fall back to the defaults. A stored value that is set but
        invalid raises instead, so corrupted rows are never masked.
        """
        group = self._require_group(group_id)

        tolerance = group.tolerance_minutes
        if tolerance is None:
            tolerance = self._default_tolerance
        else:
            tolerance = self._require_tolerance(tolerance)

        label = (group.strategy_kind or "").strip()
        kind = parse_strategy_kind(label) if label else self._default_strategy

        return GroupPolicy(tolerance_minutes=tolerance, strategy_kind=kind)
