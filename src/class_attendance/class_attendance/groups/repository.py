from __future__ import annotations

from typing import Optional, Protocol

from .model import Group


class GroupRepository(Protocol):
    def get_by_id(self, group_id: int) -> Optional[Group]:
        raise NotImplementedError

    def update_tolerance(self, *, group_id: int, tolerance_minutes: int) -> bool:
        raise NotImplementedError

    def update_strategy_kind(self, *, group_id: int, strategy_kind: str) -> bool:
        raise NotImplementedError
