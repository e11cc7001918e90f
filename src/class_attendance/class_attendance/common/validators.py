from __future__ import annotations

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError


def require_positive_id(value: int, field_name: str) -> int:
    try:
        value = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} không hợp lệ")
    if value <= 0:
        raise ValidationError(f"{field_name} không hợp lệ")
    return value


def require_role(current_role: Role, *allowed: Role) -> None:
    if current_role not in allowed:
        raise AuthorizationError("Bạn không có quyền")
