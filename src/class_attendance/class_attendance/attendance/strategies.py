"""Attendance classification strategies.

Each strategy is a total function ``(delta, tolerance) -> AttendanceState`` where
``delta`` is minutes after class start (never negative here) and ``tolerance``
is a trusted, already validated number of minutes. Strategies are selected by
``StrategyKind``, one per group.
"""

from __future__ import annotations

from typing import Callable, Mapping

from ..core.constants import LATE_WINDOW_FACTOR
from ..core.enums import AttendanceState, StrategyKind
from ..core.exceptions import UnrecognizedStrategyKind

Strategy = Callable[[int, int], AttendanceState]


def late_window(delta: int, tolerance: int) -> AttendanceState:
    """On time within tolerance, late up to 3x tolerance, absent after."""
    if delta <= tolerance:
        return AttendanceState.ON_TIME
    if delta <= tolerance * LATE_WINDOW_FACTOR:
        return AttendanceState.LATE
    return AttendanceState.ABSENT


def lenient(delta: int, tolerance: int) -> AttendanceState:
    """Like ``late_window`` but the late band still counts as on time."""
    if delta <= tolerance * LATE_WINDOW_FACTOR:
        return AttendanceState.ON_TIME
    return AttendanceState.ABSENT


def strict(delta: int, tolerance: int) -> AttendanceState:
    """Anything past the tolerance is an absence."""
    if delta <= tolerance:
        return AttendanceState.ON_TIME
    return AttendanceState.ABSENT


STRATEGIES: Mapping[StrategyKind, Strategy] = {
    StrategyKind.STANDARD_LATE_WINDOW: late_window,
    StrategyKind.STANDARD_PRESENT: lenient,
    StrategyKind.STANDARD_ABSENT_ONLY: strict,
}


def parse_strategy_kind(label: str) -> StrategyKind:
    """Map a stored label to its ``StrategyKind`` (case and surrounding blanks ignored)."""
    if isinstance(label, StrategyKind):
        return label
    if isinstance(label, str):
        try:
            return StrategyKind(label.strip().upper())
        except ValueError:
            pass
    raise UnrecognizedStrategyKind(
        f"Chiến lược không hợp lệ: {label!r}. Giá trị hợp lệ: {', '.join(k.value for k in StrategyKind)}"
    )


def strategy_for(kind: StrategyKind) -> Strategy:
    try:
        return STRATEGIES[kind]
    except KeyError:
        raise UnrecognizedStrategyKind(f"Chiến lược không hợp lệ: {kind!r}") from None
