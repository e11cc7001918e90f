from __future__ import annotations

from ..common.time_of_day import TimeOfDay, difference
from ..core.constants import DEFAULT_STRATEGY_KIND
from ..core.enums import AttendanceState, StrategyKind
from .strategies import strategy_for


def classify_delta(delta: int, tolerance: int, kind: StrategyKind = DEFAULT_STRATEGY_KIND) -> AttendanceState:
    # Arriving early is never penalized.
    return strategy_for(kind)(max(delta, 0), tolerance)


def classify(
    marked_time: TimeOfDay,
    class_start: TimeOfDay,
    tolerance: int,
    kind: StrategyKind = DEFAULT_STRATEGY_KIND,
) -> AttendanceState:
    """Decide ON_TIME / LATE / ABSENT for a mark against the class start.

    Pure: the same inputs always give the same state. ``tolerance`` is trusted
    to be already validated by the group configuration.
    """
    return classify_delta(difference(marked_time, class_start), tolerance, kind)
