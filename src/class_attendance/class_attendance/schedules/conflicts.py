"""Weekly schedule conflict detection.

Two slots conflict when they fall on the same weekday and their closed time
ranges intersect (``c.start <= e.end and e.start <= c.end``). Touching
endpoints count as a conflict; no gap between back-to-back classes is assumed.
"""

from __future__ import annotations

from typing import Iterable

from .slot import WeeklySlot


def has_conflict(candidate_slots: Iterable[WeeklySlot], existing_slots: Iterable[WeeklySlot]) -> bool:
    """True as soon as any candidate slot clashes with any existing slot."""
    existing = list(existing_slots)
    if not existing:
        return False

    for c in candidate_slots:
        for e in existing:
            if c.overlaps(e):
                return True
    return False


def find_conflicts(
    candidate_slots: Iterable[WeeklySlot], existing_slots: Iterable[WeeklySlot]
) -> list[tuple[WeeklySlot, WeeklySlot]]:
    """Every clashing (candidate, existing) pair, in input order."""
    existing = list(existing_slots)
    return [(c, e) for c in candidate_slots for e in existing if c.overlaps(e)]
