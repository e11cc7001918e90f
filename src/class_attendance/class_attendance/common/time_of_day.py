from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import time

from ..core.exceptions import InvalidTimeFormat

_HHMM = re.compile(r"([0-9]{2}):([0-9]{2})")

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """A wall-clock time as minutes since midnight, in [0, 1439].

    Only same-day arithmetic is supported: nothing here wraps around midnight.
    """

    minutes: int

    def __post_init__(self) -> None:
        if not 0 <= self.minutes < MINUTES_PER_DAY:
            raise InvalidTimeFormat(f"Giờ không hợp lệ: {self.minutes} phút")

    @classmethod
    def parse(cls, text: str) -> "TimeOfDay":
        """Parse a strict, zero-padded 24-hour ``HH:MM`` string."""
        if not isinstance(text, str):
            raise InvalidTimeFormat(f"Giờ không hợp lệ (HH:MM): {text!r}")

        m = _HHMM.fullmatch(text)
        if not m:
            raise InvalidTimeFormat(f"Giờ không hợp lệ (HH:MM): {text!r}")

        hour, minute = int(m.group(1)), int(m.group(2))
        if hour > 23 or minute > 59:
            raise InvalidTimeFormat(f"Giờ không hợp lệ (HH:MM): {text!r}")
        return cls(hour * 60 + minute)

    @classmethod
    def from_time(cls, value: time) -> "TimeOfDay":
        """Truncate a ``datetime.time`` (seconds are dropped)."""
        return cls(value.hour * 60 + value.minute)

    @property
    def hour(self) -> int:
        return self.minutes // 60

    @property
    def minute(self) -> int:
        return self.minutes % 60

    def to_time(self) -> time:
        return time(hour=self.hour, minute=self.minute)

    def format(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    def __str__(self) -> str:
        return self.format()


def difference(a: TimeOfDay, b: TimeOfDay) -> int:
    """Signed minutes from ``b`` to ``a`` (``a - b``)."""
    return a.minutes - b.minutes
