from __future__ import annotations

import re
from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..common.time_of_day import MINUTES_PER_DAY, TimeOfDay
from ..core.exceptions import InvalidTimeFormat
from .connection import DatabaseConnection

Row = Dict[str, Any]

# TIME as text: "HH:MM", "HH:MM:SS" or "HH:MM:SS.ffffff"
_MYSQL_TIME = re.compile(r"([0-9]{2}:[0-9]{2})(?::[0-5][0-9](?:\.[0-9]+)?)?")


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator[Tuple[Any, Any]]:
    """Một giao dịch ngắn: commit khi khối lệnh chạy xong, rollback khi có lỗi."""
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
    except Exception:
        conn.rollback()
        raise
    else:
        conn.commit()
    finally:
        cur.close()
        conn.close()


def fetchone(cur) -> Optional[Row]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Row]:
    return list(cur.fetchall() or [])


def to_time_of_day(value: Any) -> TimeOfDay:
    """Convert a MySQL ``TIME`` column value into a :class:`TimeOfDay`.

    mysql-connector hands TIME back as ``timedelta`` (the usual case),
    ``datetime.time`` or text depending on cursor settings. TIME can hold
    durations outside one day (``24:00:00``, ``-01:00:00``); those raise
    :class:`InvalidTimeFormat` instead of wrapping.
    """
    if isinstance(value, TimeOfDay):
        return value

    if isinstance(value, time):
        return TimeOfDay.from_time(value)

    if isinstance(value, timedelta):
        seconds = int(value.total_seconds())
        if not 0 <= seconds < MINUTES_PER_DAY * 60:
            raise InvalidTimeFormat(f"Giờ ngoài phạm vi một ngày: {value!r}")
        return TimeOfDay(seconds // 60)

    if isinstance(value, str):
        m = _MYSQL_TIME.fullmatch(value.strip())
        if not m:
            raise InvalidTimeFormat(f"Giờ không hợp lệ: {value!r}")
        return TimeOfDay.parse(m.group(1))

    raise InvalidTimeFormat(f"Kiểu dữ liệu TIME không hỗ trợ: {type(value).__name__}")
