from __future__ import annotations

from datetime import datetime

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday
    return datetime(2025, 3, 12, 9, 5, 0)
