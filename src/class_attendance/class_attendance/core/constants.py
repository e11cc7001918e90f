"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import StrategyKind

DEFAULT_TOLERANCE_MINUTES = 10
MIN_TOLERANCE_MINUTES = 0
MAX_TOLERANCE_MINUTES = 60
DEFAULT_STRATEGY_KIND = StrategyKind.STANDARD_LATE_WINDOW

# Upper bound of the late band, as a multiple of the tolerance.
LATE_WINDOW_FACTOR = 3

DEFAULT_HISTORY_LIMIT = 30

RECOMMENDED_TOLERANCE_RANGES = {
    "very_strict": (0, 5),
    "strict": (6, 10),
    "standard": (11, 15),
    "flexible": (16, 25),
    "very_flexible": (26, 60),
}
