import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "class_attendance"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_TOLERANCE_MINUTES = int(os.getenv("DEFAULT_TOLERANCE_MINUTES", "10"))
DEFAULT_STRATEGY_KIND = os.getenv("DEFAULT_STRATEGY_KIND", "STANDARD_LATE_WINDOW")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
