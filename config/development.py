import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "class_attendance"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Group configuration fallbacks for groups that never set their own values
DEFAULT_TOLERANCE_MINUTES = int(os.getenv("DEFAULT_TOLERANCE_MINUTES", "10"))
DEFAULT_STRATEGY_KIND = os.getenv("DEFAULT_STRATEGY_KIND", "STANDARD_LATE_WINDOW")

# If enabled, schema.sql is applied on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
