import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "shiftmate"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "shiftmate"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

FALLBACK_RATE_CENTS = int(os.getenv("FALLBACK_RATE_CENTS", "2500"))
WEEKNIGHT_THRESHOLD = os.getenv("WEEKNIGHT_THRESHOLD", "19:00")
BILLING_MAX_WORKERS = int(os.getenv("BILLING_MAX_WORKERS", "8"))
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "AUD")
