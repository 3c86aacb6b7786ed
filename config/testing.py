DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "shiftmate_test",
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

FALLBACK_RATE_CENTS = 2500
WEEKNIGHT_THRESHOLD = "19:00"
BILLING_MAX_WORKERS = 2
DEFAULT_CURRENCY = "AUD"
