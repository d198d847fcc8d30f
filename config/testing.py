SECRET_KEY = "test-secret"

STORE_BACKEND = "memory"
GSHEET_CONFIG = {}

TIMEOUT_THRESHOLD_MINUTES = 120
TIMEOUT_RETURN_MINUTES = 30
DEFAULT_HOUR_REQUIREMENT = "6:00:00"
MISSED_TIME_MULTIPLIER = 2

EDITORS = ["admin@"]

DEBUG = False
TESTING = True
