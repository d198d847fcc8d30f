import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORE_BACKEND = os.getenv("STORE_BACKEND", "gsheet")

GSHEET_CONFIG = {
    "spreadsheet_id": os.getenv("GSHEET_ID", ""),
    "worksheet": os.getenv("GSHEET_WORKSHEET", "Result Sheet"),
    "credentials_file": os.getenv("GOOGLE_APPLICATION_CREDENTIALS", "/etc/secrets/service_account.json"),
}

TIMEOUT_THRESHOLD_MINUTES = int(os.getenv("TIMEOUT_THRESHOLD_MINUTES", "120"))
TIMEOUT_RETURN_MINUTES = int(os.getenv("TIMEOUT_RETURN_MINUTES", "30"))
DEFAULT_HOUR_REQUIREMENT = os.getenv("DEFAULT_HOUR_REQUIREMENT", "6:00:00")
MISSED_TIME_MULTIPLIER = int(os.getenv("MISSED_TIME_MULTIPLIER", "2"))

EDITORS = [e.strip() for e in os.getenv("EDITORS", "").split(",") if e.strip()]

DEBUG = False
