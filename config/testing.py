import os

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "khata_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False

ADMIN_BOOTSTRAP_EMAIL = "owner@example.com"
MAX_LOGIN_ATTEMPTS = 3
LOGIN_LOCKOUT_MINUTES = 15
MAX_PHOTO_BYTES = 500 * 1024

ATTENDANCE_EDIT_WINDOW = os.getenv("ATTENDANCE_EDIT_WINDOW", "today")
HALF_DAY_POLICY = os.getenv("HALF_DAY_POLICY", "full")
