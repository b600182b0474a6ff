import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "khata_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# First sign-in with this email creates the owner (admin) account
ADMIN_BOOTSTRAP_EMAIL = os.getenv("ADMIN_BOOTSTRAP_EMAIL", "")
MAX_LOGIN_ATTEMPTS = int(os.getenv("MAX_LOGIN_ATTEMPTS", "5"))
LOGIN_LOCKOUT_MINUTES = int(os.getenv("LOGIN_LOCKOUT_MINUTES", "15"))
MAX_PHOTO_BYTES = int(os.getenv("MAX_PHOTO_BYTES", str(500 * 1024)))

# today | current-week | any
ATTENDANCE_EDIT_WINDOW = os.getenv("ATTENDANCE_EDIT_WINDOW", "today")
# full | half | none
HALF_DAY_POLICY = os.getenv("HALF_DAY_POLICY", "full")
