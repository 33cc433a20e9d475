import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workforce_attendance"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

MANUAL_ENTRY_AUTHOR = os.getenv("MANUAL_ENTRY_AUTHOR", "admin")

# Create missing tables on startup.
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
