import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "mess_attendance_test"),
}

APP_AUTH_USERNAME = "operator"
APP_AUTH_PASSWORD = "secret"

MAX_CONTENT_LENGTH = 16 * 1024 * 1024

DEBUG = False
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
