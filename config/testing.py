import os

SECRET_KEY = "test-secret"
JWT_SECRET = "test-jwt-secret-of-at-least-32-bytes"

STORE_BACKEND = "memory"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "employee_records_test"),
    "connection_timeout": 2,
}

API_PREFIX = ""

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# cheap hashes keep the suite fast
PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"

AUTO_INIT_DB = False
AUTO_CREATE_ADMIN = False

DEFAULT_ADMIN = {
    "username": "admin",
    "email": "admin@company.com",
    "password": "admin123",
    "role": "super_admin",
}
