import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
JWT_SECRET = os.getenv("JWT_SECRET", "please-set-JWT_SECRET")

STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "employee_records"),
    "connection_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "5")),
}

API_PREFIX = os.getenv("API_PREFIX", "")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_CREATE_ADMIN = False

DEFAULT_ADMIN = {
    "username": os.getenv("DEFAULT_ADMIN_USERNAME", "admin"),
    "email": os.getenv("DEFAULT_ADMIN_EMAIL", "admin@company.com"),
    "password": os.getenv("DEFAULT_ADMIN_PASSWORD", ""),
    "role": "super_admin",
}
