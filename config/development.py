import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
JWT_SECRET = os.getenv("JWT_SECRET", "dev-jwt-secret")

# "mysql" or "memory" (process-local, lost on restart)
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

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also create the bootstrap admin on startup
AUTO_CREATE_ADMIN = bool(int(os.getenv("AUTO_CREATE_ADMIN", "0")))

DEFAULT_ADMIN = {
    "username": os.getenv("DEFAULT_ADMIN_USERNAME", "admin"),
    "email": os.getenv("DEFAULT_ADMIN_EMAIL", "admin@company.com"),
    "password": os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123"),
    "role": "super_admin",
}
