import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "plant_management"),
}

# Set DATABASE_URL to bypass DB_CONFIG (e.g. sqlite:///plant.db for a quick local run).
SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL") or None

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, the app creates the database and tables on startup (idempotent).
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed a demo supervisor and crew on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
