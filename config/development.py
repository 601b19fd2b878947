import os

from .config import (
    COMPANY_NAME,
    INDICATORS_API_URL,
    LOG_JSON,
    PORTAL_URL,
    STORAGE_ROOT,
    db_config_from_env,
    env_flag,
    procurement_db_config_from_env,
)

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env("DB_", default_database="rrhh_db", default_password="root")
PROCUREMENT_DB_CONFIG = procurement_db_config_from_env()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Optional: also fill empty lookup tables with master rows
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
