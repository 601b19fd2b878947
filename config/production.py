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

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from_env("DB_", default_database="rrhh_db")
PROCUREMENT_DB_CONFIG = procurement_db_config_from_env()

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
