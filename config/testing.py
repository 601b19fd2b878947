import os

from .config import COMPANY_NAME, INDICATORS_API_URL, PORTAL_URL, db_config_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env("DB_", default_database="rrhh_test")
PROCUREMENT_DB_CONFIG = None

STORAGE_ROOT = os.getenv("STORAGE_ROOT", "/tmp/rrhh-test-storage")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
LOG_JSON = False

AUTO_INIT_DB = False
AUTO_SEED_DB = False
