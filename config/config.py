"""Settings shared by every environment, read from the process environment."""
import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


def db_config_from_env(prefix: str, *, default_database: str, default_password: str = "") -> dict:
    return {
        "host": os.environ.get(f"{prefix}HOST", "localhost"),
        "port": int(os.environ.get(f"{prefix}PORT", "3306")),
        "user": os.environ.get(f"{prefix}USER", "root"),
        "password": os.environ.get(f"{prefix}PASSWORD", default_password),
        "database": os.environ.get(f"{prefix}NAME", default_database),
    }


def procurement_db_config_from_env():
    # The procurement database is optional; without a name the subcontractor screen is disabled.
    if not os.environ.get("PROCUREMENT_DB_NAME"):
        return None
    return db_config_from_env("PROCUREMENT_DB_", default_database="procurement_db")


PORTAL_URL = os.environ.get("PORTAL_URL", "http://localhost:5173")
INDICATORS_API_URL = os.environ.get("INDICATORS_API_URL", "https://mindicador.cl/api")
STORAGE_ROOT = os.environ.get("STORAGE_ROOT", "storage")
COMPANY_NAME = os.environ.get("COMPANY_NAME", "SOMYL S.A.")
LOG_JSON = env_flag("LOG_JSON")
