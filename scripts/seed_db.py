"""Fill the HR lookup tables with master rows.

Only tables that are still empty are touched, so running it twice is safe.
"""
from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.rrhh_system.rrhh_system.common.logging_config import setup_logging
from src.rrhh_system.rrhh_system.database.bootstrap import seed_master_tables

logger = logging.getLogger("seed_db")


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    setup_logging(level=getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    logger.info("Seeding master tables in %s", db_config.get("database"))
    inserted = seed_master_tables(db_config)
    logger.info("Done: %s rows inserted across %s tables", sum(inserted.values()), len(inserted))


if __name__ == "__main__":
    main()
