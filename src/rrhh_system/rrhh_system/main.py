from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, abort, send_file

from config import get_settings_module

from .absences.controller import register as register_absences
from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .capacity.controller import register as register_capacity
from .certifications.controller import register as register_certifications
from .common.logging_config import setup_logging
from .common.validators import format_clp
from .container import build_container
from .core.exceptions import ValidationError
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, list_tables, seed_master_tables
from .documents.controller import register as register_documents
from .employees.controller import register as register_employees
from .materials.controller import register as register_materials
from .org.controller import register as register_org
from .payroll.controller import register as register_payroll
from .reviews.controller import register as register_reviews
from .settings.controller import register as register_settings
from .shifts.controller import register as register_shifts
from .subcontractors.controller import register as register_subcontractors

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app() -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        json_output=bool(getattr(settings, "LOG_JSON", False)),
    )

    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"), static_folder=str(REPO_ROOT / "static"))
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["PORTAL_URL"] = getattr(settings, "PORTAL_URL", "/")
    app.config["COMPANY_NAME"] = getattr(settings, "COMPANY_NAME", "SOMYL S.A.")
    app.add_template_filter(format_clp, "clp")

    db_config = getattr(settings, "DB_CONFIG")
    logger.info(
        "Starting with settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
        logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        seed_master_tables(db_config)

    storage_root = getattr(settings, "STORAGE_ROOT", str(REPO_ROOT / "storage"))
    container = build_container(
        db_config=db_config,
        procurement_db_config=getattr(settings, "PROCUREMENT_DB_CONFIG", None),
        storage_root=storage_root,
        indicators_url=getattr(settings, "INDICATORS_API_URL", "https://mindicador.cl/api"),
        company_name=app.config["COMPANY_NAME"],
    )

    @app.route("/files/<bucket>/<path:path>", methods=["GET"], endpoint="files")
    def files(bucket: str, path: str):
        storage = container.storage
        if bucket != storage.bucket_dir.name:
            abort(404)
        try:
            target = storage.open_path(path)
        except ValidationError:
            abort(404)
        if not target.is_file():
            abort(404)
        return send_file(target)

    register_auth(app, container)
    register_attendance(app, container)
    register_dashboard(app, container)
    register_employees(app, container)
    register_documents(app, container)
    register_certifications(app, container)
    register_materials(app, container)
    register_absences(app, container)
    register_reviews(app, container)
    register_payroll(app, container)
    register_settings(app, container)
    register_shifts(app, container)
    register_subcontractors(app, container)
    register_capacity(app, container)
    register_org(app, container)

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000)
