from __future__ import annotations

from flask import Flask, abort, flash, redirect, render_template, url_for

from ..common.web import flash_domain_error, flash_unexpected, form_str
from ..container import Container
from ..core.exceptions import DomainError
from .model import LOOKUP_KINDS


def register(app: Flask, container: Container) -> None:
    svc = container.lookup_service

    @app.route("/settings/catalogs/<kind>", methods=["GET"], endpoint="lookup_settings")
    def lookup_settings(kind: str):
        if kind not in LOOKUP_KINDS:
            abort(404)
        return render_template(
            "settings/lookups.html",
            kind=LOOKUP_KINDS[kind],
            items=svc.list_items(kind),
            active_page=kind,
        )

    @app.route("/settings/catalogs/<kind>", methods=["POST"], endpoint="create_lookup")
    def create_lookup(kind: str):
        try:
            svc.create_item(kind, form_str("name"))
            flash("Registro creado", "success")
        except DomainError as e:
            flash_domain_error(e)
        except Exception:
            flash_unexpected("Error al crear el registro")
        return redirect(url_for("lookup_settings", kind=kind))

    @app.route("/settings/catalogs/<kind>/<int:item_id>/delete", methods=["POST"], endpoint="delete_lookup")
    def delete_lookup(kind: str, item_id: int):
        try:
            svc.delete_item(kind, item_id)
            flash("Registro eliminado", "info")
        except DomainError as e:
            flash_domain_error(e)
        except Exception:
            flash_unexpected("Error al eliminar el registro")
        return redirect(url_for("lookup_settings", kind=kind))
