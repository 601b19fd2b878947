from __future__ import annotations

from flask import Flask, flash, redirect, render_template, url_for

from ..common.web import flash_domain_error, flash_unexpected
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    svc = container.subcontractor_service

    @app.route("/settings/subcontractors", methods=["GET"], endpoint="subcontractor_settings")
    def subcontractor_settings():
        suppliers = []
        if svc is None:
            flash("Base de datos de adquisiciones no configurada", "warning")
        else:
            try:
                suppliers = svc.list_subcontractors()
            except Exception:
                flash_unexpected("Error al cargar subcontratistas")
        return render_template("settings/subcontractors.html", suppliers=suppliers, active_page="subcontractors")

    @app.route("/settings/subcontractors/<int:supplier_id>/remove", methods=["POST"], endpoint="remove_subcontractor")
    def remove_subcontractor(supplier_id: int):
        if svc is None:
            flash("Base de datos de adquisiciones no configurada", "warning")
            return redirect(url_for("subcontractor_settings"))
        try:
            svc.remove(supplier_id)
            flash("Subcontratista quitado", "info")
        except DomainError as e:
            flash_domain_error(e)
        except Exception:
            flash_unexpected("Error al quitar el subcontratista")
        return redirect(url_for("subcontractor_settings"))
