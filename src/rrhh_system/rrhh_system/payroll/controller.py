from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_month, today_local
from ..common.web import flash_domain_error, flash_unexpected
from ..container import Container
from ..core.exceptions import DomainError
from .service import FIELDS


def register(app: Flask, container: Container) -> None:
    svc = container.payroll_service

    @app.route("/payroll/settings", methods=["GET", "POST"], endpoint="payroll_settings")
    def payroll_settings():
        month_str = (request.values.get("month") or today_local().strftime("%Y-%m")).strip()
        try:
            month = parse_month(month_str)
        except DomainError as e:
            flash_domain_error(e)
            return redirect(url_for("payroll_settings"))

        if request.method == "POST":
            try:
                svc.save(month, {name: request.form.get(name) for name in FIELDS})
                flash("Parámetros guardados", "success")
                return redirect(url_for("payroll_settings", month=month_str))
            except DomainError as e:
                flash_domain_error(e)
            except Exception:
                flash_unexpected("Error al guardar los parámetros")

        loaded = svc.load(month)
        return render_template("payroll/settings.html", loaded=loaded, month=month_str, active_page="payroll")
