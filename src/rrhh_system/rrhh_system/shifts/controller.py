from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.web import flash_domain_error, flash_unexpected, form_str
from ..container import Container
from ..core.exceptions import DomainError
from .model import WEEKDAY_NAMES


def register(app: Flask, container: Container) -> None:
    svc = container.shift_service

    @app.route("/settings/shifts", methods=["GET", "POST"], endpoint="shift_settings")
    def shift_settings():
        if request.method == "POST":
            try:
                svc.create_shift(
                    name=form_str("name"),
                    start_time=form_str("start_time"),
                    end_time=form_str("end_time"),
                    break_minutes=form_str("break_minutes") or 0,
                    tolerance_minutes=form_str("tolerance_minutes") or 0,
                    work_days=request.form.getlist("work_days"),
                )
                flash("Turno creado", "success")
                return redirect(url_for("shift_settings"))
            except DomainError as e:
                flash_domain_error(e)
            except Exception:
                flash_unexpected("Error al crear el turno")

        return render_template(
            "settings/shifts.html",
            shifts=svc.list_shifts(),
            weekdays=WEEKDAY_NAMES,
            active_page="shifts",
        )

    @app.route("/settings/shifts/<int:shift_id>/delete", methods=["POST"], endpoint="delete_shift")
    def delete_shift(shift_id: int):
        try:
            svc.delete_shift(shift_id)
            flash("Turno eliminado", "info")
        except DomainError as e:
            flash_domain_error(e)
        except Exception:
            flash_unexpected("Error al eliminar el turno")
        return redirect(url_for("shift_settings"))
