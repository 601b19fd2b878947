from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.web import flash_domain_error, flash_unexpected, form_str
from ..container import Container
from ..core.enums import AttendanceType
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/clock", methods=["GET", "POST"], endpoint="kiosk_clock")
    def kiosk_clock():
        if request.method == "POST":
            try:
                result = container.attendance_service.clock(rut=form_str("rut"), pin=form_str("pin"))
                label = "Entrada" if result.type == AttendanceType.IN else "Salida"
                flash(f"{label} registrada a las {result.timestamp:%H:%M}", "success")
            except DomainError as e:
                flash_domain_error(e)
            except Exception:
                flash_unexpected("Error al registrar la marca")
            return redirect(url_for("kiosk_clock"))

        return render_template("attendance/clock.html")
