from __future__ import annotations

from flask import Flask, Response, flash, redirect, render_template, request, url_for

from ..common.web import flash_domain_error, flash_unexpected, form_date, form_int, form_str
from ..container import Container
from ..core.exceptions import DomainError
from .service import STATUS_FILTERS


def register(app: Flask, container: Container) -> None:
    svc = container.absence_service

    def _filters():
        return (request.args.get("status") or "all"), (request.args.get("q") or "")

    @app.route("/absences", methods=["GET"], endpoint="absences")
    def absences():
        status, q = _filters()
        try:
            rows = svc.list_requests(status_filter=status, search=q)
        except DomainError as e:
            flash_domain_error(e)
            return redirect(url_for("absences"))
        return render_template(
            "absences/index.html",
            requests=rows,
            types=svc.list_types(),
            employees=container.employee_service.list_employees(),
            status=status,
            q=q,
            status_filters=STATUS_FILTERS,
            active_page="absences",
        )

    @app.route("/absences/new", methods=["POST"], endpoint="new_absence")
    def new_absence():
        try:
            svc.create_request(
                employee_id=form_int("employee_id"),
                type_id=form_int("type_id"),
                start_date=form_date("start_date"),
                end_date=form_date("end_date"),
                reason=form_str("reason"),
            )
            flash("Solicitud registrada", "success")
        except DomainError as e:
            flash_domain_error(e)
        except Exception:
            flash_unexpected("Error al registrar la solicitud")
        return redirect(url_for("absences"))

    @app.route("/absences/<int:request_id>/approve", methods=["POST"], endpoint="approve_absence")
    def approve_absence(request_id: int):
        try:
            svc.approve(request_id)
            flash("Solicitud aprobada", "success")
        except DomainError as e:
            flash_domain_error(e)
        except Exception:
            flash_unexpected("Error al aprobar la solicitud")
        return redirect(url_for("absences"))

    @app.route("/absences/<int:request_id>/reject", methods=["POST"], endpoint="reject_absence")
    def reject_absence(request_id: int):
        try:
            svc.reject(request_id)
            flash("Solicitud rechazada", "info")
        except DomainError as e:
            flash_domain_error(e)
        except Exception:
            flash_unexpected("Error al rechazar la solicitud")
        return redirect(url_for("absences"))

    @app.route("/absences/export.csv", methods=["GET"], endpoint="export_absences")
    def export_absences():
        status, q = _filters()
        try:
            rows = svc.list_requests(status_filter=status, search=q)
        except DomainError as e:
            flash_domain_error(e)
            return redirect(url_for("absences"))
        return Response(
            svc.export_csv(rows),
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=ausencias.csv"},
        )
