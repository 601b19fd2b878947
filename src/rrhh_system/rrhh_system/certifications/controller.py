from __future__ import annotations

from flask import Flask, flash, redirect, request, url_for

from ..common.web import flash_domain_error, flash_unexpected, form_date, form_int
from ..container import Container
from ..core.exceptions import DomainError
from ..storage.file_storage import Upload


def register(app: Flask, container: Container) -> None:
    @app.route("/employees/<int:employee_id>/certifications", methods=["POST"], endpoint="add_certification")
    def add_certification(employee_id: int):
        try:
            container.certification_service.add(
                employee_id=employee_id,
                course_id=form_int("course_id"),
                issue_date=form_date("issue_date"),
                expiry_date=form_date("expiry_date"),
                file=Upload.from_werkzeug(request.files.get("file")),
            )
            flash("Acreditación guardada", "success")
        except DomainError as e:
            flash_domain_error(e)
        except Exception:
            flash_unexpected("Error al guardar la acreditación")
        return redirect(url_for("employee_detail", employee_id=employee_id))
