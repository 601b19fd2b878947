from __future__ import annotations

from flask import Flask, flash, redirect, request, url_for

from ..common.web import flash_domain_error, flash_unexpected, form_str
from ..container import Container
from ..core.exceptions import DomainError
from ..storage.file_storage import Upload


def register(app: Flask, container: Container) -> None:
    @app.route("/employees/<int:employee_id>/documents", methods=["POST"], endpoint="upload_document")
    def upload_document(employee_id: int):
        try:
            container.document_service.upload(
                employee_id=employee_id,
                document_type=form_str("document_type"),
                file=Upload.from_werkzeug(request.files.get("file")),
            )
            flash("Documento subido", "success")
        except DomainError as e:
            flash_domain_error(e)
        except Exception:
            flash_unexpected("Error al subir el documento")
        return redirect(url_for("employee_detail", employee_id=employee_id))
