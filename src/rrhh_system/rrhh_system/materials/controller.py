from __future__ import annotations

from flask import Flask, flash, redirect, url_for

from ..common.web import flash_domain_error, flash_unexpected, form_str
from ..container import Container
from ..core.enums import MaterialRequestStatus
from ..core.exceptions import DomainError, ValidationError


def register(app: Flask, container: Container) -> None:
    svc = container.material_service

    @app.route("/employees/<int:employee_id>/epp", methods=["POST"], endpoint="request_epp")
    def request_epp(employee_id: int):
        try:
            svc.create_request(
                employee_id=employee_id,
                product_code=form_str("product_code"),
                quantity=form_str("quantity") or 1,
            )
            flash("Solicitud de EPP registrada", "success")
        except DomainError as e:
            flash_domain_error(e)
        except Exception:
            flash_unexpected("Error al registrar la solicitud de EPP")
        return redirect(url_for("employee_detail", employee_id=employee_id))

    @app.route("/epp/<int:request_id>/status", methods=["POST"], endpoint="change_epp_status")
    def change_epp_status(request_id: int):
        raw_employee = form_str("employee_id")
        employee_id = int(raw_employee) if raw_employee.isdigit() else None
        try:
            try:
                new_status = MaterialRequestStatus(form_str("status"))
            except ValueError:
                raise ValidationError("Estado inválido")
            svc.change_status(request_id, new_status)
            flash("Solicitud actualizada", "success")
        except DomainError as e:
            flash_domain_error(e)
        except Exception:
            flash_unexpected("Error al actualizar la solicitud")
        if employee_id:
            return redirect(url_for("employee_detail", employee_id=employee_id))
        return redirect(url_for("employees"))
