from __future__ import annotations

from typing import Optional

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.web import flash_domain_error, flash_unexpected, form_date, form_int, form_str
from ..container import Container
from ..core.constants import NATIONALITIES
from ..core.enums import ProvisioningStatus
from ..core.exceptions import DomainError, NotFoundError
from ..settings.model import LOOKUP_KINDS
from ..storage.file_storage import Upload
from .model import Employee, EmployeeInput


def _employee_input_from_form() -> EmployeeInput:
    salary = form_str("salary").replace(".", "")
    return EmployeeInput(
        first_name=form_str("first_name"),
        last_name=form_str("last_name"),
        rut=form_str("rut"),
        nationality=form_str("nationality") or None,
        birth_date=form_date("birth_date"),
        address=form_str("address") or None,
        job_id=form_int("job_id"),
        department_id=form_int("department_id"),
        contract_type_id=form_int("contract_type_id"),
        marital_status_id=form_int("marital_status_id"),
        pension_provider_id=form_int("pension_provider_id"),
        health_provider_id=form_int("health_provider_id"),
        shift_id=form_int("shift_id"),
        supervisor_id=form_int("supervisor_id"),
        salary=int(salary) if salary.isdigit() else None,
        hire_date=form_date("hire_date"),
        termination_date=form_date("termination_date"),
        is_subcontracted=request.form.get("is_subcontracted") in ("1", "on", "true"),
        subcontractor_id=form_int("subcontractor_id"),
    )


def register(app: Flask, container: Container) -> None:
    svc = container.employee_service

    def _form_context(employee: Optional[Employee]):
        lookups = {key: container.lookup_service.list_items(key) for key in LOOKUP_KINDS}
        subcontractors = []
        if container.subcontractor_service is not None:
            try:
                subcontractors = container.subcontractor_service.list_subcontractors()
            except Exception:
                flash_unexpected("No se pudo cargar la lista de subcontratistas")
        return dict(
            employee=employee,
            lookups=lookups,
            shifts=container.shift_service.list_shifts(),
            supervisors=[e for e in svc.list_employees() if employee is None or e.employee_id != employee.employee_id],
            subcontractors=subcontractors,
            nationalities=NATIONALITIES,
            active_page="employees",
        )

    @app.route("/employees", methods=["GET"], endpoint="employees")
    def employees():
        return render_template(
            "employees/index.html",
            employees=svc.list_employees(),
            ProvisioningStatus=ProvisioningStatus,
            active_page="employees",
        )

    @app.route("/employees/new", methods=["GET", "POST"], endpoint="new_employee")
    @app.route("/employees/<int:employee_id>/edit", methods=["GET", "POST"], endpoint="edit_employee")
    def edit_employee(employee_id: Optional[int] = None):
        try:
            employee = svc.get_employee(employee_id) if employee_id is not None else None
        except NotFoundError as e:
            flash_domain_error(e)
            return redirect(url_for("employees"))

        if request.method == "POST":
            try:
                result = svc.save_employee(
                    employee_id=employee_id,
                    data=_employee_input_from_form(),
                    pin=form_str("pin") or None,
                    photo=Upload.from_werkzeug(request.files.get("photo")),
                )
                if result.provisioning_status == ProvisioningStatus.FAILED:
                    flash("Empleado guardado, pero no se pudo crear el acceso al reloj. Reintente.", "warning")
                else:
                    flash("Empleado guardado", "success")
                return redirect(url_for("employees"))
            except DomainError as e:
                flash_domain_error(e)
            except Exception:
                flash_unexpected("Error al guardar el empleado")

        return render_template("employees/form.html", **_form_context(employee))

    @app.route("/employees/<int:employee_id>", methods=["GET"], endpoint="employee_detail")
    def employee_detail(employee_id: int):
        try:
            employee = svc.get_employee(employee_id)
        except NotFoundError as e:
            flash_domain_error(e)
            return redirect(url_for("employees"))

        documents = container.document_service.list_for_employee(employee_id)
        return render_template(
            "employees/detail.html",
            employee=employee,
            documents=[(d, container.document_service.url_for(d)) for d in documents],
            certifications=container.certification_service.list_for_employee(employee_id),
            courses=container.certification_service.list_courses(),
            material_requests=container.material_service.list_for_employee(employee_id),
            products=container.material_service.list_catalog(),
            active_page="employees",
        )

    @app.route("/employees/<int:employee_id>/delete", methods=["POST"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        try:
            svc.delete_employee(employee_id)
            flash("Empleado eliminado", "info")
        except DomainError as e:
            flash_domain_error(e)
        except Exception:
            flash_unexpected("Error al eliminar el empleado")
        return redirect(url_for("employees"))

    @app.route("/employees/<int:employee_id>/kiosk/retry", methods=["POST"], endpoint="retry_kiosk_access")
    def retry_kiosk_access(employee_id: int):
        try:
            status = svc.retry_provisioning(employee_id=employee_id, pin=form_str("pin"))
            if status == ProvisioningStatus.PROVISIONED:
                flash("Acceso al reloj creado", "success")
            else:
                flash("No se pudo crear el acceso al reloj", "warning")
        except DomainError as e:
            flash_domain_error(e)
        except Exception:
            flash_unexpected("Error al crear el acceso al reloj")
        return redirect(url_for("employees"))
