from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from ..common.validators import clean_rut, require_non_empty, require_pin
from ..core.constants import DEFAULT_NATIONALITY
from ..core.enums import ProvisioningStatus
from ..core.exceptions import DuplicateError, HierarchyCycleError, NotFoundError, ValidationError
from ..org.hierarchy import find_supervisor_cycle
from ..storage.file_storage import FileStorage, Upload, build_object_path
from .kiosk import KioskProvisioner
from .model import Employee, EmployeeInput
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveResult:
    employee_id: int
    provisioning_status: ProvisioningStatus


class EmployeeService:
    """Use case: manage employee records (ficha) and their kiosk access.

    Saving is a two-step workflow: the employee row is written first with
    ``provisioning_status=pending``, then the kiosk credential is created.
    The outcome of the second step is recorded on the row (provisioned or
    failed) so a half-done save is visible and can be retried. An employee
    holds at most one kiosk credential; changing the RUT without a new PIN
    revokes it.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        kiosk: KioskProvisioner,
        storage: Optional[FileStorage] = None,
    ):
        self._employees = employees
        self._kiosk = kiosk
        self._storage = storage

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: int) -> Employee:
        emp = self._employees.get_by_id(int(employee_id))
        if not emp:
            raise NotFoundError("Empleado no existe")
        return emp

    def _validate(self, employee_id: Optional[int], data: EmployeeInput) -> EmployeeInput:
        rut = clean_rut(data.rut)
        if not rut:
            raise ValidationError("El RUT es obligatorio para crear el acceso.")

        first_name = require_non_empty(data.first_name, "Nombre")
        last_name = require_non_empty(data.last_name, "Apellido")

        other = self._employees.get_by_rut(rut)
        if other and other.employee_id != employee_id:
            raise DuplicateError(f"Ya existe un empleado con RUT {rut}")

        if data.hire_date and data.termination_date and data.termination_date < data.hire_date:
            raise ValidationError("La fecha de término no puede ser anterior a la de ingreso")

        supervisor_id = data.supervisor_id
        if supervisor_id is not None:
            if employee_id is not None and supervisor_id == employee_id:
                raise HierarchyCycleError("Un empleado no puede ser su propio supervisor")
            everyone = self._employees.list_all()
            if not any(e.employee_id == supervisor_id for e in everyone):
                raise ValidationError("El supervisor seleccionado no existe")
            cycle = find_supervisor_cycle(everyone, employee_id, supervisor_id)
            if cycle:
                raise HierarchyCycleError(
                    "La asignación de supervisor crea un ciclo: " + " -> ".join(str(i) for i in cycle)
                )

        return replace(
            data,
            rut=rut,
            first_name=first_name,
            last_name=last_name,
            nationality=(data.nationality or "").strip() or DEFAULT_NATIONALITY,
            address=(data.address or "").strip() or None,
            subcontractor_id=data.subcontractor_id if data.is_subcontracted else None,
        )

    def save_employee(
        self,
        *,
        employee_id: Optional[int],
        data: EmployeeInput,
        pin: Optional[str] = None,
        photo: Optional[Upload] = None,
    ) -> SaveResult:
        current = self.get_employee(employee_id) if employee_id is not None else None
        data = self._validate(employee_id, data)
        pin = require_pin(pin) if (pin or "").strip() else None

        if photo is not None:
            if self._storage is None:
                raise ValidationError("Almacenamiento de archivos no configurado")
            path = build_object_path(employee_id if employee_id is not None else "new", photo)
            self._storage.upload(path, photo)
            data = replace(data, photo_url=self._storage.public_url(path))
        elif current is not None and data.photo_url is None:
            data = replace(data, photo_url=current.photo_url)

        if pin:
            status = ProvisioningStatus.PENDING
        elif current is not None:
            status = current.provisioning_status
        else:
            status = ProvisioningStatus.NOT_REQUIRED

        if current is None:
            employee_id = self._employees.create(data, provisioning_status=status)
        elif not self._employees.update(int(employee_id), data, provisioning_status=status):
            raise NotFoundError("Empleado no existe")

        if pin:
            status = self._provision(int(employee_id), rut=data.rut, pin=pin, full_name=f"{data.first_name} {data.last_name}")
        elif current is not None and current.rut != data.rut and status != ProvisioningStatus.NOT_REQUIRED:
            # The kiosk login is derived from the RUT; without a new PIN the old access is withdrawn.
            self._kiosk.revoke(int(employee_id))
            status = ProvisioningStatus.NOT_REQUIRED
            self._employees.set_provisioning_status(int(employee_id), status)
            logger.info("Kiosk access revoked after RUT change", extra={"employee_id": employee_id})

        return SaveResult(employee_id=int(employee_id), provisioning_status=status)

    def retry_provisioning(self, *, employee_id: int, pin: str) -> ProvisioningStatus:
        emp = self.get_employee(employee_id)
        pin = require_pin(pin)
        self._employees.set_provisioning_status(emp.employee_id, ProvisioningStatus.PENDING)
        return self._provision(emp.employee_id, rut=emp.rut, pin=pin, full_name=emp.full_name)

    def _provision(self, employee_id: int, *, rut: str, pin: str, full_name: str) -> ProvisioningStatus:
        try:
            self._kiosk.provision(rut=rut, pin=pin, employee_id=employee_id, full_name=full_name)
        except Exception:
            # The employee row is already stored; mark it so the UI offers a retry.
            logger.exception("Kiosk provisioning failed", extra={"employee_id": employee_id})
            self._employees.set_provisioning_status(employee_id, ProvisioningStatus.FAILED)
            return ProvisioningStatus.FAILED

        self._employees.set_provisioning_status(employee_id, ProvisioningStatus.PROVISIONED)
        return ProvisioningStatus.PROVISIONED

    def delete_employee(self, employee_id: int) -> None:
        # Subordinates fall back to root level (supervisor_id ON DELETE SET NULL).
        if not self._employees.delete_by_id(int(employee_id)):
            raise NotFoundError("Empleado no existe")
