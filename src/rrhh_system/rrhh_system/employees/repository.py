from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import ProvisioningStatus
from .model import Employee, EmployeeInput, KioskCredential


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def list_all(self) -> Sequence[Employee]:
        """All employees with lookup names joined, newest first."""

        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_rut(self, rut: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, data: EmployeeInput, *, provisioning_status: ProvisioningStatus) -> int:
        raise NotImplementedError

    def update(self, employee_id: int, data: EmployeeInput, *, provisioning_status: ProvisioningStatus) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError

    def set_provisioning_status(self, employee_id: int, status: ProvisioningStatus) -> bool:
        raise NotImplementedError

    def count_all(self) -> int:
        raise NotImplementedError


class KioskCredentialRepository(Protocol):
    def upsert(self, *, login: str, employee_id: int, pin_hash: str, full_name: str) -> None:
        """Store the credential; any other login of the same employee is dropped."""

        raise NotImplementedError

    def get_by_login(self, login: str) -> Optional[KioskCredential]:
        raise NotImplementedError

    def delete_for_employee(self, employee_id: int) -> int:
        raise NotImplementedError
