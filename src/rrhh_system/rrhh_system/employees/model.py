from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import ProvisioningStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee record (ficha del trabajador).

    The *_name fields are read-model joins filled by the repository.
    """

    employee_id: int
    first_name: str
    last_name: str
    rut: str
    nationality: Optional[str] = None
    birth_date: Optional[date] = None
    address: Optional[str] = None
    job_id: Optional[int] = None
    department_id: Optional[int] = None
    contract_type_id: Optional[int] = None
    marital_status_id: Optional[int] = None
    pension_provider_id: Optional[int] = None
    health_provider_id: Optional[int] = None
    shift_id: Optional[int] = None
    supervisor_id: Optional[int] = None
    salary: Optional[int] = None
    hire_date: Optional[date] = None
    termination_date: Optional[date] = None
    is_subcontracted: bool = False
    subcontractor_id: Optional[int] = None
    photo_url: Optional[str] = None
    provisioning_status: ProvisioningStatus = ProvisioningStatus.NOT_REQUIRED
    created_at: Optional[datetime] = None

    job_name: Optional[str] = None
    department_name: Optional[str] = None
    contract_type_name: Optional[str] = None
    marital_status_name: Optional[str] = None
    pension_name: Optional[str] = None
    health_name: Optional[str] = None
    shift_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def initials(self) -> str:
        return f"{self.first_name[:1]}{self.last_name[:1]}".upper()


@dataclass(frozen=True)
class EmployeeInput:
    """Writable employee fields, as validated by the service."""

    first_name: str
    last_name: str
    rut: str
    nationality: Optional[str] = None
    birth_date: Optional[date] = None
    address: Optional[str] = None
    job_id: Optional[int] = None
    department_id: Optional[int] = None
    contract_type_id: Optional[int] = None
    marital_status_id: Optional[int] = None
    pension_provider_id: Optional[int] = None
    health_provider_id: Optional[int] = None
    shift_id: Optional[int] = None
    supervisor_id: Optional[int] = None
    salary: Optional[int] = None
    hire_date: Optional[date] = None
    termination_date: Optional[date] = None
    is_subcontracted: bool = False
    subcontractor_id: Optional[int] = None
    photo_url: Optional[str] = None


@dataclass(frozen=True)
class KioskCredential:
    login: str
    employee_id: int
    pin_hash: str
    full_name: str
