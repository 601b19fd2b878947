from __future__ import annotations

from dataclasses import asdict, replace
from datetime import date
from typing import Optional

import pytest

from src.rrhh_system.rrhh_system.core.enums import ProvisioningStatus
from src.rrhh_system.rrhh_system.employees.kiosk import KioskProvisioner
from src.rrhh_system.rrhh_system.employees.model import Employee, EmployeeInput, KioskCredential


def make_employee(employee_id: int, first_name: str = "Ana", last_name: str = "Pérez", **kwargs) -> Employee:
    kwargs.setdefault("rut", f"{10000000 + employee_id}-{employee_id % 10}")
    return Employee(employee_id=employee_id, first_name=first_name, last_name=last_name, **kwargs)


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._rows: dict[int, Employee] = {e.employee_id: e for e in employees}
        self._next_id = max(self._rows, default=0) + 1
        self.status_history: list[tuple[int, ProvisioningStatus]] = []

    def list_all(self):
        return sorted(self._rows.values(), key=lambda e: e.employee_id, reverse=True)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._rows.get(int(employee_id))

    def get_by_rut(self, rut: str) -> Optional[Employee]:
        return next((e for e in self._rows.values() if e.rut == rut), None)

    def create(self, data: EmployeeInput, *, provisioning_status: ProvisioningStatus) -> int:
        emp_id = self._next_id
        self._next_id += 1
        self._rows[emp_id] = Employee(employee_id=emp_id, provisioning_status=provisioning_status, **asdict(data))
        self.status_history.append((emp_id, provisioning_status))
        return emp_id

    def update(self, employee_id: int, data: EmployeeInput, *, provisioning_status: ProvisioningStatus) -> bool:
        current = self._rows.get(int(employee_id))
        if current is None:
            return False
        self._rows[int(employee_id)] = replace(current, provisioning_status=provisioning_status, **asdict(data))
        self.status_history.append((int(employee_id), provisioning_status))
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        if self._rows.pop(int(employee_id), None) is None:
            return False
        for other_id, other in list(self._rows.items()):
            if other.supervisor_id == int(employee_id):
                self._rows[other_id] = replace(other, supervisor_id=None)
        return True

    def set_provisioning_status(self, employee_id: int, status: ProvisioningStatus) -> bool:
        current = self._rows.get(int(employee_id))
        if current is None:
            return False
        self._rows[int(employee_id)] = replace(current, provisioning_status=status)
        self.status_history.append((int(employee_id), status))
        return True

    def count_all(self) -> int:
        return len(self._rows)


class InMemoryKioskCredentials:
    def __init__(self):
        self.rows: dict[str, KioskCredential] = {}

    def upsert(self, *, login: str, employee_id: int, pin_hash: str, full_name: str) -> None:
        self.delete_for_employee(employee_id)
        self.rows[login] = KioskCredential(login=login, employee_id=employee_id, pin_hash=pin_hash, full_name=full_name)

    def get_by_login(self, login: str) -> Optional[KioskCredential]:
        return self.rows.get(login)

    def delete_for_employee(self, employee_id: int) -> int:
        stale = [login for login, c in self.rows.items() if c.employee_id == int(employee_id)]
        for login in stale:
            del self.rows[login]
        return len(stale)


@pytest.fixture
def today() -> date:
    return date(2026, 3, 15)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def kiosk_credentials() -> InMemoryKioskCredentials:
    return InMemoryKioskCredentials()


@pytest.fixture
def kiosk(kiosk_credentials) -> KioskProvisioner:
    return KioskProvisioner(kiosk_credentials)
