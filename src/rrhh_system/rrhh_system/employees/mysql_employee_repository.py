from __future__ import annotations

from dataclasses import astuple, fields
from typing import Optional, Sequence

from ..core.enums import ProvisioningStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, EmployeeInput, KioskCredential
from .repository import EmployeeRepository, KioskCredentialRepository

_WRITABLE = [f.name for f in fields(EmployeeInput)]
_DUPLICATE_RUT = "Ya existe un empleado con RUT {}"

_SELECT = """
    SELECT e.*,
           j.name  AS job_name,
           d.name  AS department_name,
           ct.name AS contract_type_name,
           ms.name AS marital_status_name,
           pp.name AS pension_name,
           hp.name AS health_name,
           t.name  AS shift_name
    FROM rrhh_employees e
    LEFT JOIN rrhh_cargos j ON j.id = e.job_id
    LEFT JOIN rrhh_departamentos d ON d.id = e.department_id
    LEFT JOIN rrhh_contract_types ct ON ct.id = e.contract_type_id
    LEFT JOIN rrhh_marital_status ms ON ms.id = e.marital_status_id
    LEFT JOIN rrhh_pension_providers pp ON pp.id = e.pension_provider_id
    LEFT JOIN rrhh_health_providers hp ON hp.id = e.health_provider_id
    LEFT JOIN rrhh_turnos t ON t.id = e.shift_id
"""


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["id"]),
        first_name=r["first_name"],
        last_name=r["last_name"],
        rut=r.get("rut") or "",
        nationality=r.get("nationality"),
        birth_date=r.get("birth_date"),
        address=r.get("address"),
        job_id=r.get("job_id"),
        department_id=r.get("department_id"),
        contract_type_id=r.get("contract_type_id"),
        marital_status_id=r.get("marital_status_id"),
        pension_provider_id=r.get("pension_provider_id"),
        health_provider_id=r.get("health_provider_id"),
        shift_id=r.get("shift_id"),
        supervisor_id=r.get("supervisor_id"),
        salary=int(r["salary"]) if r.get("salary") is not None else None,
        hire_date=r.get("hire_date"),
        termination_date=r.get("termination_date"),
        is_subcontracted=bool(r.get("is_subcontracted")),
        subcontractor_id=r.get("subcontractor_id"),
        photo_url=r.get("photo_url"),
        provisioning_status=ProvisioningStatus(r.get("provisioning_status") or ProvisioningStatus.NOT_REQUIRED.value),
        created_at=r.get("created_at"),
        job_name=r.get("job_name"),
        department_name=r.get("department_name"),
        contract_type_name=r.get("contract_type_name"),
        marital_status_name=r.get("marital_status_name"),
        pension_name=r.get("pension_name"),
        health_name=r.get("health_name"),
        shift_name=r.get("shift_name"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY e.created_at DESC, e.id DESC")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def get_by_rut(self, rut: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.rut=%s", (rut,))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def create(self, data: EmployeeInput, *, provisioning_status: ProvisioningStatus) -> int:
        cols = _WRITABLE + ["provisioning_status"]
        with db_cursor(self._conn_factory, duplicate_message=_DUPLICATE_RUT.format(data.rut)) as (_, cur):
            cur.execute(
                f"INSERT INTO rrhh_employees({', '.join(cols)}) VALUES({', '.join(['%s'] * len(cols))})",
                astuple(data) + (provisioning_status.value,),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, data: EmployeeInput, *, provisioning_status: ProvisioningStatus) -> bool:
        cols = _WRITABLE + ["provisioning_status"]
        assignments = ", ".join(f"{c}=%s" for c in cols)
        with db_cursor(self._conn_factory, duplicate_message=_DUPLICATE_RUT.format(data.rut)) as (_, cur):
            cur.execute(
                f"UPDATE rrhh_employees SET {assignments} WHERE id=%s",
                astuple(data) + (provisioning_status.value, int(employee_id)),
            )
            # MySQL reports 0 affected rows when nothing changed; check existence instead.
            cur.execute("SELECT 1 AS found FROM rrhh_employees WHERE id=%s", (int(employee_id),))
            return fetchone(cur) is not None

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM rrhh_employees WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0

    def set_provisioning_status(self, employee_id: int, status: ProvisioningStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE rrhh_employees SET provisioning_status=%s WHERE id=%s",
                (status.value, int(employee_id)),
            )
            return cur.rowcount > 0

    def count_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM rrhh_employees")
            return int(fetchone(cur)["n"])


class MySQLKioskCredentialRepository(KioskCredentialRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, *, login: str, employee_id: int, pin_hash: str, full_name: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM rrhh_kiosk_credentials WHERE employee_id=%s AND login<>%s",
                (int(employee_id), login),
            )
            cur.execute(
                """
                INSERT INTO rrhh_kiosk_credentials(login, employee_id, pin_hash, full_name)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    employee_id=VALUES(employee_id),
                    pin_hash=VALUES(pin_hash),
                    full_name=VALUES(full_name)
                """,
                (login, int(employee_id), pin_hash, full_name),
            )

    def get_by_login(self, login: str) -> Optional[KioskCredential]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT login, employee_id, pin_hash, full_name FROM rrhh_kiosk_credentials WHERE login=%s",
                (login,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return KioskCredential(
                login=r["login"],
                employee_id=int(r["employee_id"]),
                pin_hash=r["pin_hash"],
                full_name=r["full_name"],
            )

    def delete_for_employee(self, employee_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM rrhh_kiosk_credentials WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount
