"""Capacity matrix: one row per employee, one traffic light per requirement."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Sequence

from ..certifications.model import Course
from ..certifications.repository import CertificationRepository, CourseRepository
from ..common.datetime_utils import today_local
from ..common.exports import rows_to_xlsx
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..status.classifier import StatusResult, classify_certification, classify_contract, classify_field

EXPORT_SHEET = "Capacidad Operativa"


@dataclass(frozen=True)
class CapacityRow:
    employee: Employee
    contract: StatusResult
    fields: Dict[str, StatusResult]
    courses: Dict[int, StatusResult]


@dataclass(frozen=True)
class CapacityMatrix:
    courses: Sequence[Course]
    rows: List[CapacityRow]


class CapacityMatrixService:
    def __init__(
        self,
        employees: EmployeeRepository,
        certifications: CertificationRepository,
        courses: CourseRepository,
    ):
        self._employees = employees
        self._certifications = certifications
        self._courses = courses

    def build(self, *, today: Optional[date] = None) -> CapacityMatrix:
        today = today or today_local()
        courses = list(self._courses.list_all())

        # Latest expiry wins when an employee holds the same course twice.
        held = {}
        for c in self._certifications.list_all():
            key = (c.employee_id, c.course_id)
            prev = held.get(key)
            if prev is None or (c.expiry_date or date.max) > (prev.expiry_date or date.max):
                held[key] = c

        rows = []
        for emp in sorted(self._employees.list_all(), key=lambda e: (e.last_name or "").lower()):
            rows.append(
                CapacityRow(
                    employee=emp,
                    contract=classify_contract(emp.termination_date, today),
                    fields={
                        "Foto": classify_field(emp.photo_url),
                        "Nacionalidad": classify_field(emp.nationality),
                        "AFP": classify_field(emp.pension_name),
                        "Salud": classify_field(emp.health_name),
                        "Estado Civil": classify_field(emp.marital_status_name),
                    },
                    courses={
                        course.course_id: classify_certification(held.get((emp.employee_id, course.course_id)), today)
                        for course in courses
                    },
                )
            )
        return CapacityMatrix(courses=courses, rows=rows)

    def export_xlsx(self, *, today: Optional[date] = None) -> bytes:
        matrix = self.build(today=today)
        data = []
        for row in matrix.rows:
            emp = row.employee
            record = {
                "Trabajador": emp.full_name,
                "RUT": emp.rut or "",
                "Cargo": emp.job_name or "",
                "Tipo Contrato": emp.contract_type_name or "",
                "Vigencia Contrato": emp.termination_date.isoformat() if emp.termination_date else "Indefinido",
                "Nacionalidad": emp.nationality or "",
                "AFP": emp.pension_name or "",
                "Salud": emp.health_name or "",
                "Estado Civil": emp.marital_status_name or "",
            }
            for course in matrix.courses:
                record[course.name] = row.courses[course.course_id].label
            data.append(record)
        return rows_to_xlsx(data, sheet_name=EXPORT_SHEET)
