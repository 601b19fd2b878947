from __future__ import annotations

import io
from datetime import date

import pandas as pd

from conftest import InMemoryEmployees, make_employee
from src.rrhh_system.rrhh_system.capacity.service import EXPORT_SHEET, CapacityMatrixService
from src.rrhh_system.rrhh_system.certifications.model import Certification, Course
from src.rrhh_system.rrhh_system.core.enums import Severity

TODAY = date(2026, 3, 15)


class FakeCourses:
    def list_all(self):
        return [Course(1, "Trabajo en Altura"), Course(2, "Primeros Auxilios")]


class FakeCertifications:
    def __init__(self, rows):
        self.rows = rows

    def list_for_employee(self, employee_id):
        return [c for c in self.rows if c.employee_id == employee_id]

    def list_all(self):
        return list(self.rows)


def _cert(cid, employee_id, course_id, expiry):
    return Certification(cid, employee_id, course_id, date(2025, 1, 1), expiry)


def _service():
    employees = InMemoryEmployees(
        [
            make_employee(1, "Ana", "Zúñiga", photo_url="/files/a.jpg", nationality="Chilena", pension_name="Modelo"),
            make_employee(2, "Luis", "Araya", termination_date=date(2026, 3, 20)),
        ]
    )
    certs = FakeCertifications(
        [
            _cert(1, 1, 1, date(2026, 1, 1)),
            _cert(2, 1, 1, date(2027, 1, 1)),
            _cert(3, 2, 2, date(2026, 4, 1)),
        ]
    )
    return CapacityMatrixService(employees, certs, FakeCourses())


def test_rows_sorted_by_last_name_with_statuses():
    matrix = _service().build(today=TODAY)
    araya, zuniga = matrix.rows

    assert araya.employee.last_name == "Araya"
    assert araya.contract.severity == Severity.WARNING
    assert araya.courses[1].severity == Severity.CRITICAL
    assert araya.courses[2].label == "17d"
    assert araya.fields["Foto"].severity == Severity.CRITICAL

    assert zuniga.contract.label == "Indefinido"
    assert zuniga.fields["AFP"].severity == Severity.OK
    assert zuniga.fields["Salud"].severity == Severity.CRITICAL


def test_latest_expiry_wins_for_repeated_course():
    zuniga = _service().build(today=TODAY).rows[1]
    assert zuniga.courses[1].severity == Severity.OK


def test_export_xlsx():
    data = _service().export_xlsx(today=TODAY)
    df = pd.read_excel(io.BytesIO(data), sheet_name=EXPORT_SHEET)

    assert list(df["Trabajador"]) == ["Luis Araya", "Ana Zúñiga"]
    assert list(df["Vigencia Contrato"]) == ["2026-03-20", "Indefinido"]
    assert list(df["Trabajo en Altura"]) == ["Faltante", "Ok"]
