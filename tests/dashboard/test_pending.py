from __future__ import annotations

from datetime import date, datetime

from conftest import make_employee
from src.rrhh_system.rrhh_system.absences.model import AbsenceRequest
from src.rrhh_system.rrhh_system.certifications.model import Certification, Course
from src.rrhh_system.rrhh_system.core.enums import AbsenceStatus, PendingSeverity
from src.rrhh_system.rrhh_system.dashboard.pending import aggregate_pending

TODAY = date(2026, 3, 15)


def _absence(request_id, requested_at):
    return AbsenceRequest(
        request_id=request_id,
        employee_id=1,
        type_id=1,
        start_date=date(2026, 3, 20),
        end_date=date(2026, 3, 21),
        total_days=2,
        reason=None,
        status=AbsenceStatus.PENDING,
        requested_at=requested_at,
        employee_name="Ana Pérez",
        type_name="Vacaciones",
    )


def test_items_are_sorted_by_severity_then_date():
    employees = [
        make_employee(1, job_id=1, address="Calle 1"),
        make_employee(2, job_id=None, address="Calle 2"),
        make_employee(3, job_id=1, address="Calle 3", termination_date=date(2026, 1, 31)),
    ]
    certs = [
        Certification(certification_id=7, employee_id=1, course_id=5, issue_date=None, expiry_date=date(2026, 2, 28)),
        Certification(certification_id=8, employee_id=1, course_id=6, issue_date=None, expiry_date=date(2027, 1, 1)),
    ]
    absences = [_absence(1, datetime(2026, 3, 1, 9)), _absence(2, datetime(2026, 3, 10, 9))]

    items = aggregate_pending(absences, employees, certs, [Course(5, "Altura Física")], TODAY)

    assert [i.item_id for i in items] == ["cert_7", "term_3", "abs_2", "abs_1", "miss_2"]
    assert items[0].detail.endswith("Altura Física")
    assert items[1].type == "Contrato Vencido"
    assert items[-1].severity == PendingSeverity.LOW
    assert items[-1].detail.endswith("Cargo")


def test_unknown_course_falls_back_to_generic_name():
    cert = Certification(certification_id=1, employee_id=1, course_id=99, issue_date=None, expiry_date=date(2026, 1, 1))
    items = aggregate_pending([], [make_employee(1, job_id=1, address="x")], [cert], [], TODAY)
    assert items[0].detail.endswith(": Curso")


def test_complete_employee_yields_nothing():
    assert aggregate_pending([], [make_employee(1, job_id=1, address="Calle 1")], [], [], TODAY) == []
