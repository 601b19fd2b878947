from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime

import pytest

from src.rrhh_system.rrhh_system.absences.model import AbsenceRequest, AbsenceType
from src.rrhh_system.rrhh_system.absences.service import AbsenceService
from src.rrhh_system.rrhh_system.core.enums import AbsenceStatus
from src.rrhh_system.rrhh_system.core.exceptions import NotFoundError, ValidationError


class InMemoryAbsences:
    def __init__(self):
        self._rows: dict[int, AbsenceRequest] = {}
        self._next_id = 1
        self.writes = 0

    def list_types(self):
        return [AbsenceType(type_id=1, name="Vacaciones", color="blue")]

    def list_requests(self, *, status=None):
        rows = [r for r in self._rows.values() if status is None or r.status == status]
        return sorted(rows, key=lambda r: r.requested_at, reverse=True)

    def get_request(self, request_id):
        return self._rows.get(int(request_id))

    def create_request(self, *, employee_id, type_id, start_date, end_date, total_days, reason):
        self.writes += 1
        rid = self._next_id
        self._next_id += 1
        self._rows[rid] = AbsenceRequest(
            request_id=rid,
            employee_id=employee_id,
            type_id=type_id,
            start_date=start_date,
            end_date=end_date,
            total_days=total_days,
            reason=reason,
            status=AbsenceStatus.PENDING,
            requested_at=datetime(2026, 3, rid, 9, 0),
            employee_name="Ana Pérez" if employee_id == 1 else "Luis Soto",
            type_name="Vacaciones",
        )
        return rid

    def set_status(self, request_id, status):
        self.writes += 1
        self._rows[int(request_id)] = replace(self._rows[int(request_id)], status=status)
        return True

    def count_by_status(self, status):
        return len([r for r in self._rows.values() if r.status == status])


@pytest.fixture
def repo():
    return InMemoryAbsences()


@pytest.fixture
def svc(repo):
    return AbsenceService(repo)


def test_total_days_is_inclusive(svc, repo):
    rid = svc.create_request(employee_id=1, type_id=1, start_date=date(2024, 1, 1), end_date=date(2024, 1, 3))
    assert repo.get_request(rid).total_days == 3


def test_single_day_counts_as_one(svc, repo):
    rid = svc.create_request(employee_id=1, type_id=1, start_date=date(2024, 5, 2), end_date=date(2024, 5, 2))
    assert repo.get_request(rid).total_days == 1


def test_start_after_end_is_rejected_without_writing(svc, repo):
    with pytest.raises(ValidationError):
        svc.create_request(employee_id=1, type_id=1, start_date=date(2024, 1, 5), end_date=date(2024, 1, 3))
    assert repo.writes == 0


def test_approve_only_pending(svc, repo):
    rid = svc.create_request(employee_id=1, type_id=1, start_date=date(2024, 1, 1), end_date=date(2024, 1, 1))
    svc.approve(rid)
    assert repo.get_request(rid).status == AbsenceStatus.APPROVED

    with pytest.raises(ValidationError):
        svc.reject(rid)
    assert repo.get_request(rid).status == AbsenceStatus.APPROVED


def test_decide_unknown_request(svc):
    with pytest.raises(NotFoundError):
        svc.approve(404)


def test_filter_and_search(svc):
    a = svc.create_request(employee_id=1, type_id=1, start_date=date(2024, 1, 1), end_date=date(2024, 1, 2))
    svc.create_request(employee_id=2, type_id=1, start_date=date(2024, 2, 1), end_date=date(2024, 2, 2))
    svc.reject(a)

    assert [r.employee_name for r in svc.list_requests(status_filter="pending")] == ["Luis Soto"]
    assert [r.request_id for r in svc.list_requests(status_filter="rejected")] == [a]
    assert [r.employee_name for r in svc.list_requests(search="ana")] == ["Ana Pérez"]
    assert len(svc.list_requests()) == 2
    assert svc.count_pending() == 1

    with pytest.raises(ValidationError):
        svc.list_requests(status_filter="archived")


def test_csv_export_has_bom_and_header(svc):
    svc.create_request(employee_id=1, type_id=1, start_date=date(2024, 1, 1), end_date=date(2024, 1, 3), reason="Viaje")
    data = svc.export_csv(svc.list_requests())

    assert data.startswith(b"\xef\xbb\xbf")
    text = data.decode("utf-8-sig")
    assert text.splitlines()[0] == "Empleado,Tipo,Desde,Hasta,Dias,Estado,Motivo"
    assert "Ana Pérez,Vacaciones,2024-01-01,2024-01-03,3,pending,Viaje" in text
