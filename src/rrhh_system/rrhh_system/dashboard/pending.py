"""Unified list of things HR should look at, built fresh on every load."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Iterable, List, Optional

from ..core.enums import PendingSeverity


@dataclass(frozen=True)
class PendingItem:
    item_id: str
    type: str
    detail: str
    target: str
    severity: PendingSeverity
    when: datetime


def _as_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _name(obj) -> str:
    if obj is None:
        return ""
    return f"{obj.first_name or ''} {obj.last_name or ''}".strip()


def aggregate_pending(
    absences: Iterable,
    employees: Iterable,
    certifications: Iterable,
    courses: Iterable,
    today: date,
    *,
    now: Optional[datetime] = None,
) -> List[PendingItem]:
    """Merge pending absences, incomplete records and expired items.

    Sorted by severity (high first), then newest first.
    """

    now = now or datetime.combine(today, time.min)
    employees = list(employees)
    by_id = {e.employee_id: e for e in employees}
    course_names = {c.course_id: c.name for c in courses}
    items: List[PendingItem] = []

    for a in absences:
        items.append(
            PendingItem(
                item_id=f"abs_{a.request_id}",
                type="Solicitud Pendiente",
                detail=f"{a.type_name or ''} - {a.employee_name or ''}".strip(),
                target="/absences",
                severity=PendingSeverity.MEDIUM,
                when=_as_datetime(a.requested_at),
            )
        )

    for e in employees:
        missing = []
        if not e.rut:
            missing.append("RUT")
        if not e.address:
            missing.append("Dirección")
        if not e.job_id:
            missing.append("Cargo")
        if missing:
            items.append(
                PendingItem(
                    item_id=f"miss_{e.employee_id}",
                    type="Falta Información",
                    detail=f"{_name(e)}: {', '.join(missing)}",
                    target="/employees",
                    severity=PendingSeverity.LOW,
                    when=now,
                )
            )

        if e.termination_date and e.termination_date < today:
            items.append(
                PendingItem(
                    item_id=f"term_{e.employee_id}",
                    type="Contrato Vencido",
                    detail=f"{_name(e)} ({e.termination_date.isoformat()})",
                    target="/employees",
                    severity=PendingSeverity.HIGH,
                    when=_as_datetime(e.termination_date),
                )
            )

    for c in certifications:
        if c.expiry_date and c.expiry_date < today:
            items.append(
                PendingItem(
                    item_id=f"cert_{c.certification_id}",
                    type="Curso Vencido",
                    detail=f"{_name(by_id.get(c.employee_id))}: {course_names.get(c.course_id, 'Curso')}",
                    target="/employees",
                    severity=PendingSeverity.HIGH,
                    when=_as_datetime(c.expiry_date),
                )
            )

    items.sort(key=lambda i: (i.severity.score, i.when), reverse=True)
    return items
