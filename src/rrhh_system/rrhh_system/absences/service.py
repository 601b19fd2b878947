from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import inclusive_days
from ..common.exports import rows_to_csv
from ..core.enums import AbsenceStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import AbsenceRequest, AbsenceType
from .repository import AbsenceRepository

STATUS_FILTERS = ("all", "pending", "approved", "rejected")

EXPORT_FIELDS = ("Empleado", "Tipo", "Desde", "Hasta", "Dias", "Estado", "Motivo")


class AbsenceService:
    def __init__(self, absences: AbsenceRepository):
        self._absences = absences

    def list_types(self) -> Sequence[AbsenceType]:
        return self._absences.list_types()

    def list_requests(self, *, status_filter: str = "all", search: str = "") -> Sequence[AbsenceRequest]:
        status_filter = (status_filter or "all").strip().lower()
        if status_filter not in STATUS_FILTERS:
            raise ValidationError(f"Filtro de estado inválido: {status_filter}")
        status = None if status_filter == "all" else AbsenceStatus(status_filter)

        rows = self._absences.list_requests(status=status)
        term = (search or "").strip().lower()
        if term:
            rows = [r for r in rows if term in (r.employee_name or "").lower()]
        return rows

    def list_pending(self) -> Sequence[AbsenceRequest]:
        return self._absences.list_requests(status=AbsenceStatus.PENDING)

    def count_pending(self) -> int:
        return self._absences.count_by_status(AbsenceStatus.PENDING)

    def create_request(
        self,
        *,
        employee_id: Optional[int],
        type_id: Optional[int],
        start_date: Optional[date],
        end_date: Optional[date],
        reason: str = "",
    ) -> int:
        if not employee_id:
            raise ValidationError("Debe seleccionar un empleado")
        if not type_id:
            raise ValidationError("Debe seleccionar un tipo de ausencia")
        if start_date is None or end_date is None:
            raise ValidationError("Las fechas de inicio y término son obligatorias")
        if start_date > end_date:
            raise ValidationError("La fecha de inicio no puede ser posterior a la de término")

        return self._absences.create_request(
            employee_id=int(employee_id),
            type_id=int(type_id),
            start_date=start_date,
            end_date=end_date,
            total_days=inclusive_days(start_date, end_date),
            reason=(reason or "").strip() or None,
        )

    def _decide(self, request_id: int, status: AbsenceStatus) -> None:
        req = self._absences.get_request(int(request_id))
        if not req:
            raise NotFoundError("La solicitud no existe")
        if req.status != AbsenceStatus.PENDING:
            raise ValidationError("La solicitud ya fue procesada")
        if not self._absences.set_status(req.request_id, status):
            raise ValidationError("No se pudo actualizar la solicitud")

    def approve(self, request_id: int) -> None:
        self._decide(request_id, AbsenceStatus.APPROVED)

    def reject(self, request_id: int) -> None:
        self._decide(request_id, AbsenceStatus.REJECTED)

    def export_csv(self, requests: Sequence[AbsenceRequest]) -> bytes:
        rows = [
            {
                "Empleado": r.employee_name or "",
                "Tipo": r.type_name or "",
                "Desde": r.start_date.isoformat(),
                "Hasta": r.end_date.isoformat(),
                "Dias": r.total_days,
                "Estado": r.status.value,
                "Motivo": r.reason or "",
            }
            for r in requests
        ]
        return rows_to_csv(rows, EXPORT_FIELDS)
