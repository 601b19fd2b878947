from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AbsenceStatus
from .model import AbsenceRequest, AbsenceType


class AbsenceRepository(Protocol):
    def list_types(self) -> Sequence[AbsenceType]:
        raise NotImplementedError

    def list_requests(self, *, status: Optional[AbsenceStatus] = None) -> Sequence[AbsenceRequest]:
        """Newest first, with employee and type names joined."""

        raise NotImplementedError

    def get_request(self, request_id: int) -> Optional[AbsenceRequest]:
        raise NotImplementedError

    def create_request(
        self,
        *,
        employee_id: int,
        type_id: int,
        start_date: date,
        end_date: date,
        total_days: int,
        reason: Optional[str],
    ) -> int:
        raise NotImplementedError

    def set_status(self, request_id: int, status: AbsenceStatus) -> bool:
        raise NotImplementedError

    def count_by_status(self, status: AbsenceStatus) -> int:
        raise NotImplementedError
