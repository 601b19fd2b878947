from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AbsenceStatus


@dataclass(frozen=True)
class AbsenceType:
    type_id: int
    name: str
    color: Optional[str] = None


@dataclass(frozen=True)
class AbsenceRequest:
    request_id: int
    employee_id: int
    type_id: int
    start_date: date
    end_date: date
    total_days: int
    reason: Optional[str]
    status: AbsenceStatus
    requested_at: datetime
    employee_name: Optional[str] = None
    type_name: Optional[str] = None
    type_color: Optional[str] = None
