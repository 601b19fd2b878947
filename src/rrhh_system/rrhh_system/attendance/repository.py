from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceType
from .model import AttendanceLog


class AttendanceRepository(Protocol):
    def create_log(self, *, employee_id: int, timestamp: datetime, type: AttendanceType) -> int:
        raise NotImplementedError

    def last_for_employee_on(self, employee_id: int, day: date) -> Optional[AttendanceLog]:
        raise NotImplementedError

    def count_for_day(self, day: date, *, type: AttendanceType) -> int:
        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[AttendanceLog]:
        """Latest marks with the employee name joined."""

        raise NotImplementedError
