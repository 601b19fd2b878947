from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_RECENT_LOGS
from ..core.enums import AttendanceType
from ..employees.kiosk import KioskProvisioner
from .model import AttendanceLog
from .repository import AttendanceRepository


@dataclass(frozen=True)
class ClockResult:
    employee_id: int
    type: AttendanceType
    timestamp: datetime


class AttendanceService:
    def __init__(self, logs: AttendanceRepository, kiosk: KioskProvisioner):
        self._logs = logs
        self._kiosk = kiosk

    def clock(self, *, rut: str, pin: str, now: Optional[datetime] = None) -> ClockResult:
        """Kiosk mark: IN if the employee has no open IN today, OUT otherwise."""

        now = now or now_local()
        employee_id = self._kiosk.authenticate(rut=rut, pin=pin)

        last = self._logs.last_for_employee_on(employee_id, now.date())
        mark = AttendanceType.OUT if last and last.type == AttendanceType.IN else AttendanceType.IN

        self._logs.create_log(employee_id=employee_id, timestamp=now, type=mark)
        return ClockResult(employee_id=employee_id, type=mark, timestamp=now)

    def count_check_ins(self, day: date) -> int:
        return self._logs.count_for_day(day, type=AttendanceType.IN)

    def recent_activity(self, *, limit: int = DEFAULT_RECENT_LOGS) -> Sequence[AttendanceLog]:
        return self._logs.list_recent(limit)
