from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Sequence

from ..absences.service import AbsenceService
from ..attendance.model import AttendanceLog
from ..attendance.service import AttendanceService
from ..certifications.repository import CertificationRepository, CourseRepository
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_RECENT_LOGS
from ..employees.repository import EmployeeRepository
from .pending import PendingItem, aggregate_pending


@dataclass(frozen=True)
class DashboardStats:
    active_employees: int
    today_attendance: int
    pending_absences: int
    payroll_period: str


@dataclass(frozen=True)
class DashboardData:
    stats: DashboardStats
    recent_logs: Sequence[AttendanceLog]
    pending: List[PendingItem]


class DashboardService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceService,
        absences: AbsenceService,
        certifications: CertificationRepository,
        courses: CourseRepository,
    ):
        self._employees = employees
        self._attendance = attendance
        self._absences = absences
        self._certifications = certifications
        self._courses = courses

    def load(self, *, now: Optional[datetime] = None) -> DashboardData:
        now = now or now_local()
        today: date = now.date()

        employees = self._employees.list_all()
        pending_absences = self._absences.list_pending()

        stats = DashboardStats(
            active_employees=len(employees),
            today_attendance=self._attendance.count_check_ins(today),
            pending_absences=len(pending_absences),
            payroll_period=today.strftime("%m/%Y"),
        )
        pending = aggregate_pending(
            pending_absences,
            employees,
            self._certifications.list_all(),
            self._courses.list_all(),
            today,
            now=now,
        )
        return DashboardData(
            stats=stats,
            recent_logs=self._attendance.recent_activity(limit=DEFAULT_RECENT_LOGS),
            pending=pending,
        )
