from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Certification, Course


class CourseRepository(Protocol):
    def list_all(self) -> Sequence[Course]:
        raise NotImplementedError


class CertificationRepository(Protocol):
    def list_for_employee(self, employee_id: int) -> Sequence[Certification]:
        """Ordered by expiry date ascending."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Certification]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        course_id: int,
        issue_date: Optional[date],
        expiry_date: Optional[date],
        certificate_path: str,
    ) -> int:
        raise NotImplementedError
