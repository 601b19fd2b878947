from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Course:
    course_id: int
    name: str


@dataclass(frozen=True)
class Certification:
    """An employee's accreditation for one course.

    ``certificate_path`` is the storage path, not a URL; the status is never
    stored and is derived from ``expiry_date`` when displayed.
    """

    certification_id: int
    employee_id: int
    course_id: int
    issue_date: Optional[date]
    expiry_date: Optional[date]
    certificate_path: Optional[str] = None
    course_name: Optional[str] = None
