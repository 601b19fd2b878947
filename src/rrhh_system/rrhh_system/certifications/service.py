from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import today_local
from ..core.exceptions import ValidationError
from ..status.classifier import StatusResult, classify_certification
from ..storage.file_storage import FileStorage, Upload, build_object_path
from .model import Certification, Course
from .repository import CertificationRepository, CourseRepository


@dataclass(frozen=True)
class CertificationView:
    certification: Certification
    status: StatusResult
    certificate_url: Optional[str]


class CertificationService:
    def __init__(self, certifications: CertificationRepository, courses: CourseRepository, storage: FileStorage):
        self._certifications = certifications
        self._courses = courses
        self._storage = storage

    def list_courses(self) -> Sequence[Course]:
        return self._courses.list_all()

    def list_for_employee(self, employee_id: int, *, today: Optional[date] = None) -> list[CertificationView]:
        today = today or today_local()
        return [
            CertificationView(
                certification=c,
                status=classify_certification(c, today),
                certificate_url=self._storage.public_url(c.certificate_path) if c.certificate_path else None,
            )
            for c in self._certifications.list_for_employee(int(employee_id))
        ]

    def add(
        self,
        *,
        employee_id: int,
        course_id: Optional[int],
        issue_date: Optional[date],
        expiry_date: Optional[date],
        file: Optional[Upload],
    ) -> int:
        if not course_id:
            raise ValidationError("Debe seleccionar un curso")
        if file is None:
            raise ValidationError("Debe adjuntar el certificado")
        if issue_date and expiry_date and expiry_date < issue_date:
            raise ValidationError("El vencimiento no puede ser anterior a la emisión")

        path = build_object_path(int(employee_id), file, stem=f"cert_{int(course_id)}_")
        self._storage.upload(path, file)

        return self._certifications.create(
            employee_id=int(employee_id),
            course_id=int(course_id),
            issue_date=issue_date,
            expiry_date=expiry_date,
            certificate_path=path,
        )
