from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Certification, Course
from .repository import CertificationRepository, CourseRepository

_SELECT = """
    SELECT c.id, c.employee_id, c.course_id, c.issue_date, c.expiry_date, c.certificate_url,
           k.name AS course_name
    FROM rrhh_employee_certifications c
    LEFT JOIN rrhh_course_catalog k ON k.id = c.course_id
"""


def _row_to_certification(r: Dict[str, Any]) -> Certification:
    return Certification(
        certification_id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        course_id=int(r["course_id"]),
        issue_date=r.get("issue_date"),
        expiry_date=r.get("expiry_date"),
        certificate_path=r.get("certificate_url"),
        course_name=r.get("course_name"),
    )


class MySQLCourseRepository(CourseRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Course]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name FROM rrhh_course_catalog ORDER BY name")
            return [Course(course_id=int(r["id"]), name=r["name"]) for r in fetchall(cur)]


class MySQLCertificationRepository(CertificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int) -> Sequence[Certification]:
        with db_cursor(self._conn_factory) as (_, cur):
            # NULL expiry dates sort last.
            cur.execute(
                _SELECT + " WHERE c.employee_id=%s ORDER BY c.expiry_date IS NULL, c.expiry_date ASC",
                (int(employee_id),),
            )
            return [_row_to_certification(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Certification]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY c.employee_id, c.expiry_date")
            return [_row_to_certification(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: int,
        course_id: int,
        issue_date: Optional[date],
        expiry_date: Optional[date],
        certificate_path: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO rrhh_employee_certifications(employee_id, course_id, issue_date, expiry_date, certificate_url)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(employee_id), int(course_id), issue_date, expiry_date, certificate_path),
            )
            return int(cur.lastrowid)
