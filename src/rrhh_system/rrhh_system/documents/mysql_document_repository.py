from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import EmployeeDocument
from .repository import DocumentRepository


class MySQLDocumentRepository(DocumentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int) -> Sequence[EmployeeDocument]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, document_type, file_path, created_at
                FROM rrhh_employee_documents
                WHERE employee_id=%s
                ORDER BY created_at DESC
                """,
                (int(employee_id),),
            )
            return [
                EmployeeDocument(
                    document_id=int(r["id"]),
                    employee_id=int(r["employee_id"]),
                    document_type=r["document_type"],
                    file_path=r["file_path"],
                    uploaded_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]

    def create(self, *, employee_id: int, document_type: str, file_path: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO rrhh_employee_documents(employee_id, document_type, file_path) VALUES(%s,%s,%s)",
                (int(employee_id), document_type, file_path),
            )
            return int(cur.lastrowid)
