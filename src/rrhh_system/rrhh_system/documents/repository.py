from __future__ import annotations

from typing import Protocol, Sequence

from .model import EmployeeDocument


class DocumentRepository(Protocol):
    def list_for_employee(self, employee_id: int) -> Sequence[EmployeeDocument]:
        raise NotImplementedError

    def create(self, *, employee_id: int, document_type: str, file_path: str) -> int:
        raise NotImplementedError
