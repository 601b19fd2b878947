from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..storage.file_storage import FileStorage, Upload, build_object_path
from .model import EmployeeDocument
from .repository import DocumentRepository


class DocumentService:
    """Digital folder (carpeta digital) of an employee."""

    def __init__(self, documents: DocumentRepository, storage: FileStorage):
        self._documents = documents
        self._storage = storage

    def list_for_employee(self, employee_id: int) -> Sequence[EmployeeDocument]:
        return self._documents.list_for_employee(int(employee_id))

    def url_for(self, document: EmployeeDocument) -> str:
        return self._storage.public_url(document.file_path)

    def upload(self, *, employee_id: int, document_type: str, file: Optional[Upload]) -> int:
        document_type = require_non_empty(document_type, "Tipo de documento")
        if file is None:
            raise ValidationError("Debe adjuntar un archivo")

        path = build_object_path(int(employee_id), file, stem=f"{document_type}_")
        self._storage.upload(path, file)
        return self._documents.create(employee_id=int(employee_id), document_type=document_type, file_path=path)
