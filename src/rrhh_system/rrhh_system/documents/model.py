from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class EmployeeDocument:
    document_id: int
    employee_id: int
    document_type: str
    file_path: str
    uploaded_at: Optional[datetime] = None
