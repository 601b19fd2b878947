from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceType


@dataclass(frozen=True)
class AttendanceLog:
    """Domain entity: one clock mark (IN or OUT)."""

    log_id: int
    employee_id: int
    timestamp: datetime
    type: AttendanceType
    employee_name: Optional[str] = None
