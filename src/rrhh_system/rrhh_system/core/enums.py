from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Semáforo de cumplimiento (verde / amarillo / rojo)."""

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def color(self) -> str:
        return {"ok": "green", "warning": "yellow", "critical": "red"}[self.value]


class PendingSeverity(str, Enum):
    """Prioridad de un ítem del reporte de pendientes."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def score(self) -> int:
        return {"high": 3, "medium": 2, "low": 1}[self.value]


class AbsenceStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class MaterialRequestStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    DELIVERED = "DELIVERED"


class AttendanceType(str, Enum):
    IN = "IN"
    OUT = "OUT"


class ProvisioningStatus(str, Enum):
    """Estado del acceso al reloj control (kiosko) de un empleado."""

    NOT_REQUIRED = "not_required"
    PENDING = "pending"
    PROVISIONED = "provisioned"
    FAILED = "failed"
