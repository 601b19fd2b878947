"""Traffic-light classification of dates and mandatory fields.

Every screen that colours a contract, certification or missing field goes
through these functions so the warning window lives in one place
(``EXPIRY_WARNING_DAYS``).
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..core.constants import EXPIRY_WARNING_DAYS
from ..core.enums import Severity


@dataclass(frozen=True)
class StatusResult:
    severity: Severity
    label: str
    days_left: Optional[int] = None

    @property
    def color(self) -> str:
        return self.severity.color

    @property
    def icon(self) -> str:
        return {Severity.OK: "✓", Severity.WARNING: "⚠", Severity.CRITICAL: "✕"}[self.severity]


def days_until(target: date, today: date) -> int:
    return (target - today).days


def classify_status(
    target: Optional[date],
    today: date,
    *,
    warning_days: int = EXPIRY_WARNING_DAYS,
) -> StatusResult:
    """Missing or past -> critical, within the window -> warning, else ok."""

    if target is None:
        return StatusResult(Severity.CRITICAL, "Faltante")

    diff = days_until(target, today)
    if diff < 0:
        return StatusResult(Severity.CRITICAL, "Vencido", diff)
    if diff <= warning_days:
        return StatusResult(Severity.WARNING, f"{diff}d", diff)
    return StatusResult(Severity.OK, "Ok", diff)


def classify_contract(termination_date: Optional[date], today: date) -> StatusResult:
    # Open-ended contracts have no termination date.
    if termination_date is None:
        return StatusResult(Severity.OK, "Indefinido")
    return classify_status(termination_date, today)


def classify_certification(certification: Any, today: date) -> StatusResult:
    """Status of one employee x course cell.

    ``certification`` is any object with an ``expiry_date`` attribute, or None
    when the employee never took the course.
    """

    if certification is None:
        return StatusResult(Severity.CRITICAL, "Faltante")
    expiry = getattr(certification, "expiry_date", None)
    if expiry is None:
        return StatusResult(Severity.WARNING, "Sin vencimiento")
    return classify_status(expiry, today)


def classify_field(value: Any) -> StatusResult:
    if value is None or (isinstance(value, str) and not value.strip()):
        return StatusResult(Severity.CRITICAL, "Faltante")
    return StatusResult(Severity.OK, "Ok")
