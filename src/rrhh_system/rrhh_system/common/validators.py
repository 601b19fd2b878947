from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

_PIN_RE = re.compile(r"^\d{4,8}$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} es obligatorio")
    return value.strip()


def require_in_range(value: int, field_name: str, low: int, high: int) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} no es un número")
    if n < low or n > high:
        raise ValidationError(f"{field_name} debe estar entre {low} y {high}")
    return n


def clean_rut(value: Optional[str]) -> str:
    """Normalize a RUT: drop dots, trim, lowercase (keeps the dash and DV)."""
    if not value:
        return ""
    return value.replace(".", "").strip().lower()


def require_pin(value: str) -> str:
    v = (value or "").strip()
    if not _PIN_RE.match(v):
        raise ValidationError("El PIN debe tener entre 4 y 8 dígitos")
    return v


def format_clp(value) -> str:
    """Format a peso amount with Chilean thousands separators (1.234.567)."""
    if value is None or value == "":
        return ""
    digits = re.sub(r"\D", "", str(value).split(".")[0])
    if not digits:
        return ""
    return f"{int(digits):,}".replace(",", ".")
