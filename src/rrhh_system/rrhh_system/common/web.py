from __future__ import annotations

import logging
import sys
from datetime import date
from typing import Optional

from flask import current_app, flash, request

from ..core.exceptions import DomainError, NotFoundError, ValidationError
from .datetime_utils import parse_optional_date

logger = logging.getLogger(__name__)


def form_str(name: str) -> str:
    return (request.form.get(name) or "").strip()


def form_int(name: str) -> Optional[int]:
    v = form_str(name)
    if not v:
        return None
    try:
        return int(v)
    except ValueError:
        raise ValidationError(f"Valor numérico inválido en {name}")


def form_date(name: str) -> Optional[date]:
    return parse_optional_date(request.form.get(name))


def flash_domain_error(e: DomainError) -> None:
    flash(str(e), "warning" if isinstance(e, NotFoundError) else "danger")


def flash_unexpected(message: str) -> None:
    """Log the active exception and show a generic message (detail only in DEBUG)."""
    logger.exception(message)
    if current_app.config.get("DEBUG"):
        flash(f"{message}: {sys.exc_info()[1]}", "danger")
    else:
        flash(message, "danger")
