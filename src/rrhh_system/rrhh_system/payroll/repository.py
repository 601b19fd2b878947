from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import PayrollParameters


class PayrollParameterRepository(Protocol):
    def get_by_period(self, period_date: date) -> Optional[PayrollParameters]:
        raise NotImplementedError

    def upsert(self, params: PayrollParameters) -> None:
        """Insert or overwrite the row of params.period_date."""

        raise NotImplementedError
