from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.constants import DEFAULT_MIN_WAGE, DEFAULT_TOP_LIMIT_AFP, DEFAULT_TOP_LIMIT_CESANTIA


@dataclass(frozen=True)
class PayrollParameters:
    """Monthly economic parameters; one row per period_date (first of month)."""

    period_date: date
    uf_value: float = 0.0
    utm_value: float = 0.0
    min_wage: float = DEFAULT_MIN_WAGE
    top_limit_afp: float = DEFAULT_TOP_LIMIT_AFP
    top_limit_cesantia: float = DEFAULT_TOP_LIMIT_CESANTIA


@dataclass(frozen=True)
class EconomicIndicators:
    uf: float
    utm: float
