from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from datetime import date
from typing import Mapping, Optional

from ..core.exceptions import ExternalServiceError, ValidationError
from .indicators import IndicatorsProvider
from .model import PayrollParameters
from .repository import PayrollParameterRepository

logger = logging.getLogger(__name__)

FIELDS = ("uf_value", "utm_value", "min_wage", "top_limit_afp", "top_limit_cesantia")


@dataclass(frozen=True)
class LoadedParameters:
    params: PayrollParameters
    stored: bool
    synced_from_api: bool


class PayrollParameterService:
    def __init__(self, repo: PayrollParameterRepository, indicators: Optional[IndicatorsProvider] = None):
        self._repo = repo
        self._indicators = indicators

    def load(self, month: date) -> LoadedParameters:
        """Stored values for the month; UF/UTM pre-filled from the API when missing."""

        period = month.replace(day=1)
        stored = self._repo.get_by_period(period)
        params = stored or PayrollParameters(period_date=period)

        synced = False
        if self._indicators is not None and (not params.uf_value or not params.utm_value):
            try:
                ind = self._indicators.fetch()
            except ExternalServiceError as e:
                logger.warning("Indicators sync skipped for %s: %s", period.isoformat(), e)
            else:
                params = replace(
                    params,
                    uf_value=params.uf_value or ind.uf,
                    utm_value=params.utm_value or ind.utm,
                )
                synced = True

        return LoadedParameters(params=params, stored=stored is not None, synced_from_api=synced)

    def save(self, month: date, values: Mapping[str, object]) -> PayrollParameters:
        """Blank fields keep the PayrollParameters defaults."""

        parsed = {}
        for name in FIELDS:
            raw = values.get(name)
            if raw is None or not str(raw).strip():
                continue
            try:
                number = float(str(raw).strip().replace(",", "."))
            except ValueError:
                raise ValidationError(f"Valor inválido para {name}")
            if not math.isfinite(number):
                raise ValidationError(f"Valor inválido para {name}")
            if number < 0:
                raise ValidationError(f"{name} no puede ser negativo")
            parsed[name] = number

        params = PayrollParameters(period_date=month.replace(day=1), **parsed)
        self._repo.upsert(params)
        return params
