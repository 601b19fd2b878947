"""Client for the public Chilean economic indicators API (mindicador.cl)."""
from __future__ import annotations

import logging
from typing import Optional, Protocol

import requests

from ..core.exceptions import ExternalServiceError
from .model import EconomicIndicators

logger = logging.getLogger(__name__)

DEFAULT_INDICATORS_URL = "https://mindicador.cl/api"


class IndicatorsProvider(Protocol):
    def fetch(self) -> EconomicIndicators:
        raise NotImplementedError


class EconomicIndicatorsClient(IndicatorsProvider):
    def __init__(
        self,
        url: str = DEFAULT_INDICATORS_URL,
        *,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ):
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch(self) -> EconomicIndicators:
        """Current UF and UTM. One request, no caching."""
        try:
            resp = self._session.get(self._url, timeout=self._timeout)
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as e:
            raise ExternalServiceError(f"No se pudo consultar indicadores: {e}")
        except ValueError:
            raise ExternalServiceError("Respuesta de indicadores no es JSON")

        try:
            return EconomicIndicators(
                uf=float(payload["uf"]["valor"]),
                utm=float(payload["utm"]["valor"]),
            )
        except (KeyError, TypeError, ValueError):
            logger.warning("Unexpected indicators payload from %s", self._url)
            raise ExternalServiceError("Formato de indicadores inesperado")
