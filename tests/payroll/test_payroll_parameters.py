from __future__ import annotations

from datetime import date

import pytest
import requests

from src.rrhh_system.rrhh_system.core.exceptions import ExternalServiceError, ValidationError
from src.rrhh_system.rrhh_system.payroll.indicators import EconomicIndicatorsClient
from src.rrhh_system.rrhh_system.payroll.model import EconomicIndicators, PayrollParameters
from src.rrhh_system.rrhh_system.payroll.service import PayrollParameterService


class FakeParams:
    def __init__(self):
        self.rows: dict[date, PayrollParameters] = {}

    def get_by_period(self, period_date):
        return self.rows.get(period_date)

    def upsert(self, params):
        self.rows[params.period_date] = params


class StubIndicators:
    def __init__(self, result=None, error=None):
        self.result = result or EconomicIndicators(uf=38000.5, utm=66000.0)
        self.error = error
        self.calls = 0

    def fetch(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.result


class FakeResponse:
    def __init__(self, payload=None, status=200, bad_json=False):
        self._payload = payload
        self._status = status
        self._bad_json = bad_json

    def raise_for_status(self):
        if self._status >= 400:
            raise requests.HTTPError(f"{self._status} error")

    def json(self):
        if self._bad_json:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.urls = []

    def get(self, url, timeout=None):
        self.urls.append(url)
        if self.error:
            raise self.error
        return self.response


MARCH = date(2026, 3, 1)


def test_save_is_idempotent_per_month():
    repo = FakeParams()
    svc = PayrollParameterService(repo)

    svc.save(date(2026, 3, 20), {"uf_value": "38000,5", "utm_value": "66000"})
    svc.save(MARCH, {"uf_value": "39000", "utm_value": "66000"})

    assert list(repo.rows) == [MARCH]
    assert repo.rows[MARCH].uf_value == 39000.0
    assert repo.rows[MARCH].min_wage == 500000.0


def test_comma_decimal_accepted():
    params = PayrollParameterService(FakeParams()).save(MARCH, {"top_limit_afp": "84,3"})
    assert params.top_limit_afp == 84.3


@pytest.mark.parametrize(
    "values",
    [{"uf_value": "-1"}, {"utm_value": "abc"}, {"uf_value": "nan"}, {"min_wage": "inf"}, {"top_limit_afp": "-Infinity"}],
)
def test_invalid_values_rejected(values):
    repo = FakeParams()
    with pytest.raises(ValidationError):
        PayrollParameterService(repo).save(MARCH, values)
    assert repo.rows == {}


def test_blank_fields_keep_defaults():
    params = PayrollParameterService(FakeParams()).save(
        MARCH, {"uf_value": "38000", "min_wage": "", "top_limit_afp": "  ", "top_limit_cesantia": None}
    )

    assert params == PayrollParameters(period_date=MARCH, uf_value=38000.0)
    assert (params.min_wage, params.top_limit_afp, params.top_limit_cesantia) == (500000.0, 84.3, 126.6)


def test_stored_values_win_over_api():
    repo = FakeParams()
    repo.upsert(PayrollParameters(period_date=MARCH, uf_value=37000.0, utm_value=65000.0))
    indicators = StubIndicators()

    loaded = PayrollParameterService(repo, indicators).load(date(2026, 3, 9))

    assert loaded.stored
    assert not loaded.synced_from_api
    assert loaded.params.uf_value == 37000.0
    assert indicators.calls == 0


def test_api_fills_missing_values():
    repo = FakeParams()
    repo.upsert(PayrollParameters(period_date=MARCH, uf_value=37000.0))

    loaded = PayrollParameterService(repo, StubIndicators()).load(MARCH)

    assert loaded.synced_from_api
    assert (loaded.params.uf_value, loaded.params.utm_value) == (37000.0, 66000.0)


def test_new_month_uses_defaults_and_tolerates_api_failure():
    svc = PayrollParameterService(FakeParams(), StubIndicators(error=ExternalServiceError("down")))
    loaded = svc.load(MARCH)

    assert not loaded.stored
    assert not loaded.synced_from_api
    assert loaded.params == PayrollParameters(period_date=MARCH)
    assert loaded.params.min_wage == 500000.0


def test_client_parses_payload():
    session = FakeSession(FakeResponse({"uf": {"valor": 38123.45}, "utm": {"valor": "66362"}}))
    client = EconomicIndicatorsClient("https://example.test/api", session=session)

    assert client.fetch() == EconomicIndicators(uf=38123.45, utm=66362.0)
    assert session.urls == ["https://example.test/api"]


@pytest.mark.parametrize(
    "session",
    [
        FakeSession(error=requests.ConnectionError("offline")),
        FakeSession(FakeResponse(status=503)),
        FakeSession(FakeResponse(bad_json=True)),
        FakeSession(FakeResponse({"uf": {}})),
    ],
)
def test_client_errors_become_external_service_error(session):
    with pytest.raises(ExternalServiceError):
        EconomicIndicatorsClient(session=session).fetch()
