from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.rrhh_system.rrhh_system.certifications.model import Certification
from src.rrhh_system.rrhh_system.core.constants import EXPIRY_WARNING_DAYS
from src.rrhh_system.rrhh_system.core.enums import Severity
from src.rrhh_system.rrhh_system.status.classifier import (
    classify_certification,
    classify_contract,
    classify_field,
    classify_status,
)

TODAY = date(2026, 3, 15)


@pytest.mark.parametrize(
    "target, expected",
    [
        (None, Severity.CRITICAL),
        (TODAY - timedelta(days=1), Severity.CRITICAL),
        (TODAY, Severity.WARNING),
        (TODAY + timedelta(days=EXPIRY_WARNING_DAYS), Severity.WARNING),
        (TODAY + timedelta(days=EXPIRY_WARNING_DAYS + 1), Severity.OK),
    ],
)
def test_classify_status_thresholds(target, expected):
    assert classify_status(target, TODAY).severity == expected


def test_warning_label_counts_days_left():
    st = classify_status(TODAY + timedelta(days=12), TODAY)
    assert st.label == "12d"
    assert st.days_left == 12
    assert st.color == "yellow"


def test_open_ended_contract_is_ok():
    st = classify_contract(None, TODAY)
    assert st.severity == Severity.OK
    assert st.label == "Indefinido"


def test_expired_contract_is_critical():
    assert classify_contract(date(2026, 1, 1), TODAY).label == "Vencido"


def _cert(expiry):
    return Certification(certification_id=1, employee_id=1, course_id=1, issue_date=None, expiry_date=expiry)


def test_certification_states():
    assert classify_certification(None, TODAY).label == "Faltante"
    assert classify_certification(_cert(None), TODAY).severity == Severity.WARNING
    assert classify_certification(_cert(date(2027, 1, 1)), TODAY).severity == Severity.OK


def test_classify_field_blank_is_missing():
    assert classify_field("  ").severity == Severity.CRITICAL
    assert classify_field(None).label == "Faltante"
    assert classify_field("Chilena").severity == Severity.OK
