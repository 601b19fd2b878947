from __future__ import annotations

import io
from datetime import date

import pandas as pd
import pytest

from src.rrhh_system.rrhh_system.common.datetime_utils import inclusive_days, parse_month, parse_optional_date
from src.rrhh_system.rrhh_system.common.exports import rows_to_csv, rows_to_xlsx
from src.rrhh_system.rrhh_system.common.validators import clean_rut, format_clp, require_in_range, require_pin
from src.rrhh_system.rrhh_system.core.exceptions import ValidationError


def test_csv_ignores_extra_keys():
    data = rows_to_csv([{"a": 1, "b": "ñ", "zz": "x"}], ["a", "b"])
    assert data.decode("utf-8-sig").splitlines() == ["a,b", "1,ñ"]


def test_xlsx_sheet_name():
    data = rows_to_xlsx([{"Nombre": "Ana"}], sheet_name="Hoja")
    df = pd.read_excel(io.BytesIO(data), sheet_name="Hoja")
    assert df.to_dict("records") == [{"Nombre": "Ana"}]


@pytest.mark.parametrize(
    "raw, expected",
    [("12.345.678-K", "12345678-k"), ("  9876543-2 ", "9876543-2"), (None, ""), ("", "")],
)
def test_clean_rut(raw, expected):
    assert clean_rut(raw) == expected


def test_pin_rules():
    assert require_pin(" 1234 ") == "1234"
    for bad in ("123", "123456789", "12a4", None):
        with pytest.raises(ValidationError):
            require_pin(bad)


def test_range():
    assert require_in_range("3", "Nota", 1, 5) == 3
    with pytest.raises(ValidationError):
        require_in_range(9, "Nota", 1, 5)


def test_format_clp():
    assert format_clp(1234567) == "1.234.567"
    assert format_clp("500000.0") == "500.000"
    assert format_clp(None) == ""


def test_dates():
    assert inclusive_days(date(2024, 1, 1), date(2024, 1, 3)) == 3
    assert parse_month("2026-03") == date(2026, 3, 1)
    assert parse_optional_date("") is None
    with pytest.raises(ValidationError):
        parse_optional_date("15/03/2026")
    with pytest.raises(ValidationError):
        parse_month("marzo")
