from __future__ import annotations

from datetime import date
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import PayrollParameters
from .repository import PayrollParameterRepository


class MySQLPayrollParameterRepository(PayrollParameterRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_period(self, period_date: date) -> Optional[PayrollParameters]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT period_date, uf_value, utm_value, min_wage, top_limit_afp, top_limit_cesantia
                FROM rrhh_payroll_parameters
                WHERE period_date=%s
                """,
                (period_date,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return PayrollParameters(
                period_date=r["period_date"],
                uf_value=float(r["uf_value"] or 0),
                utm_value=float(r["utm_value"] or 0),
                min_wage=float(r["min_wage"] or 0),
                top_limit_afp=float(r["top_limit_afp"] or 0),
                top_limit_cesantia=float(r["top_limit_cesantia"] or 0),
            )

    def upsert(self, params: PayrollParameters) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO rrhh_payroll_parameters(
                    period_date, uf_value, utm_value, min_wage, top_limit_afp, top_limit_cesantia
                )
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    uf_value=VALUES(uf_value),
                    utm_value=VALUES(utm_value),
                    min_wage=VALUES(min_wage),
                    top_limit_afp=VALUES(top_limit_afp),
                    top_limit_cesantia=VALUES(top_limit_cesantia)
                """,
                (
                    params.period_date,
                    params.uf_value,
                    params.utm_value,
                    params.min_wage,
                    params.top_limit_afp,
                    params.top_limit_cesantia,
                ),
            )
