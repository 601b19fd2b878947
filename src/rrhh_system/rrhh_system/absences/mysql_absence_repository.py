from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AbsenceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AbsenceRequest, AbsenceType
from .repository import AbsenceRepository

_SELECT = """
    SELECT r.id, r.employee_id, r.type_id, r.start_date, r.end_date, r.total_days,
           r.reason, r.status, r.requested_at,
           CONCAT(e.first_name, ' ', e.last_name) AS employee_name,
           t.name AS type_name, t.color AS type_color
    FROM rrhh_employee_absences r
    LEFT JOIN rrhh_employees e ON e.id = r.employee_id
    LEFT JOIN rrhh_absence_types t ON t.id = r.type_id
"""


def _row_to_request(r: Dict[str, Any]) -> AbsenceRequest:
    return AbsenceRequest(
        request_id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        type_id=int(r["type_id"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        total_days=int(r["total_days"]),
        reason=r.get("reason"),
        status=AbsenceStatus(r["status"]),
        requested_at=r["requested_at"],
        employee_name=r.get("employee_name"),
        type_name=r.get("type_name"),
        type_color=r.get("type_color"),
    )


class MySQLAbsenceRepository(AbsenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_types(self) -> Sequence[AbsenceType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, color FROM rrhh_absence_types ORDER BY name")
            return [AbsenceType(type_id=int(r["id"]), name=r["name"], color=r.get("color")) for r in fetchall(cur)]

    def list_requests(self, *, status: Optional[AbsenceStatus] = None) -> Sequence[AbsenceRequest]:
        sql = _SELECT
        params: tuple = ()
        if status is not None:
            sql += " WHERE r.status=%s"
            params = (status.value,)
        sql += " ORDER BY r.requested_at DESC, r.id DESC"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_row_to_request(r) for r in fetchall(cur)]

    def get_request(self, request_id: int) -> Optional[AbsenceRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE r.id=%s", (int(request_id),))
            r = fetchone(cur)
            return _row_to_request(r) if r else None

    def create_request(
        self,
        *,
        employee_id: int,
        type_id: int,
        start_date: date,
        end_date: date,
        total_days: int,
        reason: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO rrhh_employee_absences(employee_id, type_id, start_date, end_date, total_days, reason, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), int(type_id), start_date, end_date, int(total_days), reason, AbsenceStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def set_status(self, request_id: int, status: AbsenceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE rrhh_employee_absences SET status=%s WHERE id=%s", (status.value, int(request_id)))
            return cur.rowcount > 0

    def count_by_status(self, status: AbsenceStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM rrhh_employee_absences WHERE status=%s", (status.value,))
            return int(fetchone(cur)["n"])
