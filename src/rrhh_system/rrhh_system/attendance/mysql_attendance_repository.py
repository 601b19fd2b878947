from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Sequence

from ..core.enums import AttendanceType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceLog
from .repository import AttendanceRepository


def _day_bounds(day: date) -> tuple[datetime, datetime]:
    return datetime.combine(day, time.min), datetime.combine(day, time.max)


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_log(self, *, employee_id: int, timestamp: datetime, type: AttendanceType) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO rrhh_attendance_logs(employee_id, timestamp, type) VALUES(%s,%s,%s)",
                (int(employee_id), timestamp, type.value),
            )
            return int(cur.lastrowid)

    def last_for_employee_on(self, employee_id: int, day: date) -> Optional[AttendanceLog]:
        start, end = _day_bounds(day)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, timestamp, type
                FROM rrhh_attendance_logs
                WHERE employee_id=%s AND timestamp BETWEEN %s AND %s
                ORDER BY timestamp DESC, id DESC
                LIMIT 1
                """,
                (int(employee_id), start, end),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceLog(
                log_id=int(r["id"]),
                employee_id=int(r["employee_id"]),
                timestamp=r["timestamp"],
                type=AttendanceType(r["type"]),
            )

    def count_for_day(self, day: date, *, type: AttendanceType) -> int:
        start, end = _day_bounds(day)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS n FROM rrhh_attendance_logs WHERE type=%s AND timestamp BETWEEN %s AND %s",
                (type.value, start, end),
            )
            return int(fetchone(cur)["n"])

    def list_recent(self, limit: int) -> Sequence[AttendanceLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT l.id, l.employee_id, l.timestamp, l.type,
                       CONCAT(e.first_name, ' ', e.last_name) AS employee_name
                FROM rrhh_attendance_logs l
                LEFT JOIN rrhh_employees e ON e.id = l.employee_id
                ORDER BY l.timestamp DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [
                AttendanceLog(
                    log_id=int(r["id"]),
                    employee_id=int(r["employee_id"]),
                    timestamp=r["timestamp"],
                    type=AttendanceType(r["type"]),
                    employee_name=r.get("employee_name"),
                )
                for r in fetchall(cur)
            ]
