from __future__ import annotations

import json
from datetime import time
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, load_json_list, to_time
from .model import DEFAULT_WORK_DAYS, Shift
from .repository import ShiftRepository


def _row_to_shift(r: Dict[str, Any]) -> Shift:
    days = tuple(int(d) for d in load_json_list(r.get("work_days")))
    return Shift(
        shift_id=int(r["id"]),
        name=r["name"],
        start_time=to_time(r["start_time"]),
        end_time=to_time(r["end_time"]),
        break_minutes=int(r.get("break_minutes") or 0),
        tolerance_minutes=int(r.get("tolerance_minutes") or 0),
        work_days=days or DEFAULT_WORK_DAYS,
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, start_time, end_time, break_minutes, tolerance_minutes, work_days
                FROM rrhh_turnos
                ORDER BY name
                """
            )
            return [_row_to_shift(r) for r in fetchall(cur)]

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, start_time, end_time, break_minutes, tolerance_minutes, work_days
                FROM rrhh_turnos
                WHERE id=%s
                """,
                (int(shift_id),),
            )
            r = fetchone(cur)
            return _row_to_shift(r) if r else None

    def create(
        self,
        *,
        name: str,
        start_time: time,
        end_time: time,
        break_minutes: int,
        tolerance_minutes: int,
        work_days: Sequence[int],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO rrhh_turnos(name, start_time, end_time, break_minutes, tolerance_minutes, work_days)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (name, start_time, end_time, int(break_minutes), int(tolerance_minutes), json.dumps(list(work_days))),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, shift_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM rrhh_turnos WHERE id=%s", (int(shift_id),))
            return cur.rowcount > 0
