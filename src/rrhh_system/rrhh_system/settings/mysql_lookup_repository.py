from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import LookupItem, LookupKind
from .repository import LookupRepository


class MySQLLookupRepository(LookupRepository):
    """One name-only catalog table. The table name comes from LOOKUP_KINDS, never from input."""

    def __init__(self, conn_factory: DatabaseConnection, kind: LookupKind):
        self._conn_factory = conn_factory
        self._kind = kind

    def list_all(self) -> Sequence[LookupItem]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT id, name FROM {self._kind.table} ORDER BY name")
            return [LookupItem(item_id=int(r["id"]), name=r["name"]) for r in fetchall(cur)]

    def create(self, name: str) -> int:
        duplicate = f"Ya existe un {self._kind.label} llamado {name}"
        with db_cursor(self._conn_factory, duplicate_message=duplicate) as (_, cur):
            cur.execute(f"INSERT INTO {self._kind.table}(name) VALUES(%s)", (name,))
            return int(cur.lastrowid)

    def delete_by_id(self, item_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self._kind.table} WHERE id=%s", (int(item_id),))
            return cur.rowcount > 0
