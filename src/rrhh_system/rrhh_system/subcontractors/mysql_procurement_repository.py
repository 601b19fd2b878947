from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Supplier
from .repository import SubcontractorRepository


class MySQLProcurementRepository(SubcontractorRepository):
    """Reads the procurement database, a separate connection from the HR one."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_subcontractors(self) -> Sequence[Supplier]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, nombre, rut, contacto, correo
                FROM proveedores
                WHERE subcontrato=1
                ORDER BY nombre ASC
                """
            )
            return [
                Supplier(
                    supplier_id=int(r["id"]),
                    name=r["nombre"],
                    rut=r.get("rut"),
                    contact=r.get("contacto"),
                    email=r.get("correo"),
                )
                for r in fetchall(cur)
            ]

    def unflag(self, supplier_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE proveedores SET subcontrato=0 WHERE id=%s", (int(supplier_id),))
            return cur.rowcount > 0
