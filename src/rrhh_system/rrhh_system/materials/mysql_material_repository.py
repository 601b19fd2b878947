from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import MaterialRequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import MaterialRequest, Product
from .repository import MaterialRepository

_SELECT_REQUEST = """
    SELECT m.id, m.employee_id, m.product_code, m.quantity, m.status, m.created_at,
           m.signed_receipt_url, p.name AS product_name, p.unit AS product_unit
    FROM material_requests m
    INNER JOIN products p ON p.code = m.product_code
"""


def _row_to_product(r: Dict[str, Any]) -> Product:
    stock = r.get("current_stock")
    return Product(
        code=r["code"],
        name=r["name"],
        unit=r.get("unit"),
        current_stock=float(stock) if stock is not None else None,
    )


def _row_to_request(r: Dict[str, Any]) -> MaterialRequest:
    return MaterialRequest(
        request_id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        product_code=r["product_code"],
        quantity=int(r["quantity"]),
        status=MaterialRequestStatus(r["status"]),
        created_at=r.get("created_at"),
        signed_receipt_path=r.get("signed_receipt_url"),
        product_name=r.get("product_name"),
        product_unit=r.get("product_unit"),
    )


class MySQLMaterialRepository(MaterialRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_hr_products(self) -> Sequence[Product]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT code, name, unit, current_stock FROM products WHERE is_rrhh_visible=1 ORDER BY name"
            )
            return [_row_to_product(r) for r in fetchall(cur)]

    def get_product(self, code: str) -> Optional[Product]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT code, name, unit, current_stock FROM products WHERE code=%s", (code,))
            r = fetchone(cur)
            return _row_to_product(r) if r else None

    def list_for_employee(self, employee_id: int) -> Sequence[MaterialRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_REQUEST + " WHERE m.employee_id=%s ORDER BY m.created_at DESC", (int(employee_id),))
            return [_row_to_request(r) for r in fetchall(cur)]

    def get_request(self, request_id: int) -> Optional[MaterialRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_REQUEST + " WHERE m.id=%s", (int(request_id),))
            r = fetchone(cur)
            return _row_to_request(r) if r else None

    def create_request(self, *, employee_id: int, product_code: str, quantity: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO material_requests(employee_id, product_code, quantity, status) VALUES(%s,%s,%s,%s)",
                (int(employee_id), product_code, int(quantity), MaterialRequestStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def set_status(self, request_id: int, status: MaterialRequestStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE material_requests SET status=%s WHERE id=%s", (status.value, int(request_id)))
            return cur.rowcount > 0
