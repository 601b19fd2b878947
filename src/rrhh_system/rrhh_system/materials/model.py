from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import MaterialRequestStatus


@dataclass(frozen=True)
class Product:
    code: str
    name: str
    unit: Optional[str] = None
    current_stock: Optional[float] = None


@dataclass(frozen=True)
class MaterialRequest:
    """EPP (personal protective equipment) request for one employee."""

    request_id: int
    employee_id: int
    product_code: str
    quantity: int
    status: MaterialRequestStatus
    created_at: Optional[datetime] = None
    signed_receipt_path: Optional[str] = None
    product_name: Optional[str] = None
    product_unit: Optional[str] = None
