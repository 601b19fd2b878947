from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Supplier:
    """A supplier (proveedor) of the procurement system."""

    supplier_id: int
    name: str
    rut: Optional[str] = None
    contact: Optional[str] = None
    email: Optional[str] = None
