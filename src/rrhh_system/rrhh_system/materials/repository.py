from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import MaterialRequestStatus
from .model import MaterialRequest, Product


class MaterialRepository(Protocol):
    def list_hr_products(self) -> Sequence[Product]:
        """Products flagged as visible to HR, by name."""

        raise NotImplementedError

    def get_product(self, code: str) -> Optional[Product]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[MaterialRequest]:
        raise NotImplementedError

    def get_request(self, request_id: int) -> Optional[MaterialRequest]:
        raise NotImplementedError

    def create_request(self, *, employee_id: int, product_code: str, quantity: int) -> int:
        raise NotImplementedError

    def set_status(self, request_id: int, status: MaterialRequestStatus) -> bool:
        raise NotImplementedError
