from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import MaterialRequestStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import MaterialRequest, Product
from .repository import MaterialRepository

_S = MaterialRequestStatus

ALLOWED_TRANSITIONS = {
    _S.PENDING: frozenset({_S.APPROVED, _S.REJECTED}),
    _S.APPROVED: frozenset({_S.DELIVERED}),
    _S.REJECTED: frozenset(),
    _S.DELIVERED: frozenset(),
}

STATUS_LABELS = {
    _S.PENDING: "Pendiente",
    _S.APPROVED: "Aprobado",
    _S.REJECTED: "Rechazado",
    _S.DELIVERED: "Entregado",
}


class MaterialRequestService:
    def __init__(self, materials: MaterialRepository):
        self._materials = materials

    def list_catalog(self) -> Sequence[Product]:
        return self._materials.list_hr_products()

    def list_for_employee(self, employee_id: int) -> Sequence[MaterialRequest]:
        return self._materials.list_for_employee(int(employee_id))

    def create_request(self, *, employee_id: int, product_code: Optional[str], quantity) -> int:
        code = (product_code or "").strip()
        if not code:
            raise ValidationError("Debe seleccionar un producto")
        try:
            qty = int(quantity)
        except (TypeError, ValueError):
            raise ValidationError("Cantidad inválida")
        if qty < 1:
            raise ValidationError("La cantidad debe ser al menos 1")
        if not self._materials.get_product(code):
            raise NotFoundError(f"Producto {code} no existe")

        return self._materials.create_request(employee_id=int(employee_id), product_code=code, quantity=qty)

    def change_status(self, request_id: int, new_status: MaterialRequestStatus) -> None:
        req = self._materials.get_request(int(request_id))
        if not req:
            raise NotFoundError("La solicitud no existe")
        if new_status not in ALLOWED_TRANSITIONS[req.status]:
            raise ValidationError(
                f"No se puede pasar de {STATUS_LABELS[req.status]} a {STATUS_LABELS[new_status]}"
            )
        if not self._materials.set_status(req.request_id, new_status):
            raise ValidationError("No se pudo actualizar la solicitud")
