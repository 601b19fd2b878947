from __future__ import annotations

from dataclasses import replace

import pytest

from src.rrhh_system.rrhh_system.core.enums import MaterialRequestStatus as S
from src.rrhh_system.rrhh_system.core.exceptions import NotFoundError, ValidationError
from src.rrhh_system.rrhh_system.materials.model import MaterialRequest, Product
from src.rrhh_system.rrhh_system.materials.service import MaterialRequestService


class FakeMaterials:
    def __init__(self):
        self.products = {"EPP-01": Product(code="EPP-01", name="Casco", unit="UN")}
        self.requests: dict[int, MaterialRequest] = {}

    def list_hr_products(self):
        return list(self.products.values())

    def get_product(self, code):
        return self.products.get(code)

    def list_for_employee(self, employee_id):
        return [r for r in self.requests.values() if r.employee_id == employee_id]

    def get_request(self, request_id):
        return self.requests.get(request_id)

    def create_request(self, *, employee_id, product_code, quantity):
        rid = len(self.requests) + 1
        self.requests[rid] = MaterialRequest(
            request_id=rid, employee_id=employee_id, product_code=product_code, quantity=quantity, status=S.PENDING
        )
        return rid

    def set_status(self, request_id, status):
        self.requests[request_id] = replace(self.requests[request_id], status=status)
        return True


@pytest.fixture
def repo():
    return FakeMaterials()


@pytest.fixture
def svc(repo):
    return MaterialRequestService(repo)


@pytest.mark.parametrize("qty", [0, -2, "", "dos"])
def test_quantity_must_be_positive_integer(svc, repo, qty):
    with pytest.raises(ValidationError):
        svc.create_request(employee_id=1, product_code="EPP-01", quantity=qty)
    assert repo.requests == {}


def test_unknown_product(svc):
    with pytest.raises(NotFoundError):
        svc.create_request(employee_id=1, product_code="NOPE", quantity=1)


def test_request_flow_to_delivered(svc, repo):
    rid = svc.create_request(employee_id=1, product_code=" EPP-01 ", quantity="2")
    assert repo.requests[rid].quantity == 2

    svc.change_status(rid, S.APPROVED)
    svc.change_status(rid, S.DELIVERED)
    assert repo.requests[rid].status == S.DELIVERED


@pytest.mark.parametrize(
    "path",
    [
        [S.DELIVERED],
        [S.REJECTED, S.APPROVED],
        [S.APPROVED, S.REJECTED],
        [S.APPROVED, S.DELIVERED, S.PENDING],
    ],
)
def test_illegal_transitions(svc, path):
    rid = svc.create_request(employee_id=1, product_code="EPP-01", quantity=1)
    *ok, bad = path
    for status in ok:
        svc.change_status(rid, status)
    with pytest.raises(ValidationError):
        svc.change_status(rid, bad)
