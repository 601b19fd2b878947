from __future__ import annotations

from ..core.constants import DEFAULT_COMPANY_NAME
from ..employees.repository import EmployeeRepository
from .hierarchy import OrgNode, build_tree


class OrgChartService:
    def __init__(self, employees: EmployeeRepository, *, company_name: str = DEFAULT_COMPANY_NAME):
        self._employees = employees
        self._company_name = company_name

    def get_tree(self) -> OrgNode:
        employees = sorted(self._employees.list_all(), key=lambda e: (e.first_name or "").lower())
        return build_tree(employees, company_name=self._company_name)
