from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LookupItem:
    """A row of a name-only catalog (departamento, cargo, AFP, ...)."""

    item_id: int
    name: str


@dataclass(frozen=True)
class LookupKind:
    key: str
    table: str
    label: str
    editable: bool = False


LOOKUP_KINDS = {
    k.key: k
    for k in (
        LookupKind("departments", "rrhh_departamentos", "departamento", editable=True),
        LookupKind("jobs", "rrhh_cargos", "cargo", editable=True),
        LookupKind("marital_status", "rrhh_marital_status", "estado civil"),
        LookupKind("contract_types", "rrhh_contract_types", "tipo de contrato"),
        LookupKind("pension_providers", "rrhh_pension_providers", "AFP"),
        LookupKind("health_providers", "rrhh_health_providers", "previsión de salud"),
    )
}
