from __future__ import annotations

from typing import Protocol, Sequence

from .model import Supplier


class SubcontractorRepository(Protocol):
    def list_subcontractors(self) -> Sequence[Supplier]:
        raise NotImplementedError

    def unflag(self, supplier_id: int) -> bool:
        """Clear the subcontractor flag; the supplier itself is kept."""

        raise NotImplementedError
