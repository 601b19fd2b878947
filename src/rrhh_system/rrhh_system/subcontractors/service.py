from __future__ import annotations

import logging
from typing import Sequence

from ..core.exceptions import NotFoundError
from .model import Supplier
from .repository import SubcontractorRepository

logger = logging.getLogger(__name__)


class SubcontractorService:
    def __init__(self, procurement: SubcontractorRepository):
        self._procurement = procurement

    def list_subcontractors(self) -> Sequence[Supplier]:
        return self._procurement.list_subcontractors()

    def remove(self, supplier_id: int) -> None:
        if not self._procurement.unflag(int(supplier_id)):
            raise NotFoundError("El subcontratista no existe")
        logger.info("Supplier %s no longer flagged as subcontractor", supplier_id)
