from __future__ import annotations

from typing import Mapping, Sequence

from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import LOOKUP_KINDS, LookupItem
from .repository import LookupRepository


class LookupService:
    """Catalog screens: departments and jobs are editable, the rest are read-only."""

    def __init__(self, repos: Mapping[str, LookupRepository]):
        self._repos = dict(repos)

    def _repo(self, kind: str) -> LookupRepository:
        repo = self._repos.get(kind)
        if repo is None:
            raise NotFoundError(f"Catálogo desconocido: {kind}")
        return repo

    def list_items(self, kind: str) -> Sequence[LookupItem]:
        return self._repo(kind).list_all()

    def create_item(self, kind: str, name: str) -> int:
        repo = self._repo(kind)
        if not LOOKUP_KINDS[kind].editable:
            raise AuthorizationError("Este catálogo no se puede editar")
        name = (name or "").strip().upper()
        if not name:
            raise ValidationError("El nombre es obligatorio")
        return repo.create(name)

    def delete_item(self, kind: str, item_id: int) -> None:
        repo = self._repo(kind)
        if not LOOKUP_KINDS[kind].editable:
            raise AuthorizationError("Este catálogo no se puede editar")
        if not repo.delete_by_id(int(item_id)):
            raise NotFoundError("El registro no existe")
