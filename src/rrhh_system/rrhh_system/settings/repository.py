from __future__ import annotations

from typing import Protocol, Sequence

from .model import LookupItem


class LookupRepository(Protocol):
    def list_all(self) -> Sequence[LookupItem]:
        raise NotImplementedError

    def create(self, name: str) -> int:
        """Raises DuplicateError when the name already exists."""

        raise NotImplementedError

    def delete_by_id(self, item_id: int) -> bool:
        raise NotImplementedError
