from __future__ import annotations

from datetime import time
from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def list_all(self) -> Sequence[Shift]:
        raise NotImplementedError

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        start_time: time,
        end_time: time,
        break_minutes: int,
        tolerance_minutes: int,
        work_days: Sequence[int],
    ) -> int:
        raise NotImplementedError

    def delete_by_id(self, shift_id: int) -> bool:
        raise NotImplementedError
