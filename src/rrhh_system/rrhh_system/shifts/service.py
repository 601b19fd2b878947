from __future__ import annotations

from datetime import datetime, time
from typing import Iterable, Optional, Sequence

from ..common.validators import require_in_range, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import DEFAULT_WORK_DAYS, Shift
from .repository import ShiftRepository


class ShiftService:
    def __init__(self, shifts: ShiftRepository):
        self._shifts = shifts

    @staticmethod
    def _parse_time(value: str, field_name: str) -> time:
        v = (value or "").strip()
        for fmt in ("%H:%M", "%H:%M:%S"):
            try:
                return datetime.strptime(v, fmt).time()
            except ValueError:
                continue
        raise ValidationError(f"{field_name} inválida (HH:MM)")

    def list_shifts(self) -> Sequence[Shift]:
        return self._shifts.list_all()

    def create_shift(
        self,
        *,
        name: str,
        start_time: str,
        end_time: str,
        break_minutes=60,
        tolerance_minutes=15,
        work_days: Optional[Iterable] = None,
    ) -> int:
        name = require_non_empty(name, "Nombre del turno")
        start = self._parse_time(start_time, "Hora de entrada")
        end = self._parse_time(end_time, "Hora de salida")
        brk = require_in_range(break_minutes or 0, "Colación (min)", 0, 600)
        tol = require_in_range(tolerance_minutes or 0, "Tolerancia (min)", 0, 600)

        days = sorted({require_in_range(d, "Día", 1, 7) for d in (work_days or ())}) or list(DEFAULT_WORK_DAYS)

        return self._shifts.create(
            name=name,
            start_time=start,
            end_time=end,
            break_minutes=brk,
            tolerance_minutes=tol,
            work_days=days,
        )

    def delete_shift(self, shift_id: int) -> None:
        if not self._shifts.delete_by_id(int(shift_id)):
            raise NotFoundError("El turno no existe")
