from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from typing import Tuple

WEEKDAY_NAMES = {1: "Lun", 2: "Mar", 3: "Mié", 4: "Jue", 5: "Vie", 6: "Sáb", 7: "Dom"}
DEFAULT_WORK_DAYS: Tuple[int, ...] = (1, 2, 3, 4, 5)


@dataclass(frozen=True)
class Shift:
    """Domain entity: a work shift (turno). Weekdays are 1=Monday .. 7=Sunday."""

    shift_id: int
    name: str
    start_time: time
    end_time: time
    break_minutes: int = 0
    tolerance_minutes: int = 0
    work_days: Tuple[int, ...] = field(default=DEFAULT_WORK_DAYS)

    @property
    def work_days_label(self) -> str:
        return work_days_label(self.work_days)


def work_days_label(days) -> str:
    n = len(set(days))
    if n == 5:
        return "Semana Administrativa"
    if n == 6:
        return "Lunes a Sábado"
    return f"{n} días seleccionados"
