from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

# (key, label) of the fixed evaluation criteria, in display order.
SKILLS: Tuple[Tuple[str, str], ...] = (
    ("responsibility", "Responsabilidad y Puntualidad"),
    ("quality", "Calidad del Trabajo"),
    ("teamwork", "Trabajo en Equipo"),
    ("proactivity", "Iniciativa"),
    ("compliance", "Cumplimiento de Normas"),
)

MIN_SCORE = 1
MAX_SCORE = 5


@dataclass(frozen=True)
class SkillScore:
    skill_name: str
    score: int


@dataclass(frozen=True)
class Evaluation:
    evaluation_id: int
    employee_id: int
    period: str
    final_score: float
    feedback: Optional[str] = None
    reviewer_id: Optional[str] = None
    status: str = "completed"
    skills: Tuple[SkillScore, ...] = field(default_factory=tuple)
