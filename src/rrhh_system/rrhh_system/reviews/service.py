from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from ..common.validators import require_in_range, require_non_empty
from ..core.exceptions import DuplicateError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import MAX_SCORE, MIN_SCORE, SKILLS, Evaluation, SkillScore
from .repository import EvaluationRepository


@dataclass(frozen=True)
class ReviewRow:
    employee: Employee
    evaluation: Optional[Evaluation]


def average_score(scores: Sequence[int]) -> float:
    return round(sum(scores) / len(scores), 1)


class PerformanceReviewService:
    def __init__(self, evaluations: EvaluationRepository, employees: EmployeeRepository):
        self._evaluations = evaluations
        self._employees = employees

    def list_period(self, period: str) -> list[ReviewRow]:
        period = require_non_empty(period, "Periodo")
        by_employee = {e.employee_id: e for e in self._evaluations.list_for_period(period)}
        employees = sorted(self._employees.list_all(), key=lambda e: (e.first_name or "").lower())
        return [ReviewRow(employee=e, evaluation=by_employee.get(e.employee_id)) for e in employees]

    def submit(
        self,
        *,
        employee_id: int,
        period: str,
        ratings: Mapping[str, object],
        feedback: str = "",
        reviewer_id: Optional[str] = None,
    ) -> int:
        """Store one evaluation; every criterion needs a 1-5 score."""

        period = require_non_empty(period, "Periodo")
        skills = [
            SkillScore(skill_name=label, score=require_in_range(ratings.get(key), label, MIN_SCORE, MAX_SCORE))
            for key, label in SKILLS
        ]

        if self._evaluations.get_for_employee(int(employee_id), period):
            raise DuplicateError("Este empleado ya tiene una evaluación en este periodo")

        return self._evaluations.create(
            employee_id=int(employee_id),
            period=period,
            final_score=average_score([s.score for s in skills]),
            feedback=(feedback or "").strip() or None,
            reviewer_id=reviewer_id,
            skills=skills,
        )
