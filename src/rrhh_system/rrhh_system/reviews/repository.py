from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Evaluation, SkillScore


class EvaluationRepository(Protocol):
    def list_for_period(self, period: str) -> Sequence[Evaluation]:
        raise NotImplementedError

    def get_for_employee(self, employee_id: int, period: str) -> Optional[Evaluation]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        period: str,
        final_score: float,
        feedback: Optional[str],
        reviewer_id: Optional[str],
        skills: Sequence[SkillScore],
    ) -> int:
        """Write the header and its skill rows atomically."""

        raise NotImplementedError
