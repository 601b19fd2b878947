from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Evaluation, SkillScore
from .repository import EvaluationRepository


def _row_to_evaluation(r: Dict[str, Any]) -> Evaluation:
    return Evaluation(
        evaluation_id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        period=r["period"],
        final_score=float(r["final_score"]),
        feedback=r.get("feedback"),
        reviewer_id=r.get("reviewer_id"),
        status=r.get("status") or "completed",
    )


class MySQLEvaluationRepository(EvaluationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_period(self, period: str) -> Sequence[Evaluation]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, period, final_score, feedback, reviewer_id, status
                FROM rrhh_evaluations
                WHERE period=%s
                """,
                (period,),
            )
            return [_row_to_evaluation(r) for r in fetchall(cur)]

    def get_for_employee(self, employee_id: int, period: str) -> Optional[Evaluation]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, period, final_score, feedback, reviewer_id, status
                FROM rrhh_evaluations
                WHERE employee_id=%s AND period=%s
                """,
                (int(employee_id), period),
            )
            r = fetchone(cur)
            if not r:
                return None
            cur.execute(
                "SELECT skill_name, score FROM rrhh_evaluation_skills WHERE evaluation_id=%s ORDER BY id",
                (int(r["id"]),),
            )
            skills = tuple(SkillScore(skill_name=s["skill_name"], score=int(s["score"])) for s in fetchall(cur))
            return replace(_row_to_evaluation(r), skills=skills)

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
        duplicate = "Este empleado ya tiene una evaluación en este periodo"
        with db_cursor(self._conn_factory, duplicate_message=duplicate) as (_, cur):
            cur.execute(
                """
                INSERT INTO rrhh_evaluations(employee_id, reviewer_id, period, status, final_score, feedback)
                VALUES(%s,%s,%s,'completed',%s,%s)
                """,
                (int(employee_id), reviewer_id, period, final_score, feedback),
            )
            evaluation_id = int(cur.lastrowid)
            cur.executemany(
                "INSERT INTO rrhh_evaluation_skills(evaluation_id, skill_name, score) VALUES(%s,%s,%s)",
                [(evaluation_id, s.skill_name, int(s.score)) for s in skills],
            )
            return evaluation_id
