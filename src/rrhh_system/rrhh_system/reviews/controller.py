from __future__ import annotations

from flask import Flask, flash, g, redirect, render_template, request, url_for

from ..common.web import flash_domain_error, flash_unexpected, form_str
from ..container import Container
from ..core.constants import DEFAULT_REVIEW_PERIOD
from ..core.exceptions import DomainError
from .model import SKILLS


def register(app: Flask, container: Container) -> None:
    svc = container.review_service

    @app.route("/reviews", methods=["GET"], endpoint="reviews")
    def reviews():
        period = (request.args.get("period") or DEFAULT_REVIEW_PERIOD).strip()
        try:
            rows = svc.list_period(period)
        except DomainError as e:
            flash_domain_error(e)
            rows = []
        return render_template("reviews/index.html", rows=rows, period=period, skills=SKILLS, active_page="reviews")

    @app.route("/reviews/<int:employee_id>", methods=["POST"], endpoint="submit_review")
    def submit_review(employee_id: int):
        period = form_str("period") or DEFAULT_REVIEW_PERIOD
        user = g.get("user")
        try:
            svc.submit(
                employee_id=employee_id,
                period=period,
                ratings={key: request.form.get(key) for key, _ in SKILLS},
                feedback=form_str("feedback"),
                reviewer_id=user.id if user else None,
            )
            flash("Evaluación guardada", "success")
        except DomainError as e:
            flash_domain_error(e)
        except Exception:
            flash_unexpected("Error al guardar la evaluación")
        return redirect(url_for("reviews", period=period))
