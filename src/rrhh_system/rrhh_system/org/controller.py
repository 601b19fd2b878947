from __future__ import annotations

from flask import Flask, render_template

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/org-chart", methods=["GET"], endpoint="org_chart")
    def org_chart():
        return render_template("org/chart.html", tree=container.org_chart_service.get_tree(), active_page="org_chart")
