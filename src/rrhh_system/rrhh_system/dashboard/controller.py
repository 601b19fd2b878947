from __future__ import annotations

from flask import Flask, render_template

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="dashboard")
    def dashboard():
        data = container.dashboard_service.load()
        return render_template("dashboard.html", data=data, active_page="dashboard")
