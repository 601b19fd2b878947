from __future__ import annotations

from flask import Flask, Response, render_template

from ..container import Container

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    svc = container.capacity_service

    @app.route("/capacity", methods=["GET"], endpoint="capacity")
    def capacity():
        return render_template("capacity/index.html", matrix=svc.build(), active_page="capacity")

    @app.route("/capacity/export.xlsx", methods=["GET"], endpoint="export_capacity")
    def export_capacity():
        return Response(
            svc.export_xlsx(),
            mimetype=XLSX_MIMETYPE,
            headers={"Content-Disposition": "attachment; filename=Capacidad_Operativa.xlsx"},
        )
