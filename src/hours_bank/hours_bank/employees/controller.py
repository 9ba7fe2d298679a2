from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import api_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/checkin/badge", methods=["POST"], endpoint="api_checkin_badge")
    @api_errors
    def api_checkin_badge():
        data = request.get_json(silent=True) or {}
        employee = container.employee_service.identify_by_badge(str(data.get("badge", "")))
        return jsonify({"success": True, "employee": employee.to_dict()})

    @app.route("/api/employees", methods=["GET"], endpoint="api_employees")
    @api_errors
    def api_employees():
        employees = container.employee_service.search(request.args.get("search", ""))
        return jsonify({"success": True, "employees": [e.to_dict() for e in employees]})

    @app.route("/api/employees/<int:employee_id>/deactivate", methods=["POST"], endpoint="api_employees_deactivate")
    @api_errors
    def api_employees_deactivate(employee_id: int):
        container.employee_service.deactivate(employee_id)
        return jsonify({"success": True})
