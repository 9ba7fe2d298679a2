from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import api_errors, json_body
from ..common.datetime_utils import parse_iso_date
from ..core.constants import DEFAULT_LEAVE_REQUEST_LIMIT
from ..core.exceptions import ValidationError
from ..container import Container


def _optional_date(value):
    raw = str(value or "").strip()
    return parse_iso_date(raw) if raw else None


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leave-requests", methods=["GET"], endpoint="api_leave_requests")
    @api_errors
    def api_leave_requests():
        try:
            limit = int(request.args.get("limit", DEFAULT_LEAVE_REQUEST_LIMIT))
        except ValueError:
            raise ValidationError("limit inválido")
        items = container.leave_request_service.list_requests(
            status=request.args.get("status"),
            search=request.args.get("search", ""),
            limit=limit,
        )
        return jsonify({"success": True, "requests": [r.to_dict() for r in items]})

    @app.route("/api/leave-requests", methods=["POST"], endpoint="api_leave_requests_create")
    @api_errors
    def api_leave_requests_create():
        data = json_body()
        request_id = container.leave_request_service.create_request(
            employee_id=data.get("employee_id"),
            start_date=_optional_date(data.get("start_date")),
            end_date=_optional_date(data.get("end_date")),
            leave_type=data.get("leave_type"),
            reason=data.get("reason"),
        )
        return jsonify({"success": True, "id": request_id, "message": "Solicitação de folga criada com sucesso!"}), 201

    @app.route("/api/leave-requests/<int:request_id>/approve", methods=["POST"], endpoint="api_leave_requests_approve")
    @api_errors
    def api_leave_requests_approve(request_id: int):
        container.leave_request_service.approve(request_id)
        return jsonify({"success": True, "message": "Solicitação aprovada com sucesso!"})

    @app.route("/api/leave-requests/<int:request_id>/reject", methods=["POST"], endpoint="api_leave_requests_reject")
    @api_errors
    def api_leave_requests_reject(request_id: int):
        container.leave_request_service.reject(request_id)
        return jsonify({"success": True, "message": "Solicitação rejeitada com sucesso!"})

    @app.route("/api/leave-requests/<int:request_id>", methods=["DELETE"], endpoint="api_leave_requests_delete")
    @api_errors
    def api_leave_requests_delete(request_id: int):
        container.leave_request_service.delete(request_id)
        return jsonify({"success": True, "message": "Solicitação excluída com sucesso!"})
