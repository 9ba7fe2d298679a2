from __future__ import annotations

import io
from datetime import date
from typing import Optional

from flask import Flask, Response, jsonify, request, send_file

from ..common.api import api_errors, json_body
from ..common.datetime_utils import parse_iso_date
from ..core.constants import DEFAULT_RECENT_ENTRIES
from ..core.enums import SeriesView
from ..core.exceptions import ValidationError
from ..container import Container
from .chart import build_chart, render_svg
from .export import build_hours_workbook


def _series_view() -> SeriesView:
    raw = (request.args.get("view") or SeriesView.MONTH.value).strip().lower()
    try:
        return SeriesView(raw)
    except ValueError:
        raise ValidationError("Visualização inválida (week/month)")


def _today() -> Optional[date]:
    raw = request.args.get("today")
    return parse_iso_date(raw) if raw else None


def _entry_to_dict(item) -> dict:
    s = item.session
    return {
        "id": s.session_id,
        "employee_id": s.employee_id,
        "work_date": s.work_date.isoformat(),
        "hours": s.hours,
        "notes": s.notes or "",
        "created_at": s.created_at.isoformat() if s.created_at else None,
        "employee": {
            "id": s.employee_id,
            "full_name": item.full_name,
            "email": item.email,
            "department": item.department,
            "position": item.position,
        },
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<int:employee_id>/hours", methods=["GET"], endpoint="api_employee_hours")
    @api_errors
    def api_employee_hours(employee_id: int):
        dashboard = container.hours_service.get_dashboard(employee_id, _series_view(), _today())
        return jsonify({"success": True, **dashboard.to_dict()})

    @app.route("/api/employees/<int:employee_id>/hours/chart.svg", methods=["GET"], endpoint="api_employee_hours_chart")
    @api_errors
    def api_employee_hours_chart(employee_id: int):
        series = container.hours_service.get_series(employee_id, _series_view(), _today())
        return Response(render_svg(build_chart(series)), mimetype="image/svg+xml")

    @app.route("/api/employees/<int:employee_id>/hours/export.xlsx", methods=["GET"], endpoint="api_employee_hours_export")
    @api_errors
    def api_employee_hours_export(employee_id: int):
        dashboard = container.hours_service.get_dashboard(employee_id, _series_view(), _today())
        content = build_hours_workbook(dashboard.summary, dashboard.series)
        return send_file(
            io.BytesIO(content),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name=f"banco_horas_{employee_id}_{dashboard.today.isoformat()}.xlsx",
        )

    @app.route("/api/work-sessions", methods=["GET"], endpoint="api_work_sessions")
    @api_errors
    def api_work_sessions():
        try:
            limit = int(request.args.get("limit", DEFAULT_RECENT_ENTRIES))
        except ValueError:
            raise ValidationError("limit inválido")
        items = container.entry_service.list_recent(search=request.args.get("search", ""), limit=limit)
        return jsonify({"success": True, "entries": [_entry_to_dict(i) for i in items]})

    @app.route("/api/work-sessions", methods=["POST"], endpoint="api_work_sessions_create")
    @api_errors
    def api_work_sessions_create():
        data = json_body()
        try:
            employee_id = int(data.get("employee_id"))
        except (TypeError, ValueError):
            raise ValidationError("Selecione um funcionário")
        session_id = container.entry_service.record_entry(
            employee_id=employee_id,
            work_date=parse_iso_date(str(data.get("work_date", ""))),
            hours=data.get("hours"),
            hour_type=data.get("hour_type", "positive"),
            notes=data.get("notes"),
        )
        return jsonify({"success": True, "id": session_id}), 201

    @app.route("/api/work-sessions/<int:session_id>", methods=["PUT"], endpoint="api_work_sessions_update")
    @api_errors
    def api_work_sessions_update(session_id: int):
        data = json_body()
        container.entry_service.update_entry(
            session_id=session_id,
            work_date=parse_iso_date(str(data.get("work_date", ""))),
            hours=data.get("hours"),
            hour_type=data.get("hour_type", "positive"),
        )
        return jsonify({"success": True})

    @app.route("/api/work-sessions/<int:session_id>", methods=["DELETE"], endpoint="api_work_sessions_delete")
    @api_errors
    def api_work_sessions_delete(session_id: int):
        container.entry_service.delete_entry(session_id)
        return jsonify({"success": True})
