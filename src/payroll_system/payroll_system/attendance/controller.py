from __future__ import annotations

from flask import Flask, jsonify, request, send_file

from ..common.http import json_body, json_errors
from ..container import Container
from ..core.constants import EXPORT_FILENAME
from .export import build_attendance_workbook


def register(app: Flask, container: Container) -> None:
    def _filtered_rows():
        return container.attendance_service.list_attendance(
            worker_id=request.args.get("workerId"),
            start_date=request.args.get("startDate"),
            end_date=request.args.get("endDate"),
        )

    @app.route("/attendance", methods=["GET"], endpoint="list_attendance")
    @json_errors("Failed to fetch attendances")
    def list_attendance():
        return jsonify([r.to_dict() for r in _filtered_rows()])

    @app.route("/attendance", methods=["POST"], endpoint="record_attendance")
    @json_errors("Failed to record attendance")
    def record_attendance():
        data = json_body()
        record, created = container.attendance_service.record_or_update(
            worker_id=data.get("workerId"),
            work_date=data.get("date"),
            status=data.get("status"),
        )
        return jsonify(record.to_dict()), 201 if created else 200

    @app.route("/attendance/export", methods=["GET"], endpoint="export_attendance")
    @json_errors("Failed to export attendances")
    def export_attendance():
        out = build_attendance_workbook(_filtered_rows())
        return send_file(
            out,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name=EXPORT_FILENAME,
        )
