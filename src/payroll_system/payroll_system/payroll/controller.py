from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.http import json_body, json_errors
from ..container import Container
from .formatting import payslip_filename, render_payslip_text


def register(app: Flask, container: Container) -> None:
    def _view_from_query():
        return container.payslip_service.generate(
            request.args.get("workerId"),
            request.args.get("startDate"),
            request.args.get("endDate"),
        )

    @app.route("/payslip", methods=["GET"], endpoint="generate_payslip")
    @json_errors("Failed to generate payslip")
    def generate_payslip():
        return jsonify(_view_from_query().to_dict())

    @app.route("/payslip/download", methods=["GET"], endpoint="download_payslip")
    @json_errors("Failed to generate payslip")
    def download_payslip():
        view = _view_from_query()
        text = render_payslip_text(view, currency=app.config["CURRENCY"])
        return send_file(
            io.BytesIO(text.encode("utf-8")),
            mimetype="text/plain; charset=utf-8",
            as_attachment=True,
            download_name=payslip_filename(view),
        )

    @app.route("/payslip", methods=["POST"], endpoint="save_payslip")
    @json_errors("Failed to save payslip")
    def save_payslip():
        data = json_body()
        summary = container.payslip_service.save(
            data.get("workerId"),
            data.get("startDate"),
            data.get("endDate"),
        )
        return jsonify(summary.to_dict()), 201
