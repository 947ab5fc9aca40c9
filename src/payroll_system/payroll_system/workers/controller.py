from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/workers", methods=["GET"], endpoint="list_workers")
    @json_errors("Failed to fetch workers")
    def list_workers():
        workers = container.worker_service.list_workers()
        return jsonify([w.to_dict() for w in workers])

    @app.route("/workers", methods=["POST"], endpoint="create_worker")
    @json_errors("Failed to create worker")
    def create_worker():
        data = json_body()
        worker = container.worker_service.create_worker(
            full_name=data.get("fullName"),
            hourly_rate=data.get("hourlyRate"),
        )
        return jsonify(worker.to_dict()), 201

    @app.route("/workers/<int:worker_id>", methods=["PUT"], endpoint="update_worker")
    @json_errors("Failed to update worker")
    def update_worker(worker_id: int):
        data = json_body()
        worker = container.worker_service.update_worker(
            worker_id,
            full_name=data.get("fullName"),
            hourly_rate=data.get("hourlyRate"),
        )
        return jsonify(worker.to_dict())

    @app.route("/workers/<int:worker_id>", methods=["DELETE"], endpoint="delete_worker")
    @json_errors("Failed to delete worker")
    def delete_worker(worker_id: int):
        container.worker_service.delete_worker(worker_id)
        return jsonify({"success": True})
