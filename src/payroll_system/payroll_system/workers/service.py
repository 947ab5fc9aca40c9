from __future__ import annotations

import logging
from typing import Any

from ..common.validators import parse_hourly_rate, parse_id, require_non_empty
from ..core.exceptions import NotFoundError
from .model import Worker
from .repository import WorkerRepository

logger = logging.getLogger(__name__)


class WorkerService:
    """Use cases of the worker directory."""

    def __init__(self, workers: WorkerRepository):
        self._workers = workers

    def list_workers(self) -> list[Worker]:
        return list(self._workers.list_all())

    def get_worker(self, worker_id: Any) -> Worker:
        worker = self._workers.get_by_id(parse_id(worker_id, "id"))
        if not worker:
            raise NotFoundError("Worker not found")
        return worker

    def create_worker(self, *, full_name: Any, hourly_rate: Any) -> Worker:
        name = require_non_empty(full_name, "fullName")
        rate = parse_hourly_rate(hourly_rate)

        worker_id = self._workers.create(full_name=name, hourly_rate=rate)
        logger.info("worker %s created (rate=%s)", worker_id, rate)
        return self.get_worker(worker_id)

    def update_worker(self, worker_id: Any, *, full_name: Any, hourly_rate: Any) -> Worker:
        # Full overwrite: both fields are required, there is no partial merge.
        worker = self.get_worker(worker_id)
        name = require_non_empty(full_name, "fullName")
        rate = parse_hourly_rate(hourly_rate)

        self._workers.update(worker_id=worker.worker_id, full_name=name, hourly_rate=rate)
        logger.info("worker %s updated (rate=%s)", worker.worker_id, rate)
        return self.get_worker(worker.worker_id)

    def delete_worker(self, worker_id: Any) -> None:
        worker_id = parse_id(worker_id, "id")
        if not self._workers.delete(worker_id):
            raise NotFoundError("Worker not found")
        logger.info("worker %s deleted with its attendance and payslips", worker_id)
