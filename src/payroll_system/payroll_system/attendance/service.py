from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_date, parse_optional_date
from ..common.validators import is_missing, parse_id, parse_status
from ..core.exceptions import NotFoundError, ValidationError
from ..workers.repository import WorkerRepository
from .model import AttendanceRecord, AttendanceRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, workers: WorkerRepository):
        self._attendance = attendance
        self._workers = workers

    def list_attendance(
        self,
        *,
        worker_id: Any = None,
        start_date: Any = None,
        end_date: Any = None,
    ) -> list[AttendanceRow]:
        """All filters optional; a date bound may be given on its own."""
        wid: Optional[int] = None if is_missing(worker_id) else parse_id(worker_id)
        start = parse_optional_date(start_date, "startDate")
        end = parse_optional_date(end_date, "endDate")

        return list(self._attendance.list_rows(worker_id=wid, start_date=start, end_date=end))

    def record_or_update(self, *, worker_id: Any, work_date: Any, status: Any) -> tuple[AttendanceRecord, bool]:
        """Upsert keyed by (worker, date).

        Returns (record, created). Repeating the call with the same arguments
        leaves exactly one record carrying that status.
        """
        if is_missing(worker_id) or is_missing(work_date) or is_missing(status):
            raise ValidationError("Missing required fields")

        wid = parse_id(worker_id)
        day = parse_iso_date(work_date)
        new_status = parse_status(status)

        if not self._workers.get_by_id(wid):
            raise NotFoundError("Worker not found")

        attendance_id, created = self._attendance.upsert(worker_id=wid, work_date=day, status=new_status)

        logger.info("attendance worker=%s date=%s status=%s created=%s", wid, day, new_status.value, created)
        record = self._attendance.get_by_id(attendance_id)
        if record is None:
            raise RuntimeError(f"attendance {attendance_id} vanished after write")
        return record, created
