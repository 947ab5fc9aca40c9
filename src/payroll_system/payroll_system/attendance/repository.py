from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceRow


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, *, worker_id: int, work_date: date, status: AttendanceStatus) -> tuple[int, bool]:
        """Create or overwrite the (worker, date) record in one statement.

        Returns (attendance_id, created).
        """

        raise NotImplementedError

    def list_rows(
        self,
        *,
        worker_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRow]:
        """Joined with workers, newest date first."""

        raise NotImplementedError

    def list_for_worker(self, *, worker_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Records of one worker with start_date <= work_date <= end_date."""

        raise NotImplementedError
