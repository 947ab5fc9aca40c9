from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import iso_date, iso_datetime
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one worker's status for one calendar day."""

    attendance_id: int
    worker_id: int
    work_date: date
    status: AttendanceStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.attendance_id,
            "workerId": self.worker_id,
            "date": iso_date(self.work_date),
            "status": self.status.value,
            "createdAt": iso_datetime(self.created_at),
            "updatedAt": iso_datetime(self.updated_at),
        }


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model for listings and export: the record joined with its worker."""

    record: AttendanceRecord
    full_name: str
    hourly_rate: float

    def to_dict(self) -> dict[str, Any]:
        out = self.record.to_dict()
        out["worker"] = {
            "id": self.record.worker_id,
            "fullName": self.full_name,
            "hourlyRate": self.hourly_rate,
        }
        return out
