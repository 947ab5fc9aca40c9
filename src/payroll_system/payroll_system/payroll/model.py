from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import iso_date, iso_datetime
from ..workers.model import Worker


@dataclass(frozen=True)
class PayslipTotals:
    total_days: float = 0.0
    total_hours: float = 0.0
    total_amount: float = 0.0
    total_work_days: int = 0
    day_off_count: int = 0


@dataclass(frozen=True)
class PayslipView:
    """Computed payslip; rebuilt from attendance on every request."""

    worker: Worker
    start_date: date
    end_date: date
    totals: PayslipTotals
    attendances: list[AttendanceRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "workerId": self.worker.worker_id,
            "workerName": self.worker.full_name,
            "hourlyRate": self.worker.hourly_rate,
            "startDate": iso_date(self.start_date),
            "endDate": iso_date(self.end_date),
            "totalDays": self.totals.total_days,
            "totalWorkDays": self.totals.total_work_days,
            "dayOffCount": self.totals.day_off_count,
            "totalHours": self.totals.total_hours,
            "totalAmount": self.totals.total_amount,
            "attendances": [a.to_dict() for a in self.attendances],
        }


@dataclass(frozen=True)
class PayslipSummary:
    """Persisted summary row. Written once, never used to rebuild a payslip."""

    payslip_id: int
    worker_id: int
    start_date: date
    end_date: date
    total_hours: float
    total_amount: float
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.payslip_id,
            "workerId": self.worker_id,
            "startDate": iso_date(self.start_date),
            "endDate": iso_date(self.end_date),
            "totalHours": self.total_hours,
            "totalAmount": self.total_amount,
            "createdAt": iso_datetime(self.created_at),
        }
