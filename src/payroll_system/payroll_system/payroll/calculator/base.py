from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from ...core.enums import AttendanceStatus
from ...core.exceptions import ValidationError
from ..model import PayslipTotals


@dataclass(frozen=True)
class Contribution:
    days: float
    hours: float


class PayslipCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll).

    Subclasses only decide what one status is worth; the reduction itself is
    shared so every payslip path sums the same way.
    """

    @abstractmethod
    def contribution(self, status: AttendanceStatus) -> Contribution:
        raise NotImplementedError

    def totals(self, statuses: Iterable[AttendanceStatus], hourly_rate: float) -> PayslipTotals:
        total_days = 0.0
        total_hours = 0.0
        work_days = 0
        days_off = 0

        # Days and hours are summed separately, never derived from each other.
        for status in statuses:
            c = self.contribution(status)
            total_days += c.days
            total_hours += c.hours
            if status == AttendanceStatus.DAY_OFF:
                days_off += 1
            else:
                work_days += 1

        total_amount = total_hours * float(hourly_rate)
        if not math.isfinite(total_amount):
            raise ValidationError("Payslip amount is out of range")

        return PayslipTotals(
            total_days=total_days,
            total_hours=total_hours,
            total_amount=total_amount,
            total_work_days=work_days,
            day_off_count=days_off,
        )
