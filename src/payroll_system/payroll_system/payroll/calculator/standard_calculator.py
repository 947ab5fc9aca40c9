from __future__ import annotations

from ...core.constants import HOURS_PER_FULL_DAY, HOURS_PER_HALF_DAY
from ...core.enums import AttendanceStatus
from .base import Contribution, PayslipCalculator

STANDARD_CONTRIBUTIONS: dict[AttendanceStatus, Contribution] = {
    AttendanceStatus.FULL_DAY: Contribution(days=1.0, hours=float(HOURS_PER_FULL_DAY)),
    AttendanceStatus.HALF_DAY: Contribution(days=0.5, hours=float(HOURS_PER_HALF_DAY)),
    AttendanceStatus.DAY_OFF: Contribution(days=0.0, hours=0.0),
}


class StandardPayslipCalculator(PayslipCalculator):
    """Standard rule: full day = 1 day / 8 h, half day = 0.5 day / 4 h, day off = nothing."""

    def contribution(self, status: AttendanceStatus) -> Contribution:
        return STANDARD_CONTRIBUTIONS[AttendanceStatus(status)]
