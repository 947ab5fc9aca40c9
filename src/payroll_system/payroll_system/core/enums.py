from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored in the database."""

    FULL_DAY = "FULL_DAY"
    HALF_DAY = "HALF_DAY"
    DAY_OFF = "DAY_OFF"
