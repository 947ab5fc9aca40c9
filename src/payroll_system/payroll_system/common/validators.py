from __future__ import annotations

import math
from typing import Any

from ..core.constants import MAX_HOURLY_RATE
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


def is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_non_empty(value: Any, field_name: str) -> str:
    if is_missing(value):
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def parse_hourly_rate(value: Any, field_name: str = "hourlyRate") -> float:
    """Accept a number or a numeric string; 0 is a valid rate."""
    if is_missing(value):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        rate = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(rate) or rate < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    if rate > MAX_HOURLY_RATE:
        raise ValidationError(f"{field_name} must not exceed {MAX_HOURLY_RATE}")
    return rate


def parse_id(value: Any, field_name: str = "workerId") -> int:
    if is_missing(value):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, int):
        parsed = value
    else:
        try:
            parsed = int(str(value).strip())
        except ValueError:
            raise ValidationError(f"{field_name} must be an integer")
    if parsed <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return parsed


def parse_status(value: Any, field_name: str = "status") -> AttendanceStatus:
    if is_missing(value):
        raise ValidationError(f"{field_name} is required")
    try:
        return AttendanceStatus(str(value).strip().upper())
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"{field_name} must be one of {allowed}")
