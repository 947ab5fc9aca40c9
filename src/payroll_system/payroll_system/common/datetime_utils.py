from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: Any, field_name: str = "date") -> date:
    """Parse YYYY-MM-DD (a trailing time part is ignored) into date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    text = str(value).strip().split("T", 1)[0]
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{field_name} must be an ISO date (YYYY-MM-DD)")


def parse_optional_date(value: Any, field_name: str) -> Optional[date]:
    if value is None or not str(value).strip():
        return None
    return parse_iso_date(value, field_name)


def iso_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


def iso_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
