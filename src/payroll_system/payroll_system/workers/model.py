from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import iso_datetime


@dataclass(frozen=True)
class Worker:
    """Domain entity: a worker billed by the hour.

    Plain data object; no database access here.
    """

    worker_id: int
    full_name: str
    hourly_rate: float
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.worker_id,
            "fullName": self.full_name,
            "hourlyRate": self.hourly_rate,
            "createdAt": iso_datetime(self.created_at),
        }
