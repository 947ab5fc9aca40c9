from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import PayslipSummary


class PayslipRepository(Protocol):
    def create(
        self,
        *,
        worker_id: int,
        start_date: date,
        end_date: date,
        total_hours: float,
        total_amount: float,
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, payslip_id: int) -> Optional[PayslipSummary]:
        raise NotImplementedError
