from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_iso_date
from ..common.validators import is_missing, parse_id
from ..core.exceptions import NotFoundError, ValidationError
from ..workers.repository import WorkerRepository
from .calculator.base import PayslipCalculator
from .calculator.standard_calculator import StandardPayslipCalculator
from .model import PayslipSummary, PayslipView
from .repository import PayslipRepository

logger = logging.getLogger(__name__)


class PayslipService:
    def __init__(
        self,
        workers: WorkerRepository,
        attendance: AttendanceRepository,
        payslips: PayslipRepository,
        *,
        calculator: Optional[PayslipCalculator] = None,
    ):
        self._workers = workers
        self._attendance = attendance
        self._payslips = payslips
        self._calculator = calculator or StandardPayslipCalculator()

    def _parse_period(self, worker_id: Any, start_date: Any, end_date: Any) -> tuple[int, date, date]:
        if is_missing(worker_id) or is_missing(start_date) or is_missing(end_date):
            raise ValidationError("Missing required parameters")

        wid = parse_id(worker_id)
        start = parse_iso_date(start_date, "startDate")
        end = parse_iso_date(end_date, "endDate")
        if start > end:
            raise ValidationError("startDate must not be after endDate")
        return wid, start, end

    def generate(self, worker_id: Any, start_date: Any, end_date: Any) -> PayslipView:
        """Payslip for an inclusive date range, recomputed from attendance."""
        wid, start, end = self._parse_period(worker_id, start_date, end_date)

        worker = self._workers.get_by_id(wid)
        if not worker:
            raise NotFoundError("Worker not found")

        records = list(self._attendance.list_for_worker(worker_id=wid, start_date=start, end_date=end))
        totals = self._calculator.totals((r.status for r in records), worker.hourly_rate)
        return PayslipView(worker=worker, start_date=start, end_date=end, totals=totals, attendances=records)

    def save(self, worker_id: Any, start_date: Any, end_date: Any) -> PayslipSummary:
        view = self.generate(worker_id, start_date, end_date)

        payslip_id = self._payslips.create(
            worker_id=view.worker.worker_id,
            start_date=view.start_date,
            end_date=view.end_date,
            total_hours=view.totals.total_hours,
            total_amount=view.totals.total_amount,
        )
        logger.info(
            "payslip %s saved worker=%s %s..%s hours=%s amount=%s",
            payslip_id,
            view.worker.worker_id,
            view.start_date,
            view.end_date,
            view.totals.total_hours,
            view.totals.total_amount,
        )
        summary = self._payslips.get_by_id(payslip_id)
        if summary is None:
            raise RuntimeError(f"payslip {payslip_id} vanished after write")
        return summary
