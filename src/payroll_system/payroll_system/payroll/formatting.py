from __future__ import annotations

import re

from ..core.constants import DEFAULT_CURRENCY, HOURS_PER_FULL_DAY, HOURS_PER_HALF_DAY
from .model import PayslipView


def render_payslip_text(view: PayslipView, *, currency: str = DEFAULT_CURRENCY) -> str:
    """Plain-text payslip offered as a download."""
    t = view.totals
    lines = [
        "PAYSLIP",
        view.worker.full_name,
        f"Period: {view.start_date.isoformat()} - {view.end_date.isoformat()}",
        "",
        f"Hourly Rate: {currency}{view.worker.hourly_rate:.2f}/hour",
        f"Total Days Worked: {t.total_days:.1f} days",
        f"Total Hours: {t.total_hours:.1f} hours (1 day = {HOURS_PER_FULL_DAY} hours)",
        f"Total Amount: {currency}{t.total_amount:.2f}",
        "",
        f"Work Entries: {t.total_work_days}",
        f"Days Off: {t.day_off_count}",
        "",
        f"Note: Full Day = 1 day ({HOURS_PER_FULL_DAY} hours), Half Day = 0.5 days ({HOURS_PER_HALF_DAY} hours)",
    ]
    return "\n".join(lines) + "\n"


def payslip_filename(view: PayslipView) -> str:
    name = re.sub(r"[^A-Za-z0-9-]+", "_", view.worker.full_name).strip("_") or f"worker{view.worker.worker_id}"
    return f"payslip_{name}_{view.start_date.isoformat()}.txt"
