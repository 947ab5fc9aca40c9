from __future__ import annotations

import io
from typing import Optional, Sequence

import pandas as pd

from ..payroll.calculator.base import PayslipCalculator
from ..payroll.calculator.standard_calculator import StandardPayslipCalculator
from .model import AttendanceRow

COLUMNS = ["Date", "Worker", "Status", "Hours"]


def build_attendance_workbook(
    rows: Sequence[AttendanceRow],
    *,
    calculator: Optional[PayslipCalculator] = None,
) -> io.BytesIO:
    """Render attendance rows into an in-memory .xlsx file.

    Hours come from the same contribution table the payslips use.
    """
    calculator = calculator or StandardPayslipCalculator()
    df = pd.DataFrame(
        [
            (
                r.record.work_date.isoformat(),
                r.full_name,
                r.record.status.value,
                calculator.contribution(r.record.status).hours,
            )
            for r in rows
        ],
        columns=COLUMNS,
    )

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Attendance")
    out.seek(0)
    return out
