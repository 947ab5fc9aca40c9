"""Example: using the service layer directly (without Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from payroll_system.container import build_container
from payroll_system.payroll.formatting import render_payslip_text


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    worker = container.worker_service.create_worker(full_name="Demo Worker", hourly_rate="10")
    for day, status in (("2026-01-05", "FULL_DAY"), ("2026-01-06", "HALF_DAY"), ("2026-01-07", "DAY_OFF")):
        container.attendance_service.record_or_update(worker_id=worker.worker_id, work_date=day, status=status)

    view = container.payslip_service.generate(worker.worker_id, "2026-01-01", "2026-01-31")
    print(render_payslip_text(view, currency=getattr(settings, "CURRENCY", "RM")))


if __name__ == "__main__":
    main()
