from datetime import date

import pytest

from payroll_system.core.enums import AttendanceStatus
from payroll_system.core.exceptions import NotFoundError, ValidationError


def _seed(container, rate="10"):
    worker = container.worker_service.create_worker(full_name="Aisyah", hourly_rate=rate)
    for day, status in (("2026-01-05", "FULL_DAY"), ("2026-01-06", "HALF_DAY"), ("2026-01-07", "DAY_OFF")):
        container.attendance_service.record_or_update(worker_id=worker.worker_id, work_date=day, status=status)
    return worker


def test_generate_reduces_range(container):
    worker = _seed(container)

    view = container.payslip_service.generate(worker.worker_id, "2026-01-01", "2026-01-31")

    assert view.totals.total_days == 1.5
    assert view.totals.total_hours == 12
    assert view.totals.total_amount == 120
    assert view.totals.total_work_days == 2
    assert view.totals.day_off_count == 1
    assert [a.status for a in view.attendances] == [
        AttendanceStatus.FULL_DAY,
        AttendanceStatus.HALF_DAY,
        AttendanceStatus.DAY_OFF,
    ]


def test_bounds_are_inclusive(container):
    worker = _seed(container)

    view = container.payslip_service.generate(worker.worker_id, "2026-01-05", "2026-01-06")

    assert view.start_date == date(2026, 1, 5)
    assert view.end_date == date(2026, 1, 6)
    assert view.totals.total_hours == 12
    assert len(view.attendances) == 2


def test_empty_range_is_not_an_error(container):
    worker = _seed(container)

    view = container.payslip_service.generate(worker.worker_id, "2025-06-01", "2025-06-30")

    assert view.totals.total_days == 0
    assert view.totals.total_hours == 0
    assert view.totals.total_amount == 0
    assert view.attendances == []


def test_unknown_worker_reads_no_attendance(container, attendance_repo):
    with pytest.raises(NotFoundError):
        container.payslip_service.generate(999, "2026-01-01", "2026-01-31")

    assert attendance_repo.range_queries == []


@pytest.mark.parametrize(
    "args",
    [
        (None, "2026-01-01", "2026-01-31"),
        (1, "", "2026-01-31"),
        (1, "2026-01-01", None),
        ("abc", "2026-01-01", "2026-01-31"),
        (1, "01/02/2026", "2026-01-31"),
        (1, "2026-02-01", "2026-01-01"),
    ],
)
def test_invalid_period_is_rejected(container, args):
    _seed(container)

    with pytest.raises(ValidationError):
        container.payslip_service.generate(*args)


def test_save_stores_the_same_totals(container, payslips_repo):
    worker = _seed(container, rate=12.5)

    view = container.payslip_service.generate(worker.worker_id, "2026-01-01", "2026-01-31")
    summary = container.payslip_service.save(worker.worker_id, "2026-01-01", "2026-01-31")

    assert summary.worker_id == worker.worker_id
    assert summary.start_date == date(2026, 1, 1)
    assert summary.end_date == date(2026, 1, 31)
    assert summary.total_hours == view.totals.total_hours == 12
    assert summary.total_amount == view.totals.total_amount == 150
    assert list(payslips_repo.summaries) == [summary.payslip_id]


def test_save_for_unknown_worker_stores_nothing(container, payslips_repo):
    with pytest.raises(NotFoundError):
        container.payslip_service.save(42, "2026-01-01", "2026-01-31")

    assert payslips_repo.summaries == {}


def test_every_request_rereads_attendance(container, attendance_repo):
    worker = _seed(container)
    container.payslip_service.generate(worker.worker_id, "2026-01-01", "2026-01-31")

    container.attendance_service.record_or_update(
        worker_id=worker.worker_id, work_date="2026-01-07", status="FULL_DAY"
    )
    view = container.payslip_service.generate(worker.worker_id, "2026-01-01", "2026-01-31")

    assert view.totals.total_hours == 20
    assert view.totals.day_off_count == 0
    assert len(attendance_repo.range_queries) == 2
