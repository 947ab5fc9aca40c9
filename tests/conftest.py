from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from payroll_system.attendance.model import AttendanceRecord, AttendanceRow
from payroll_system.container import assemble
from payroll_system.core.enums import AttendanceStatus
from payroll_system.main import create_app
from payroll_system.payroll.model import PayslipSummary
from payroll_system.workers.model import Worker

FIXED_NOW = datetime(2026, 2, 1, 9, 0, 0)


class InMemoryWorkers:
    """Mirrors the MySQL repository, including the cascade on delete."""

    def __init__(self):
        self.workers: dict[int, Worker] = {}
        self._id = 0
        self.attendance: Optional["InMemoryAttendance"] = None
        self.payslips: Optional["InMemoryPayslips"] = None

    def list_all(self):
        return [self.workers[k] for k in sorted(self.workers)]

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        return self.workers.get(int(worker_id))

    def create(self, *, full_name: str, hourly_rate: float) -> int:
        self._id += 1
        self.workers[self._id] = Worker(
            worker_id=self._id, full_name=full_name, hourly_rate=hourly_rate, created_at=FIXED_NOW
        )
        return self._id

    def update(self, *, worker_id: int, full_name: str, hourly_rate: float) -> None:
        w = self.workers[worker_id]
        self.workers[worker_id] = replace(w, full_name=full_name, hourly_rate=hourly_rate)

    def delete(self, worker_id: int) -> bool:
        worker_id = int(worker_id)
        if worker_id not in self.workers:
            return False
        if self.attendance is not None:
            self.attendance.records = {
                k: v for k, v in self.attendance.records.items() if v.worker_id != worker_id
            }
        if self.payslips is not None:
            self.payslips.summaries = {
                k: v for k, v in self.payslips.summaries.items() if v.worker_id != worker_id
            }
        del self.workers[worker_id]
        return True


class InMemoryAttendance:
    def __init__(self, workers: InMemoryWorkers):
        self._workers = workers
        self.records: dict[int, AttendanceRecord] = {}
        self._id = 0
        self.range_queries: list[dict] = []
        self.upserts = 0

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self.records.get(attendance_id)

    def upsert(self, *, worker_id: int, work_date: date, status: AttendanceStatus) -> tuple[int, bool]:
        self.upserts += 1
        for r in self.records.values():
            if r.worker_id == worker_id and r.work_date == work_date:
                self.records[r.attendance_id] = replace(r, status=status)
                return r.attendance_id, False
        self._id += 1
        self.records[self._id] = AttendanceRecord(
            attendance_id=self._id,
            worker_id=worker_id,
            work_date=work_date,
            status=status,
            created_at=FIXED_NOW,
            updated_at=FIXED_NOW,
        )
        return self._id, True

    def list_rows(self, *, worker_id=None, start_date=None, end_date=None):
        rows = []
        for r in self.records.values():
            if worker_id and r.worker_id != worker_id:
                continue
            if start_date and r.work_date < start_date:
                continue
            if end_date and r.work_date > end_date:
                continue
            w = self._workers.workers[r.worker_id]
            rows.append(AttendanceRow(record=r, full_name=w.full_name, hourly_rate=w.hourly_rate))
        rows.sort(key=lambda x: (x.record.work_date, x.record.attendance_id), reverse=True)
        return rows

    def list_for_worker(self, *, worker_id: int, start_date: date, end_date: date):
        self.range_queries.append({"worker_id": worker_id, "start_date": start_date, "end_date": end_date})
        items = [
            r
            for r in self.records.values()
            if r.worker_id == worker_id and start_date <= r.work_date <= end_date
        ]
        return sorted(items, key=lambda r: r.work_date)


class InMemoryPayslips:
    def __init__(self):
        self.summaries: dict[int, PayslipSummary] = {}
        self._id = 0

    def create(self, *, worker_id, start_date, end_date, total_hours, total_amount) -> int:
        self._id += 1
        self.summaries[self._id] = PayslipSummary(
            payslip_id=self._id,
            worker_id=worker_id,
            start_date=start_date,
            end_date=end_date,
            total_hours=total_hours,
            total_amount=total_amount,
            created_at=FIXED_NOW,
        )
        return self._id

    def get_by_id(self, payslip_id: int) -> Optional[PayslipSummary]:
        return self.summaries.get(payslip_id)


@pytest.fixture
def workers_repo():
    return InMemoryWorkers()


@pytest.fixture
def attendance_repo(workers_repo):
    repo = InMemoryAttendance(workers_repo)
    workers_repo.attendance = repo
    return repo


@pytest.fixture
def payslips_repo(workers_repo):
    repo = InMemoryPayslips()
    workers_repo.payslips = repo
    return repo


@pytest.fixture
def container(workers_repo, attendance_repo, payslips_repo):
    return assemble(workers_repo=workers_repo, attendance_repo=attendance_repo, payslips_repo=payslips_repo)


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
