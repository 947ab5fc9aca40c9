from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .payroll.mysql_payslip_repository import MySQLPayslipRepository
from .payroll.repository import PayslipRepository
from .payroll.service import PayslipService
from .workers.mysql_worker_repository import MySQLWorkerRepository
from .workers.repository import WorkerRepository
from .workers.service import WorkerService


@dataclass(frozen=True)
class Container:
    workers_repo: WorkerRepository
    attendance_repo: AttendanceRepository
    payslips_repo: PayslipRepository

    worker_service: WorkerService
    attendance_service: AttendanceService
    payslip_service: PayslipService

    conn: Optional[DatabaseConnection] = None


def assemble(
    *,
    workers_repo: WorkerRepository,
    attendance_repo: AttendanceRepository,
    payslips_repo: PayslipRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over any repository implementation (MySQL or in-memory)."""
    return Container(
        workers_repo=workers_repo,
        attendance_repo=attendance_repo,
        payslips_repo=payslips_repo,
        worker_service=WorkerService(workers_repo),
        attendance_service=AttendanceService(attendance_repo, workers_repo),
        payslip_service=PayslipService(workers_repo, attendance_repo, payslips_repo),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return assemble(
        workers_repo=MySQLWorkerRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        payslips_repo=MySQLPayslipRepository(conn),
        conn=conn,
    )
