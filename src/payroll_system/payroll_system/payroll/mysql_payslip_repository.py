from __future__ import annotations

from datetime import date
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_float, db_cursor, fetchone
from .model import PayslipSummary
from .repository import PayslipRepository


class MySQLPayslipRepository(PayslipRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        worker_id: int,
        start_date: date,
        end_date: date,
        total_hours: float,
        total_amount: float,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payslips(worker_id, start_date, end_date, total_hours, total_amount)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(worker_id), start_date, end_date, float(total_hours), float(total_amount)),
            )
            return int(cur.lastrowid)

    def get_by_id(self, payslip_id: int) -> Optional[PayslipSummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payslip_id, worker_id, start_date, end_date, total_hours, total_amount, created_at
                FROM payslips
                WHERE payslip_id=%s
                """,
                (int(payslip_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return PayslipSummary(
                payslip_id=int(r["payslip_id"]),
                worker_id=int(r["worker_id"]),
                start_date=as_date(r["start_date"]),
                end_date=as_date(r["end_date"]),
                total_hours=as_float(r["total_hours"]),
                total_amount=as_float(r["total_amount"]),
                created_at=r.get("created_at"),
            )
