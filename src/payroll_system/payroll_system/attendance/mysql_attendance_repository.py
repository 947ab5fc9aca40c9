from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_float, db_cursor, fetchall, fetchone
from .model import AttendanceRecord, AttendanceRow
from .repository import AttendanceRepository

_COLUMNS = "a.attendance_id, a.worker_id, a.work_date, a.status, a.created_at, a.updated_at"


def _to_record(r: dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        worker_id=int(r["worker_id"]),
        work_date=as_date(r["work_date"]),
        status=AttendanceStatus(r["status"]),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records a WHERE a.attendance_id=%s",
                (int(attendance_id),),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(self, *, worker_id: int, work_date: date, status: AttendanceStatus) -> tuple[int, bool]:
        # LAST_INSERT_ID(attendance_id) makes lastrowid point at the existing row on update.
        # Affected rows: 1 = inserted, 2 = status changed, 0 = same status again.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(worker_id, work_date, status)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    status=VALUES(status),
                    attendance_id=LAST_INSERT_ID(attendance_id)
                """,
                (int(worker_id), work_date, status.value),
            )
            created = cur.rowcount == 1
            attendance_id = int(cur.lastrowid or 0)
            if not attendance_id:
                cur.execute(
                    "SELECT attendance_id FROM attendance_records WHERE worker_id=%s AND work_date=%s",
                    (int(worker_id), work_date),
                )
                attendance_id = int(fetchone(cur)["attendance_id"])
            return attendance_id, created

    def list_rows(
        self,
        *,
        worker_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRow]:
        where = ["1=1"]
        params: list[Any] = []
        if worker_id:
            where.append("a.worker_id=%s")
            params.append(int(worker_id))
        if start_date:
            where.append("a.work_date >= %s")
            params.append(start_date)
        if end_date:
            where.append("a.work_date <= %s")
            params.append(end_date)

        sql = f"""
            SELECT {_COLUMNS}, w.full_name, w.hourly_rate
            FROM attendance_records a
            JOIN workers w ON w.worker_id = a.worker_id
            WHERE {' AND '.join(where)}
            ORDER BY a.work_date DESC, a.attendance_id DESC
        """

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [
                AttendanceRow(
                    record=_to_record(r),
                    full_name=r["full_name"],
                    hourly_rate=as_float(r["hourly_rate"]),
                )
                for r in fetchall(cur)
            ]

    def list_for_worker(self, *, worker_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records a
                WHERE a.worker_id=%s AND a.work_date BETWEEN %s AND %s
                ORDER BY a.work_date
                """,
                (int(worker_id), start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]
