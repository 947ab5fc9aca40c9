from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import Worker
from .repository import WorkerRepository


def _to_worker(r: dict[str, Any]) -> Worker:
    return Worker(
        worker_id=int(r["worker_id"]),
        full_name=r["full_name"],
        hourly_rate=as_float(r["hourly_rate"]),
        created_at=r.get("created_at"),
    )


class MySQLWorkerRepository(WorkerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT worker_id, full_name, hourly_rate, created_at
                FROM workers
                ORDER BY worker_id
                """
            )
            return [_to_worker(r) for r in fetchall(cur)]

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT worker_id, full_name, hourly_rate, created_at
                FROM workers
                WHERE worker_id=%s
                """,
                (int(worker_id),),
            )
            r = fetchone(cur)
            return _to_worker(r) if r else None

    def create(self, *, full_name: str, hourly_rate: float) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO workers(full_name, hourly_rate) VALUES(%s,%s)",
                (full_name, float(hourly_rate)),
            )
            return int(cur.lastrowid)

    def update(self, *, worker_id: int, full_name: str, hourly_rate: float) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE workers SET full_name=%s, hourly_rate=%s WHERE worker_id=%s",
                (full_name, float(hourly_rate), int(worker_id)),
            )

    def delete(self, worker_id: int) -> bool:
        # Children first, all in the same transaction.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM payslips WHERE worker_id=%s", (int(worker_id),))
            cur.execute("DELETE FROM attendance_records WHERE worker_id=%s", (int(worker_id),))
            cur.execute("DELETE FROM workers WHERE worker_id=%s", (int(worker_id),))
            return cur.rowcount > 0
