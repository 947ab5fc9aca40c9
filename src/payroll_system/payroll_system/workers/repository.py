from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Worker


class WorkerRepository(Protocol):
    def list_all(self) -> Sequence[Worker]:
        raise NotImplementedError

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        raise NotImplementedError

    def create(self, *, full_name: str, hourly_rate: float) -> int:
        raise NotImplementedError

    def update(self, *, worker_id: int, full_name: str, hourly_rate: float) -> None:
        raise NotImplementedError

    def delete(self, worker_id: int) -> bool:
        """Remove the worker together with its attendance and saved payslips."""

        raise NotImplementedError
