import pytest

from payroll_system.core.exceptions import NotFoundError, ValidationError


def test_create_parses_rate_from_string(container):
    worker = container.worker_service.create_worker(full_name="  Budi  ", hourly_rate="12.50")

    assert worker.worker_id == 1
    assert worker.full_name == "Budi"
    assert worker.hourly_rate == 12.5
    assert worker.created_at is not None


def test_zero_rate_is_allowed(container):
    assert container.worker_service.create_worker(full_name="Intern", hourly_rate=0).hourly_rate == 0


@pytest.mark.parametrize(
    "full_name, hourly_rate",
    [
        (None, 10),
        ("   ", 10),
        ("Budi", None),
        ("Budi", ""),
        ("Budi", "ten"),
        ("Budi", -1),
        ("Budi", True),
    ],
)
def test_create_rejects_bad_input_without_inserting(container, workers_repo, full_name, hourly_rate):
    with pytest.raises(ValidationError):
        container.worker_service.create_worker(full_name=full_name, hourly_rate=hourly_rate)

    assert workers_repo.workers == {}


def test_update_overwrites_both_fields(container):
    worker = container.worker_service.create_worker(full_name="Budi", hourly_rate=10)

    updated = container.worker_service.update_worker(worker.worker_id, full_name="Budi S.", hourly_rate="11")

    assert updated.full_name == "Budi S."
    assert updated.hourly_rate == 11.0
    assert container.worker_service.list_workers() == [updated]


def test_update_unknown_worker_is_not_found(container):
    with pytest.raises(NotFoundError):
        container.worker_service.update_worker(7, full_name="X", hourly_rate=1)


def test_update_requires_both_fields(container):
    worker = container.worker_service.create_worker(full_name="Budi", hourly_rate=10)

    with pytest.raises(ValidationError):
        container.worker_service.update_worker(worker.worker_id, full_name="Budi", hourly_rate=None)


def test_delete_unknown_worker_is_not_found(container):
    with pytest.raises(NotFoundError):
        container.worker_service.delete_worker(5)


def test_delete_cascades_to_attendance_and_payslips(container, attendance_repo, payslips_repo):
    keep = container.worker_service.create_worker(full_name="Keep", hourly_rate=10)
    gone = container.worker_service.create_worker(full_name="Gone", hourly_rate=10)
    for w in (keep, gone):
        container.attendance_service.record_or_update(worker_id=w.worker_id, work_date="2026-01-05", status="FULL_DAY")
    container.payslip_service.save(gone.worker_id, "2026-01-01", "2026-01-31")

    container.worker_service.delete_worker(gone.worker_id)

    assert [w.worker_id for w in container.worker_service.list_workers()] == [keep.worker_id]
    assert {r.worker_id for r in attendance_repo.records.values()} == {keep.worker_id}
    assert payslips_repo.summaries == {}
