from __future__ import annotations

import pytest

from src.punch_clock.punch_clock.core.exceptions import NotFoundError, PersistenceError, ValidationError
from src.punch_clock.punch_clock.employees.model import Employee
from src.punch_clock.punch_clock.employees.store import EmployeeStore
from src.punch_clock.punch_clock.storage.bootstrap import ensure_sample_employees


def test_lookup_by_id_survives_removal(store):
    store.remove(4012346)

    assert store.require(2039485).name == "Alex Martinez"
    with pytest.raises(NotFoundError):
        store.require(4012346)


def test_duplicate_id_rejected(store):
    with pytest.raises(ValidationError):
        store.add(Employee(2039485, "Clone", 1.0))


def test_transaction_saves_on_success(store, employees_repo):
    with store.transaction() as tx:
        tx.add(Employee(3000003, "Riley Chen", 18.0))

    assert employees_repo.save_calls == 1
    assert any(e.employee_id == 3000003 for e in employees_repo.saved)


def test_transaction_rolls_back_on_failed_save(store, employees_repo):
    employees_repo.fail_saves = True

    with pytest.raises(PersistenceError):
        with store.transaction() as tx:
            tx.remove(2039485)

    assert 2039485 in store


def test_seeding_only_when_empty(employees_repo):
    empty = type(employees_repo)()
    store = EmployeeStore(empty)

    assert ensure_sample_employees(store)
    assert len(empty.saved) == 5
    assert store.require(1111111).manager_pin == 1111

    assert not ensure_sample_employees(store)
    assert empty.save_calls == 1
