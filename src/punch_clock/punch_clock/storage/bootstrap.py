from __future__ import annotations

import logging
from typing import List

from ..core.enums import Role, TimeStatus
from ..employees.model import Employee
from ..employees.store import EmployeeStore

logger = logging.getLogger(__name__)


def sample_employees() -> List[Employee]:
    """First-run records. Log in as 1111111 (pin 1111) to create real profiles."""
    return [
        Employee(1111111, "Test User", 20.00, Role.MASTER, 1111, TimeStatus.ON_CLOCK),
        Employee(2039485, "Alex Martinez", 15.25, Role.ASSOCIATE, time_status=TimeStatus.ON_CLOCK),
        Employee(4012346, "Samantha Lee", 16.10, Role.MANAGER, 2864, TimeStatus.ON_MEAL),
        Employee(1964273, "Jordan Patel", 15.75, Role.ASSOCIATE, time_status=TimeStatus.ON_MEAL),
        Employee(4012348, "Chris Donovan", 17.00, Role.ASSOCIATE, time_status=TimeStatus.ON_CLOCK),
    ]


def ensure_sample_employees(store: EmployeeStore) -> bool:
    """Seed the store when the employee file is missing or empty.

    Returns True when sample records were written.
    """
    store.reload()
    if not store.is_empty():
        return False

    with store.transaction() as tx:
        for employee in sample_employees():
            tx.add(employee)
    logger.info("Employee file empty; seeded %d sample employees", len(store))
    return True
