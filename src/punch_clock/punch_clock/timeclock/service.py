from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from ..common.datetime_utils import Clock, timestamp_now
from ..core.enums import PunchKind, TimeStatus
from ..core.exceptions import InvalidStateTransitionError, PersistenceError
from ..core.result import OperationResult, returns_result
from ..employees.store import EmployeeStore
from ..punches.model import PunchEvent
from ..punches.repository import PunchRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    source: TimeStatus
    target: TimeStatus
    done_message: str
    # Rejection message per wrong source state; the None key covers the rest.
    rejections: Dict[Optional[TimeStatus], str]

    def rejection_for(self, status: TimeStatus) -> str:
        return self.rejections.get(status) or self.rejections[None]


TRANSITIONS: Dict[PunchKind, Transition] = {
    PunchKind.CLOCK_IN: Transition(
        source=TimeStatus.OFF_CLOCK,
        target=TimeStatus.ON_CLOCK,
        done_message="{name}, you are now clocked in at {timestamp}",
        rejections={
            TimeStatus.ON_MEAL: "You are on a meal break, select end meal",
            None: "You are already clocked in",
        },
    ),
    PunchKind.CLOCK_OUT: Transition(
        source=TimeStatus.ON_CLOCK,
        target=TimeStatus.OFF_CLOCK,
        done_message="{name}, you are now clocked out at {timestamp}",
        rejections={None: "You are not clocked in"},
    ),
    PunchKind.START_MEAL: Transition(
        source=TimeStatus.ON_CLOCK,
        target=TimeStatus.ON_MEAL,
        done_message="{name}, start meal saved at {timestamp}",
        rejections={None: "You are not clocked in"},
    ),
    PunchKind.END_MEAL: Transition(
        source=TimeStatus.ON_MEAL,
        target=TimeStatus.ON_CLOCK,
        done_message="{name}, end meal saved at {timestamp}",
        rejections={None: "You are not on a meal"},
    ),
}


class TimeClockService:
    """Use case: punch the clock (clock in/out, start/end meal)."""

    def __init__(self, store: EmployeeStore, punches: PunchRepository, *, clock: Optional[Clock] = None):
        self._store = store
        self._punches = punches
        self._clock = clock

    def _punch(self, employee_id: int, kind: PunchKind) -> OperationResult:
        transition = TRANSITIONS[kind]
        employee = self._store.require(employee_id)

        if employee.time_status != transition.source:
            raise InvalidStateTransitionError(transition.rejection_for(employee.time_status))

        timestamp = timestamp_now(self._clock)
        event = PunchEvent(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            kind=kind,
            timestamp=timestamp,
        )

        with self._store.transaction() as store:
            store.put(employee.with_status(transition.target))
        try:
            self._punches.append(event)
        except PersistenceError:
            # No punch line, so the saved status goes back as well.
            logger.error(
                "Punch for %s not recorded; restoring status %s", employee.employee_id, employee.time_status.name
            )
            with self._store.transaction() as store:
                store.put(employee)
            raise

        logger.info("%s: %s (%s)", kind.value, employee.name, employee.employee_id)
        return OperationResult.success(
            transition.done_message.format(name=employee.name, timestamp=timestamp),
            event,
        )

    @returns_result
    def clock_in(self, employee_id: int) -> OperationResult:
        return self._punch(employee_id, PunchKind.CLOCK_IN)

    @returns_result
    def clock_out(self, employee_id: int) -> OperationResult:
        return self._punch(employee_id, PunchKind.CLOCK_OUT)

    @returns_result
    def start_meal(self, employee_id: int) -> OperationResult:
        return self._punch(employee_id, PunchKind.START_MEAL)

    @returns_result
    def end_meal(self, employee_id: int) -> OperationResult:
        return self._punch(employee_id, PunchKind.END_MEAL)

    @returns_result
    def last_punch(self, employee_id: int) -> OperationResult:
        last = self._punches.last_for_employee(employee_id)
        if last is None:
            return OperationResult.success("No punches found.", None, changed=False)
        return OperationResult.success(f"Last punch: {last.kind.value} at {last.timestamp}", last, changed=False)
