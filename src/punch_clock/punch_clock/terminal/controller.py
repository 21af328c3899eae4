from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, Tuple

import click
from flask import Flask

from ..auth.session import Session
from ..common.datetime_utils import timestamp_now
from ..common.validators import require_binary_choice, require_employee_id, require_pay, require_pin
from ..container import Container
from ..core.enums import ErrorKind, Role, RoleChange
from ..core.exceptions import PersistenceError, ValidationError
from ..core.result import OperationResult
from ..employees.model import EmployeeDraft
from ..storage.bootstrap import ensure_sample_employees
from . import formatting

logger = logging.getLogger(__name__)

_STATUS_CHOICES = {
    "1": RoleChange.PROMOTE_TO_MANAGER,
    "2": RoleChange.DEMOTE_TO_ASSOCIATE,
    "3": RoleChange.GRANT_MASTER,
    "4": RoleChange.REVOKE_MASTER,
}


class Terminal:
    """Menu loop of the punch clock.

    Gathers and parses every value before calling a service, then prints the
    result. One login handles one menu choice, as on the physical terminal.
    """

    def __init__(self, container: Container):
        self._c = container

    @staticmethod
    def _say(*lines: str) -> None:
        for line in lines:
            click.echo(line)

    @staticmethod
    def _ask(text: str) -> str:
        return click.prompt(text, type=str, prompt_suffix=": ", default="", show_default=False)

    @staticmethod
    def _choose(entries: Sequence[Tuple[str, str]], *, invalid: str = "Invalid, try again") -> str:
        keys = {key for key, _ in entries}
        while True:
            choice = click.prompt("->", type=str, prompt_suffix=" ", default="", show_default=False).strip()
            if choice in keys:
                return choice
            click.echo(invalid)

    def _ask_until_valid(self, text: str, parse: Callable):
        while True:
            try:
                return parse(self._ask(text))
            except ValidationError as exc:
                self._say(str(exc))

    def _report(self, result: OperationResult) -> None:
        if result.message:
            self._say("", result.message)

    def run(self, *, once: bool = False) -> None:
        while True:
            self.login_cycle()
            if once:
                return

    def login_cycle(self) -> None:
        self._say(*formatting.header(timestamp_now(), None))
        session = self._login()
        actor = self._c.auth_service.current_actor(session)

        self._say(*formatting.header(timestamp_now(), actor))
        entries = formatting.main_menu(actor)
        self._say(*formatting.menu_lines(entries))
        choice = self._choose(entries)

        clock = self._c.time_clock_service
        actions = {
            "1": clock.clock_in,
            "2": clock.clock_out,
            "3": clock.start_meal,
            "4": clock.end_meal,
            "5": clock.last_punch,
        }
        if choice in actions:
            self._report(actions[choice](actor.employee_id))
        elif actor.is_manager and choice == "6":
            self._view_clocked_in(actor.employee_id)
        elif actor.is_manager and choice == "7":
            self._edit_info(session)
        session.logout()

    def _login(self) -> Session:
        while True:
            result = self._c.auth_service.login(self._ask("Enter your personnel #"))
            if result.ok:
                return result.value
            self._say(result.message)

    def _view_clocked_in(self, actor_id: int) -> None:
        result = self._c.admin_service.clocked_in(actor_id)
        if not result.ok:
            self._report(result)
            return
        self._say(*formatting.clocked_in_lines(result.value))

    def _edit_info(self, session: Session) -> None:
        while True:
            result = self._c.auth_service.unlock_edit(session, self._ask("Enter manager pin"))
            if result.ok:
                break
            self._say(result.message)
            if result.error != ErrorKind.INVALID_INPUT:
                return

        handlers = {
            "1": self._add,
            "2": self._remove,
            "3": self._change_pay,
            "4": self._change_status,
        }
        while True:
            gate = self._c.auth_service.require_edit_unlocked(session)
            if not gate.ok:
                self._report(gate)
                return
            actor_id = gate.value.employee_id

            self._say(*formatting.roster_lines(self._c.admin_service.roster(actor_id)))
            self._say("", "Would you like to:", *formatting.menu_lines(formatting.EDIT_MENU))
            choice = self._choose(formatting.EDIT_MENU, invalid="Unknown, try again")
            if choice == "5":
                return
            handlers[choice](actor_id)

    def _add(self, actor_id: int) -> None:
        actor = self._c.store.require(actor_id)
        name = self._ask("Enter name")

        def fresh_id(raw: str) -> int:
            employee_id = require_employee_id(raw)
            if employee_id in self._c.store:
                raise ValidationError("ID already exists")
            return employee_id

        employee_id = self._ask_until_valid("Enter personnel #", fresh_id)
        pay = self._ask_until_valid("Enter pay", require_pay)

        role = Role.ASSOCIATE
        pin = None
        # Non-master actors are not asked for a role.
        if actor.has_master:
            if self._ask_until_valid("Enter 0 for associate or 1 for manager", require_binary_choice):
                role = Role.MANAGER
                if self._ask_until_valid("Enter 0 to continue or 1 to grant master access", require_binary_choice):
                    role = Role.MASTER
                pin = self._ask_until_valid("Enter 4-digit manager pin", require_pin)

        draft = EmployeeDraft(name=name, employee_id=employee_id, pay=pay, role=role, manager_pin=pin)
        self._report(self._c.admin_service.add_employee(actor_id, draft))

    def _remove(self, actor_id: int) -> None:
        target_id = self._ask_until_valid("Enter employee #", require_employee_id)
        self._report(self._c.admin_service.remove_employee(actor_id, target_id))

    def _change_pay(self, actor_id: int) -> None:
        check = self._c.admin_service.check_pay_target(actor_id, self._ask("Enter personnel #"))
        if not check.ok:
            self._report(check)
            return
        target_id = check.value.employee_id
        new_pay = self._ask("Enter new pay")
        self._report(self._c.admin_service.change_pay(actor_id, target_id, new_pay))

    def _change_status(self, actor_id: int) -> None:
        check = self._c.admin_service.check_status_target(actor_id, self._ask("Enter personnel #"))
        if not check.ok:
            self._report(check)
            return
        target_id = check.value.employee_id

        self._say("", "Would you like to:", *formatting.menu_lines(formatting.STATUS_MENU))
        choice = click.prompt("->", type=str, prompt_suffix=" ", default="", show_default=False).strip()
        change = _STATUS_CHOICES.get(choice)
        if change is None:
            self._say("Invalid choice.")
            return

        pin: Optional[int] = None
        if self._c.admin_service.pin_required(actor_id, target_id, change):
            pin = self._ask_until_valid("Create manager pin", require_pin)
        self._report(self._c.admin_service.change_role(actor_id, target_id, change, pin))


def register(app: Flask, container: Container) -> None:
    @app.cli.command("terminal")
    @click.option("--once", is_flag=True, help="Handle a single login, then exit.")
    def terminal(once: bool) -> None:
        """Run the punch clock menu loop."""
        try:
            if app.config.get("SEED_ON_EMPTY", True):
                ensure_sample_employees(container.store)
            Terminal(container).run(once=once)
        except PersistenceError as exc:
            logger.error("Data files unavailable: %s", exc)
            raise click.ClickException(f"Data files unavailable: {exc}")

    @app.cli.command("seed")
    def seed() -> None:
        """Write the sample employees if the employee file is empty."""
        try:
            seeded = ensure_sample_employees(container.store)
        except PersistenceError as exc:
            raise click.ClickException(str(exc))
        if seeded:
            click.echo(f"OK: Seeded sample employees -> {container.files.employees}")
        else:
            click.echo(f"Employee file already has records: {container.files.employees}")
