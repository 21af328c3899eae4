from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..admin.service import ClockedInView, RosterRow
from ..employees.model import Employee

TITLE = "Employee Time Management System"

MAIN_MENU = [
    ("1", "Clock In"),
    ("2", "Clock Out"),
    ("3", "Start Meal"),
    ("4", "End Meal"),
    ("5", "Show Last Punch"),
]
MANAGER_MENU = [
    ("6", "View Clocked In"),
    ("7", "Edit Employee Info"),
    ("8", "Cancel"),
]
ASSOCIATE_MENU = [("6", "Cancel")]

EDIT_MENU = [
    ("1", "Add"),
    ("2", "Remove"),
    ("3", "Change pay"),
    ("4", "Change Status"),
    ("5", "Exit"),
]

STATUS_MENU = [
    ("1", "Promote to manager"),
    ("2", "Demote to associate"),
    ("3", "Grant master access"),
    ("4", "Remove master access"),
]


def header(timestamp: str, actor: Optional[Employee]) -> List[str]:
    lines = ["", TITLE, timestamp]
    if actor is not None:
        marker = "**" if actor.has_master else ""
        lines.append(f"{marker}{actor.name}{marker}")
    return lines


def menu_lines(entries: Sequence[Tuple[str, str]]) -> List[str]:
    return [f"{key} - {label}" for key, label in entries]


def main_menu(actor: Employee) -> List[Tuple[str, str]]:
    return MAIN_MENU + (MANAGER_MENU if actor.is_manager else ASSOCIATE_MENU)


def roster_lines(rows: Sequence[RosterRow]) -> List[str]:
    lines = ["", "EMPLOYEES:"]
    for row in rows:
        lines.append(f"{row.display_id:<9}{row.name:<20}${row.pay:<9.2f}{row.badge}")
    return lines


def clocked_in_lines(view: ClockedInView) -> List[str]:
    lines = ["", "--Clocked In--"]
    if view.on_clock:
        lines.extend(f"{name:<20}{badge}" for name, badge in view.on_clock)
    else:
        lines.extend(["", "No employees are clocked in"])

    if view.on_meal:
        lines.extend(["", "--On Meal--"])
        lines.extend(f"{name:<20}{badge}" for name, badge in view.on_meal)
    return lines
