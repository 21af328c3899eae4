from __future__ import annotations

from src.punch_clock.punch_clock.core.enums import Role, TimeStatus
from src.punch_clock.punch_clock.employees.file_employee_repository import (
    FileEmployeeRepository,
    format_employee_line,
    parse_employee_line,
)
from src.punch_clock.punch_clock.employees.model import Employee
from src.punch_clock.punch_clock.storage.bootstrap import sample_employees


def test_line_layout_matches_file_format():
    employee = Employee(4012346, "Samantha Lee", 16.1, Role.MANAGER, 2864, TimeStatus.ON_MEAL)

    assert format_employee_line(employee) == "Samantha Lee|4012346|16.1|1|2864|0|2"


def test_save_then_load_reproduces_records(tmp_path):
    repo = FileEmployeeRepository(tmp_path / "employees.txt")
    employees = sample_employees() + [Employee(3000003, "Riley Chen", 18.333, Role.ASSOCIATE)]

    repo.save_all(employees)
    loaded = repo.load_all()

    assert sorted(loaded, key=lambda e: e.employee_id) == sorted(employees, key=lambda e: e.employee_id)


def test_missing_file_loads_empty(tmp_path):
    assert FileEmployeeRepository(tmp_path / "nope.txt").load_all() == []


def test_short_and_malformed_lines_are_skipped(tmp_path):
    path = tmp_path / "employees.txt"
    path.write_text(
        "Alex Martinez|2039485|15.25|0|0|0|1\n"
        "Too Short|1234567|15\n"
        "Bad Pay|1234568|abc|0|0|0|0\n"
        "Bad Status|1234569|10|0|0|0|7\n"
        "\n"
        "Jordan Patel|1964273|15.75|0|0|0|2\n",
        encoding="utf-8",
    )

    loaded = FileEmployeeRepository(path).load_all()

    assert [e.employee_id for e in loaded] == [2039485, 1964273]
    assert loaded[1].time_status == TimeStatus.ON_MEAL


def test_legacy_flag_combinations_are_normalized():
    master_without_manager = parse_employee_line("Dana Cole|1111112|21|0|1212|1|0")
    associate_with_pin = parse_employee_line("Alex Martinez|2039485|15.25|0|4444|0|0")

    assert master_without_manager.role == Role.MASTER
    assert associate_with_pin.role == Role.ASSOCIATE
    assert not associate_with_pin.has_pin


def test_save_overwrites_previous_contents(tmp_path):
    repo = FileEmployeeRepository(tmp_path / "employees.txt")
    repo.save_all(sample_employees())

    repo.save_all([Employee(2000001, "A", 15.0)])

    assert (tmp_path / "employees.txt").read_text(encoding="utf-8") == "A|2000001|15.0|0|0|0|0\n"


def test_out_of_range_records_are_skipped(tmp_path):
    path = tmp_path / "employees.txt"
    path.write_text(
        "Short Id|123|15.0|0|0|0|0\n"
        "Long Id|12345678|15.0|0|0|0|0\n"
        "Negative Pay|2000002|-1.0|0|0|0|0\n"
        "No Pay|2000003|nan|0|0|0|0\n"
        "Bad Pin|4012349|16.0|1|99|0|0\n"
        "Samantha Lee|4012346|16.1|1|2864|0|1\n",
        encoding="utf-8",
    )

    loaded = FileEmployeeRepository(path).load_all()

    assert [e.employee_id for e in loaded] == [4012346]
