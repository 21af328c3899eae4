import pytest

from src.punch_clock.punch_clock.common.validators import (
    require_binary_choice,
    require_employee_id,
    require_name,
    require_pay,
    require_pin,
)
from src.punch_clock.punch_clock.core.exceptions import ValidationError


def test_employee_id_bounds():
    assert require_employee_id(" 1000000 ") == 1000000
    assert require_employee_id(9999999) == 9999999
    for bad in ("999999", "10000000", "12ab567", "", True):
        with pytest.raises(ValidationError):
            require_employee_id(bad)


def test_pin_bounds():
    assert require_pin("1000") == 1000
    for bad in ("999", "10000", "12a4"):
        with pytest.raises(ValidationError):
            require_pin(bad)


def test_pay():
    assert require_pay("0") == 0.0
    assert require_pay(15.25) == 15.25
    for bad in ("-0.01", "ten", "nan", "inf"):
        with pytest.raises(ValidationError):
            require_pay(bad)


def test_name_rejects_file_separators():
    assert require_name("  Mary-Kate Olsen ") == "Mary-Kate Olsen"
    for bad in ("A|B", "A--B", "Trailing-", "Line\nBreak", ""):
        with pytest.raises(ValidationError):
            require_name(bad)


def test_binary_choice():
    assert require_binary_choice("1") is True
    assert require_binary_choice("0") is False
    with pytest.raises(ValidationError, match="0 or 1"):
        require_binary_choice("2")
