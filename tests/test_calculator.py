import pytest
from debugdrills.calculator import DivisionByZeroError, divide, divide_each, try_divide


def test_divide_is_true_division():
    assert divide(1000, 100) == 10.0
    assert divide(7, 2) == 3.5
    assert isinstance(divide(10, 5), float)


def test_divide_by_zero_raises():
    with pytest.raises(DivisionByZeroError, match="Cannot divide by zero"):
        divide(1000, 0)
    # still a ZeroDivisionError for generic handlers
    with pytest.raises(ZeroDivisionError):
        divide(1, 0)


def test_try_divide_returns_outcome_instead_of_raising():
    outcome = try_divide(1000, 0)
    assert not outcome.ok
    assert outcome.value is None
    assert outcome.error == "Cannot divide by zero"

    outcome = try_divide(1000, 25)
    assert outcome.ok and outcome.value == 40.0


def test_divide_each_keeps_order_and_continues_past_zero():
    outcomes = divide_each(1000, [100, 50, 0, 25])
    rendered = [o.value if o.ok else "Error" for o in outcomes]
    assert rendered == [10.0, 20.0, "Error", 40.0]
