# division boundary: the raising form used by the service and a result-typed form for drills
# DivisionByZeroError is the only error kind in the package

from __future__ import annotations
from typing import Iterable, List
from .models import DivisionOutcome


class DivisionByZeroError(ZeroDivisionError):
    # subclassing ZeroDivisionError keeps generic arithmetic handlers working
    pass


ZERO_DIVISOR_MESSAGE = "Cannot divide by zero"


def divide(numerator: int, denominator: int) -> float:
    if denominator == 0:
        raise DivisionByZeroError(ZERO_DIVISOR_MESSAGE)
    # true division, never truncating
    return numerator / float(denominator)


def try_divide(numerator: int, denominator: int) -> DivisionOutcome:
    try:
        value = divide(numerator, denominator)
    except DivisionByZeroError as exc:
        return DivisionOutcome(numerator=numerator, denominator=denominator, error=str(exc))
    return DivisionOutcome(numerator=numerator, denominator=denominator, value=value)


def divide_each(numerator: int, denominators: Iterable[int]) -> List[DivisionOutcome]:
    # keeps input order, a zero divisor does not stop the sweep
    return [try_divide(numerator, d) for d in denominators]
