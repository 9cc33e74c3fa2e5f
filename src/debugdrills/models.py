# value objects and the summation helper shared by the drills and the service

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class EmailVerdict(Enum):
    # each verdict carries the line the drill prints
    VALID = "Email is valid"
    INVALID_EMPTY = "Email is invalid (null or empty)"
    INVALID_NO_AT_SIGN = "Email is invalid"

    @property
    def message(self) -> str:
        return self.value

    @property
    def is_valid(self) -> bool:
        return self is EmailVerdict.VALID


@dataclass(frozen=True)
class DivisionOutcome:
    # exactly one of value / error is set
    numerator: int
    denominator: int
    value: Optional[float] = None
    error: Optional[str] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("DivisionOutcome needs exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def describe(self) -> str:
        # "1000 / 0 = Error: Cannot divide by zero" style line
        rhs = self.value if self.ok else f"Error: {self.error}"
        return f"{self.numerator} / {self.denominator} = {rhs}"


def total(values: Iterable[int]) -> int:
    # empty input sums to 0
    return sum(values)
