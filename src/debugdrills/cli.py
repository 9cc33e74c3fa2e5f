# console entry points, one per drill plus the data processing service
# inputs are fixed samples, no arguments are read

from __future__ import annotations
from .calculator import DivisionByZeroError, divide
from .config import configure_logging
from .models import DivisionOutcome, total
from .service import SAMPLE_DIVISORS, SAMPLE_EMAIL, SAMPLE_NUMERATOR, SAMPLE_VALUES, run_service
from .validator import validate_email


def array_main() -> None:
    print(f"Sum: {total(SAMPLE_VALUES)}")


def division_main() -> None:
    for divisor in SAMPLE_DIVISORS:
        # catch at the call site and keep going with the rest of the samples
        try:
            outcome = DivisionOutcome(SAMPLE_NUMERATOR, divisor, value=divide(SAMPLE_NUMERATOR, divisor))
        except DivisionByZeroError as exc:
            outcome = DivisionOutcome(SAMPLE_NUMERATOR, divisor, error=str(exc))
        print(outcome.describe())


def email_main() -> None:
    validate_email(SAMPLE_EMAIL)


def main() -> None:
    configure_logging()
    run_service()


if __name__ == "__main__":
    main()
