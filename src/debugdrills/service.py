# data processing service: runs the drills in sequence, then repeats two of them
# on a ThreadPoolExecutor. every step and unit is guarded on its own so one failure
# never stops the rest; tracebacks are logged, not re-raised.

from __future__ import annotations
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Dict, Optional, Tuple
from .calculator import divide
from .config import load_settings
from .models import EmailVerdict, total
from .validator import validate_email

logger = logging.getLogger(__name__)

SAMPLE_VALUES: Tuple[int, ...] = (10, 20, 30, 40)
SAMPLE_NUMERATOR = 1000
SAMPLE_DIVISORS: Tuple[int, ...] = (100, 50, 0, 25)
SAMPLE_EMAIL: Optional[str] = None


def process_data() -> int:
    result = total(SAMPLE_VALUES)
    logger.debug("process_data total=%d", result)
    return result


def calculate_metrics() -> None:
    # the zero divisor raises out of the loop, remaining divisors are skipped
    for divisor in SAMPLE_DIVISORS:
        value = divide(SAMPLE_NUMERATOR, divisor)
        logger.debug("calculate_metrics %d / %d = %s", SAMPLE_NUMERATOR, divisor, value)


def validate_input() -> EmailVerdict:
    return validate_email(SAMPLE_EMAIL)


STEPS: Dict[str, Callable[[], object]] = {
    "process_data": process_data,
    "calculate_metrics": calculate_metrics,
    "validate_input": validate_input,
}

BACKGROUND_UNITS: Tuple[str, ...] = ("calculate_metrics", "validate_input")


def _guarded(name: str, fn: Callable[[], object]) -> bool:
    try:
        fn()
    except Exception:
        logger.exception("step %s failed", name)
        return False
    return True


def run_sequential() -> Dict[str, bool]:
    results: Dict[str, bool] = {}
    for name, fn in STEPS.items():
        results[name] = _guarded(name, fn)
    return results


def start_background(pool: ThreadPoolExecutor) -> Dict[str, Future]:
    # units share nothing, each builds its own sample data
    return {name: pool.submit(_guarded, name, STEPS[name]) for name in BACKGROUND_UNITS}


def run_service(join: Optional[bool] = None) -> Dict[str, Future]:
    settings = load_settings()
    if join is None:
        join = settings.join_background

    logger.info("starting data processing service")
    sequential = run_sequential()
    logger.info("sequential steps finished: %s", sequential)

    pool = ThreadPoolExecutor(max_workers=settings.max_workers, thread_name_prefix="drill")
    futures = start_background(pool)
    # join=False leaves the units running after we return; output ordering is then
    # unspecified and callers must not assume the units have finished
    pool.shutdown(wait=join)
    if join:
        logger.info("background units finished: %s", {n: f.result() for n, f in futures.items()})
    else:
        logger.info("background units started without waiting")
    return futures
