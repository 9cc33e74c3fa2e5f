# runtime settings read from the environment
# a local .env is honored for development, deployments inject real env vars

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_WORKERS = 2
DEFAULT_JOIN_BACKGROUND = True

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    max_workers: int = DEFAULT_MAX_WORKERS
    join_background: bool = DEFAULT_JOIN_BACKGROUND


def _log_level() -> str:
    raw = os.getenv("DEBUGDRILLS_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        logger.warning("Unknown DEBUGDRILLS_LOG_LEVEL %r, using %s", raw, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return raw


def _max_workers() -> int:
    raw = os.getenv("DEBUGDRILLS_MAX_WORKERS")
    if raw is None:
        return DEFAULT_MAX_WORKERS
    try:
        value = int(raw)
    except ValueError:
        logger.warning("DEBUGDRILLS_MAX_WORKERS must be an integer (got %r)", raw)
        return DEFAULT_MAX_WORKERS
    if value < 1:
        logger.warning("DEBUGDRILLS_MAX_WORKERS must be >= 1 (got %d)", value)
        return DEFAULT_MAX_WORKERS
    return value


def _join_background() -> bool:
    raw = os.getenv("DEBUGDRILLS_JOIN_BACKGROUND")
    if raw is None:
        return DEFAULT_JOIN_BACKGROUND
    flag = raw.strip().lower()
    if flag in _TRUTHY:
        return True
    if flag in _FALSY:
        return False
    logger.warning("DEBUGDRILLS_JOIN_BACKGROUND not understood (got %r)", raw)
    return DEFAULT_JOIN_BACKGROUND


def load_settings() -> Settings:
    # read on every call so tests can monkeypatch the environment
    return Settings(
        log_level=_log_level(),
        max_workers=_max_workers(),
        join_background=_join_background(),
    )


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(threadName)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    # diagnostics go to stderr, drill output stays on stdout
    name = (level or load_settings().log_level).strip().upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        logger.warning("Unknown log level %r, using %s", level, DEFAULT_LOG_LEVEL)
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
