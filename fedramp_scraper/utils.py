from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional

from . import config

LOGGER = logging.getLogger("fedramp_scraper")
_LOGGER_INITIALISED = False
_CURRENT_LOG_FILE: Optional[Path] = None


def _configure_logger(log_path: Optional[Path]) -> None:
    """Configure the shared application logger.

    Progress lines always go to stderr; ``log_path`` adds a file copy.
    """

    global _LOGGER_INITIALISED, _CURRENT_LOG_FILE

    for handler in list(LOGGER.handlers):
        LOGGER.removeHandler(handler)
        try:
            handler.close()
        except Exception:  # noqa: BLE001
            continue

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    LOGGER.addHandler(stream_handler)

    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        LOGGER.addHandler(file_handler)

    LOGGER.setLevel(logging.INFO)
    LOGGER.propagate = False

    _CURRENT_LOG_FILE = log_path
    _LOGGER_INITIALISED = True


def _ensure_logger() -> None:
    """Initialise the logger lazily using the configured log file."""

    if _LOGGER_INITIALISED:
        return
    _configure_logger(config.LOG_FILE)


def setup_run_logger(log_path: Optional[Path] = None) -> Optional[Path]:
    """(Re)configure logging for a run and return the active log file, if any."""

    _configure_logger(log_path if log_path is not None else config.LOG_FILE)
    if _CURRENT_LOG_FILE is not None:
        LOGGER.info("Logging to %s", _CURRENT_LOG_FILE)
    return _CURRENT_LOG_FILE


def log_line(message: str) -> None:
    """Write a timestamped log line to stderr and the active log file."""

    _ensure_logger()
    LOGGER.info(message)


def log_debug(message: str) -> None:
    _ensure_logger()
    LOGGER.debug(message)


def scraper_event(event: str, **fields: Any) -> None:
    """Log a structured ``[SCRAPER][EVENT] key=value, ...`` line.

    Events in use: nav, extract, error, summary, session, health, config.
    """

    payload = ", ".join(f"{key}={value!r}" for key, value in sorted(fields.items()))
    log_line(f"[SCRAPER][{event.upper()}] {payload}".rstrip())


def short_error_message(exc: BaseException, max_length: int = 200) -> str:
    """Return a single-line, truncated string representation of ``exc``."""

    message = " ".join(str(exc).split()) or exc.__class__.__name__
    if len(message) > max_length:
        return message[: max_length - 3] + "..."
    return message


__all__ = [
    "LOGGER",
    "log_debug",
    "log_line",
    "scraper_event",
    "setup_run_logger",
    "short_error_message",
]
