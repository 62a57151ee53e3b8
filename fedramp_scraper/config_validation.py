from __future__ import annotations

from typing import Literal

from . import config
from .utils import log_line, scraper_event

Entrypoint = Literal["cli", "tests"]


def _raise_config_error(message: str, *, entrypoint: Entrypoint, error: str) -> None:
    scraper_event(
        "config",
        error=error,
        entrypoint=entrypoint,
    )
    log_line(f"[CONFIG] {message} (entrypoint={entrypoint})")
    raise ValueError(message)


def validate_runtime_config(entrypoint: Entrypoint, *, port: int | None = None) -> None:
    """Validate runtime configuration for the given entrypoint.

    Raises ``ValueError`` when a blocking misconfiguration is detected.
    """

    effective_port = config.DEFAULT_WEBDRIVER_PORT if port is None else port
    if not 1 <= effective_port <= 65535:
        _raise_config_error(
            f"WebDriver port must be between 1 and 65535, got {effective_port}.",
            entrypoint=entrypoint,
            error="invalid_port",
        )

    if not config.MARKETPLACE_BASE_URL.lower().startswith(("http://", "https://")):
        _raise_config_error(
            "FEDRAMP_MARKETPLACE_BASE_URL must be an http(s) URL.",
            entrypoint=entrypoint,
            error="invalid_base_url",
        )

    if config.ELEMENT_WAIT_SECONDS <= 0:
        _raise_config_error(
            "ELEMENT_WAIT_SECONDS must be greater than zero.",
            entrypoint=entrypoint,
            error="invalid_timeout",
        )

    if config.PAGE_LOAD_TIMEOUT_SECONDS < 0:
        _raise_config_error(
            "PAGE_LOAD_TIMEOUT_SECONDS must be non-negative.",
            entrypoint=entrypoint,
            error="invalid_timeout",
        )


__all__ = ["validate_runtime_config", "Entrypoint"]
