"""Configuration constants for the FedRAMP Marketplace scraper."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

MARKETPLACE_BASE_URL: str = os.getenv(
    "FEDRAMP_MARKETPLACE_BASE_URL", "https://marketplace.fedramp.gov/products/"
)

WEBDRIVER_HOST: str = os.getenv("FEDRAMP_WEBDRIVER_HOST", "localhost").strip() or "localhost"


def _parse_port(env_var: str, default: int) -> int:
    """Parse a port from the environment, falling back to ``default`` on garbage."""

    try:
        return int(os.getenv(env_var, str(default)))
    except ValueError:
        return default


DEFAULT_WEBDRIVER_PORT: int = _parse_port("FEDRAMP_WEBDRIVER_PORT", 4444)

HEADLESS: bool = os.getenv("FEDRAMP_HEADLESS", "0").strip().lower() not in {"0", "false", ""}

# Optional log file mirrored alongside stderr.
_log_file = os.getenv("FEDRAMP_LOG_FILE", "").strip()
LOG_FILE: Optional[Path] = Path(_log_file) if _log_file else None

OUTPUT_HEADER: tuple[str, ...] = (
    "ID",
    "FedRAMP Ready",
    "Authorizing Entity Review",
    "PMO Review",
    "FedRAMP Authorized",
    "Annual Assessment",
    "Independent Assessor",
)

NAVIGATION_ERROR_MARKER: str = "Error - Navigation failed"


def _parse_timeout_seconds(env_var: str, default: float, *, minimum: float = 0) -> float:
    """Parse a timeout value in seconds from the environment with bounds."""

    try:
        value = float(os.getenv(env_var, str(default)))
    except ValueError:
        return default
    return max(minimum, value)


# Element lookups poll until the Authorization Details section renders.
ELEMENT_WAIT_SECONDS: float = _parse_timeout_seconds("FEDRAMP_ELEMENT_WAIT_SECONDS", 20)
ELEMENT_POLL_SECONDS: float = _parse_timeout_seconds(
    "FEDRAMP_ELEMENT_POLL_SECONDS", 0.5, minimum=0.05
)
# Zero leaves the browser's own page load timeout in place.
PAGE_LOAD_TIMEOUT_SECONDS: float = _parse_timeout_seconds("FEDRAMP_PAGE_LOAD_TIMEOUT_SECONDS", 0)
HEALTHCHECK_TIMEOUT_SECONDS: float = _parse_timeout_seconds(
    "FEDRAMP_HEALTHCHECK_TIMEOUT_SECONDS", 5, minimum=0.1
)


def webdriver_url(port: int, host: Optional[str] = None) -> str:
    """Return the base URL of the WebDriver endpoint listening on ``port``."""

    return f"http://{host or WEBDRIVER_HOST}:{port}"
