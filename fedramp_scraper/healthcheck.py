from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import requests

from . import config
from .config_validation import validate_runtime_config
from .utils import log_line, scraper_event


@dataclass
class HealthResult:
    ok: bool
    checks: dict[str, dict[str, Any]]


class HealthCheckError(RuntimeError):
    def __init__(self, result: HealthResult) -> None:
        failed = sorted(name for name, info in result.checks.items() if not info.get("ok"))
        super().__init__(f"Startup health checks failed: {', '.join(failed)}")
        self.result = result


def _check_webdriver(port: int, session: Optional[Any] = None) -> dict[str, Any]:
    """Query the WebDriver ``/status`` endpoint on ``port``."""

    url = f"{config.webdriver_url(port)}/status"
    http = session or requests
    try:
        response = http.get(url, timeout=config.HEALTHCHECK_TIMEOUT_SECONDS)
    except requests.RequestException as exc:
        return {"ok": False, "url": url, "error": str(exc)}

    info: dict[str, Any] = {
        "ok": response.status_code < 500,
        "url": url,
        "status_code": response.status_code,
    }
    try:
        value = response.json().get("value") or {}
        info["ready"] = bool(value.get("ready", False))
        if value.get("message"):
            info["message"] = value["message"]
    except (ValueError, AttributeError):
        info["ready"] = None
    return info


def run_health_checks(port: int, *, session: Optional[Any] = None) -> HealthResult:
    checks: dict[str, dict[str, Any]] = {}

    try:
        validate_runtime_config("cli", port=port)
        checks["config"] = {"ok": True}
    except ValueError as exc:
        checks["config"] = {"ok": False, "error": str(exc)}

    if checks["config"]["ok"]:
        checks["webdriver"] = _check_webdriver(port, session=session)
    else:
        checks["webdriver"] = {"ok": False, "error": "skipped: invalid configuration"}

    overall_ok = all(check.get("ok", False) for check in checks.values())

    scraper_event(
        "health",
        ok=overall_ok,
        checks=checks,
    )

    return HealthResult(ok=overall_ok, checks=checks)


def require_healthy(port: int, *, session: Optional[Any] = None) -> HealthResult:
    """Run the startup checks and raise ``HealthCheckError`` when any fails."""

    result = run_health_checks(port, session=session)
    if not result.ok:
        raise HealthCheckError(result)
    return result


if __name__ == "__main__":  # pragma: no cover
    result = run_health_checks(config.DEFAULT_WEBDRIVER_PORT)
    for name, info in result.checks.items():
        status = "OK" if info.get("ok") else "FAIL"
        log_line(f"[HEALTH] {name}: {status} {info}")
    raise SystemExit(0 if result.ok else 1)
