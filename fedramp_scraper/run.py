"""Batch scraper for FedRAMP Marketplace authorization details.

Workflow:

- Read product IDs from the input file (one per line).
- Check the WebDriver endpoint on ``localhost:<port>`` and open one session.
- For each ID, load ``https://marketplace.fedramp.gov/products/<id>``, reload
  it, and scrape the "Authorization Details" paragraphs.
- Write one CSV row per ID, flushed immediately. Failures become error rows
  and the batch moves on.

Run with ``fedramp-scraper -i ids.txt -o results.csv``.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from selenium.webdriver.remote.webdriver import WebDriver

from . import config
from .config_validation import validate_runtime_config
from .csv_writer import ResultWriter
from .error_codes import ErrorCode
from .healthcheck import HealthCheckError, require_healthy
from .id_loader import load_ids
from .page_extractor import (
    NavigationError,
    ScrapeError,
    get_authorization_details,
    open_product_page,
)
from .selenium_client import SESSION_ERRORS, close_driver, describe_session_error, make_driver
from .telemetry import RunTelemetry
from .utils import log_line, scraper_event, setup_run_logger

DriverFactory = Callable[[int], WebDriver]


def process_product(
    driver: WebDriver,
    writer: ResultWriter,
    product_id: str,
    *,
    index: int,
    total: int,
    telemetry: Optional[RunTelemetry] = None,
) -> bool:
    """Scrape one product and write its row. Returns ``True`` on success.

    Every outcome writes exactly one row; no exception other than an output
    write failure escapes.
    """

    log_line(f"[{index}/{total}] Processing ID: {product_id}")

    try:
        open_product_page(driver, product_id)
    except NavigationError as exc:
        log_line(f"Error navigating to ID {product_id}: {exc}")
        writer.write_navigation_error(product_id)
        if telemetry is not None:
            telemetry.add(product_id, "failed", exc.error_code)
        return False

    try:
        record = get_authorization_details(driver, product_id)
    except ScrapeError as exc:
        message = str(exc)
        error_code = exc.error_code
    except SESSION_ERRORS as exc:
        message = describe_session_error(exc)
        error_code = ErrorCode.INTERNAL
    else:
        writer.write_record(record)
        scraper_event("extract", product_id=product_id, fields=record.found_fields())
        log_line(f"Successfully scraped data for ID: {product_id}")
        if telemetry is not None:
            telemetry.add(product_id, "success")
        return True

    log_line(f"Error processing ID {product_id}: {message}")
    scraper_event("error", step="extract", product_id=product_id, error_code=error_code)
    writer.write_error(product_id, message)
    if telemetry is not None:
        telemetry.add(product_id, "failed", error_code)
    return False


def scrape_ids(driver: WebDriver, writer: ResultWriter, ids: List[str]) -> RunTelemetry:
    """Process ``ids`` in order against a single shared session."""

    telemetry = RunTelemetry(total=len(ids))
    for index, product_id in enumerate(ids, start=1):
        process_product(
            driver,
            writer,
            product_id,
            index=index,
            total=len(ids),
            telemetry=telemetry,
        )
    return telemetry


def run_scrape(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    *,
    port: Optional[int] = None,
    driver_factory: Optional[DriverFactory] = None,
    check_endpoint: bool = True,
) -> Dict[str, Any]:
    """Public entrypoint: scrape every ID in ``input_path`` into ``output_path``.

    Raises ``OSError`` when the input cannot be read or the output cannot be
    created, ``HealthCheckError`` or ``WebDriverException`` when the WebDriver
    endpoint is unreachable. Per-ID failures never raise.
    """

    setup_run_logger()
    effective_port = config.DEFAULT_WEBDRIVER_PORT if port is None else port

    ids = load_ids(input_path)
    log_line(f"Found {len(ids)} IDs to process")

    if check_endpoint:
        require_healthy(effective_port)

    factory = driver_factory or make_driver
    driver = factory(effective_port)
    try:
        with ResultWriter(output_path) as writer:
            telemetry = scrape_ids(driver, writer, ids)
            rows_written = writer.rows_written
    finally:
        close_driver(driver)

    summary = telemetry.finalize({"output": str(output_path), "rows_written": rows_written})
    scraper_event(
        "summary",
        total=summary["total"],
        succeeded=summary["succeeded"],
        failed=summary["failed"],
        fail_reasons=summary["fail_reasons"],
    )
    log_line(
        f"Scraping completed. Results saved to {output_path} "
        f"({summary['succeeded']} succeeded, {summary['failed']} failed)"
    )
    return summary


def _build_parser() -> argparse.ArgumentParser:
    """Return an argument parser for the scraper CLI."""

    parser = argparse.ArgumentParser(
        prog="fedramp-scraper",
        description="FedRAMP Marketplace Scraper",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=config.DEFAULT_WEBDRIVER_PORT,
        help=f"Port number for the WebDriver connection (default: {config.DEFAULT_WEBDRIVER_PORT})",
    )
    parser.add_argument(
        "-i",
        "--input",
        required=True,
        help="Path to input file containing FedRAMP product IDs (one ID per line)",
    )
    parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Path where the output CSV file will be saved",
    )
    return parser


def _cli_entrypoint(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        validate_runtime_config("cli", port=args.port)
        run_scrape(args.input, args.output, port=args.port)
    except ValueError as exc:
        log_line(f"[RUN][FATAL] Invalid configuration: {exc}")
        return 1
    except OSError as exc:
        log_line(f"[RUN][FATAL] {exc}")
        return 1
    except HealthCheckError as exc:
        log_line(f"[RUN][FATAL] {exc}")
        for name, info in exc.result.checks.items():
            if not info.get("ok"):
                log_line(f"[HEALTH] {name}: FAIL {info}")
        return 1
    except SESSION_ERRORS as exc:
        log_line(f"[RUN][FATAL] Unable to start WebDriver session: {describe_session_error(exc)}")
        return 1
    return 0


def main() -> None:  # pragma: no cover - console script
    raise SystemExit(_cli_entrypoint())


if __name__ == "__main__":  # pragma: no cover
    main()

__all__ = ["process_product", "run_scrape", "scrape_ids", "_cli_entrypoint", "main"]
