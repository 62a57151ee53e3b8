"""Selenium client helpers for the remote WebDriver session."""
from __future__ import annotations

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.remote.webdriver import WebDriver
from urllib3.exceptions import HTTPError as Urllib3HTTPError

from . import config
from .utils import log_line, scraper_event, short_error_message

# Selenium raises WebDriverException for errors reported by the endpoint but
# lets urllib3 transport errors through when the endpoint itself is gone.
SESSION_ERRORS = (WebDriverException, Urllib3HTTPError)


def describe_session_error(exc: BaseException) -> str:
    """Return a one-line description of a WebDriver or transport error."""

    if isinstance(exc, WebDriverException) and exc.msg:
        return short_error_message(Exception(exc.msg))
    return short_error_message(exc)


def make_driver(port: int) -> WebDriver:
    """Open a Chrome session on the WebDriver endpoint listening on ``port``.

    The endpoint must already be running; nothing is launched locally.
    """

    chrome_options = Options()
    if config.HEADLESS:
        chrome_options.add_argument("--headless=new")
        chrome_options.add_argument("--disable-gpu")
        chrome_options.add_argument("--window-size=1920,1080")

    executor = config.webdriver_url(port)
    log_line(f"Connecting to WebDriver at {executor}")
    try:
        driver = webdriver.Remote(command_executor=executor, options=chrome_options)
    except Urllib3HTTPError as exc:
        raise WebDriverException(f"WebDriver endpoint {executor} is unreachable: {exc}") from exc
    if config.PAGE_LOAD_TIMEOUT_SECONDS > 0:
        driver.set_page_load_timeout(config.PAGE_LOAD_TIMEOUT_SECONDS)
    scraper_event("session", executor=executor, session_id=driver.session_id)
    return driver


def close_driver(driver: WebDriver) -> None:
    """End the WebDriver session, logging rather than raising on failure."""

    try:
        driver.quit()
    except SESSION_ERRORS as exc:
        log_line(f"[SESSION][WARN] Failed to close WebDriver session: {describe_session_error(exc)}")


__all__ = ["SESSION_ERRORS", "close_driver", "describe_session_error", "make_driver"]
