"""Extract authorization details from FedRAMP Marketplace product pages.

Each product page carries an "Authorization Details" block made of ``p``
elements such as::

    <div>
      <h3>Authorization Details</h3>
      <p>FedRAMP Ready: 01/02/2020</p>
      <p>Independent Assessor: Acme Corp</p>
    </div>

``get_authorization_details`` locates that block in an already-loaded page and
maps each labelled paragraph onto an ``AuthorizationRecord``.
"""
from __future__ import annotations

from typing import Iterable, Optional

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from . import config
from .error_codes import ErrorCode
from .records import AuthorizationRecord
from .selectors_marketplace import MARKETPLACE_SELECTORS, MarketplaceSelectors
from .selenium_client import SESSION_ERRORS, describe_session_error
from .utils import scraper_event


class ScrapeError(Exception):
    def __init__(self, error_code: str, message: str) -> None:
        super().__init__(message)
        self.error_code = error_code


class NavigationError(ScrapeError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.NAVIGATION, message)


class ElementNotFoundError(ScrapeError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.ELEMENT_NOT_FOUND, message)


class ExtractionError(ScrapeError):
    def __init__(self, message: str, error_code: str = ErrorCode.EXTRACTION) -> None:
        super().__init__(error_code, message)


def build_product_url(product_id: str, base_url: Optional[str] = None) -> str:
    """Return the product page URL; ``product_id`` is appended verbatim."""

    return f"{base_url if base_url is not None else config.MARKETPLACE_BASE_URL}{product_id}"


def open_product_page(driver: WebDriver, product_id: str, *, base_url: Optional[str] = None) -> str:
    """Navigate to the product page and reload it so late-rendered content settles."""

    url = build_product_url(product_id, base_url)
    scraper_event("nav", step="goto", product_id=product_id, url=url)
    try:
        driver.get(url)
        driver.refresh()
    except SESSION_ERRORS as exc:
        raise NavigationError(f"Failed to load {url}: {describe_session_error(exc)}") from exc
    return url


def extract_value(text: str, label: str) -> Optional[str]:
    """Return the stripped text after the first ``label``, or ``None`` when blank."""

    _, found, value = text.partition(label)
    if not found:
        return None
    value = value.strip()
    return value or None


def match_label(
    text: str, selectors: MarketplaceSelectors = MARKETPLACE_SELECTORS
) -> Optional[tuple[str, str]]:
    """Return ``(label, field_name)`` for the first label present in ``text``."""

    for label, field_name in selectors.labels:
        if label in text:
            return label, field_name
    return None


def parse_paragraphs(
    product_id: str,
    texts: Iterable[str],
    selectors: MarketplaceSelectors = MARKETPLACE_SELECTORS,
) -> AuthorizationRecord:
    """Build an ``AuthorizationRecord`` from paragraph texts.

    Only the first matching label of a paragraph is applied. Blank values leave
    the field absent; a later paragraph with the same label overrides an
    earlier value.
    """

    record = AuthorizationRecord(id=product_id)
    for text in texts:
        matched = match_label(text, selectors)
        if matched is None:
            continue
        label, field_name = matched
        value = extract_value(text, label)
        if value is not None:
            setattr(record, field_name, value)
    return record


def _find_section(driver: WebDriver, selectors: MarketplaceSelectors):
    wait = WebDriverWait(
        driver,
        config.ELEMENT_WAIT_SECONDS,
        poll_frequency=config.ELEMENT_POLL_SECONDS,
    )
    try:
        return wait.until(EC.presence_of_element_located((By.XPATH, selectors.section_xpath)))
    except TimeoutException as exc:
        raise ElementNotFoundError("Authorization Details section not found") from exc
    except SESSION_ERRORS as exc:
        raise ElementNotFoundError(
            f"Authorization Details section lookup failed: {describe_session_error(exc)}"
        ) from exc


def _paragraph_texts(paragraphs: Iterable) -> Iterable[str]:
    for paragraph in paragraphs:
        try:
            text = paragraph.text
        except SESSION_ERRORS:
            continue
        if text is not None:
            yield text


def get_authorization_details(
    driver: WebDriver,
    product_id: str,
    selectors: MarketplaceSelectors = MARKETPLACE_SELECTORS,
) -> AuthorizationRecord:
    """Scrape the Authorization Details block of the page loaded in ``driver``.

    Raises:
        ElementNotFoundError: the block never appeared.
        ExtractionError: the block holds no paragraphs.
    """

    section = _find_section(driver, selectors)

    try:
        paragraphs = section.find_elements(By.TAG_NAME, selectors.paragraph_tag)
    except SESSION_ERRORS as exc:
        raise ExtractionError(f"Failed to read paragraphs: {describe_session_error(exc)}") from exc
    if not paragraphs:
        scraper_event("error", step="extract", product_id=product_id, error=ErrorCode.NO_PARAGRAPHS)
        raise ExtractionError("No paragraphs found", error_code=ErrorCode.NO_PARAGRAPHS)

    return parse_paragraphs(product_id, _paragraph_texts(paragraphs), selectors)


__all__ = [
    "ElementNotFoundError",
    "ExtractionError",
    "NavigationError",
    "ScrapeError",
    "build_product_url",
    "extract_value",
    "get_authorization_details",
    "match_label",
    "open_product_page",
    "parse_paragraphs",
]
