from __future__ import annotations

"""Selectors and label hints for FedRAMP Marketplace product pages."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class MarketplaceSelectors:
    """Locators for the "Authorization Details" block of a product page.

    The block is a ``div`` whose ``h3`` heading reads "Authorization Details";
    each labelled value sits in its own ``p`` element as ``"<Label>: <value>"``.
    ``labels`` is checked in order and the first label found in a paragraph
    wins, so "Independent Assessor" must stay ahead of the review labels.
    """

    section_xpath: str = "//h3[contains(text(),'Authorization Details')]/parent::div"
    paragraph_tag: str = "p"
    labels: Tuple[Tuple[str, str], ...] = (
        ("Independent Assessor:", "independent_assessor"),
        ("FedRAMP Ready:", "fedramp_ready"),
        ("Authorizing Entity Review:", "authorizing_entity_review"),
        ("PMO Review:", "pmo_review"),
        ("FedRAMP Authorized:", "fedramp_authorized"),
        ("Annual Assessment:", "annual_assessment"),
    )


MARKETPLACE_SELECTORS = MarketplaceSelectors()

__all__ = [
    "MarketplaceSelectors",
    "MARKETPLACE_SELECTORS",
]
