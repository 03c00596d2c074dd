"""Extraction of announcement summaries from a ticker's listing page."""

from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import urlsplit

from bs4 import BeautifulSoup
from bs4.element import Tag

from .config import BASE_URL, SOURCE_NAME
from .models import ArticleSummary
from .timestamps import parse_listing_timestamp

LOGGER = logging.getLogger(__name__)

MIN_CELLS = 4


def parse_listing(html: str, ticker: str) -> List[ArticleSummary]:
    """Return one summary per usable table row, in document order.

    Rows that are too short or lack a linked headline are skipped. A date or
    time that does not parse aborts the whole listing with
    :class:`~clarion.errors.MalformedTimestampError`.
    """

    soup = BeautifulSoup(html, "html.parser")
    summaries: List[ArticleSummary] = []
    for row in soup.select("tbody tr"):
        summary = _parse_row(row, ticker)
        if summary is not None:
            summaries.append(summary)

    LOGGER.info("Extracted %d announcements for %s", len(summaries), ticker)
    return summaries


def _parse_row(row: Tag, ticker: str) -> Optional[ArticleSummary]:
    cells = row.find_all("td")
    if len(cells) < MIN_CELLS:
        LOGGER.debug("Skipping row with %d cells", len(cells))
        return None

    published_utc = parse_listing_timestamp(
        cells[0].get_text().strip(),
        cells[1].get_text().strip(),
    )

    link = cells[3].find("a")
    if link is None:
        LOGGER.debug("Skipping row without headline link")
        return None
    href = link.get("href")
    if not href:
        LOGGER.debug("Skipping row whose link has no href")
        return None

    article_id = urlsplit(href).path.split("/")[-1]
    if not article_id:
        LOGGER.debug("Skipping row with no article id in %s", href)
        return None

    return ArticleSummary(
        source_article_id=article_id,
        source=SOURCE_NAME,
        ticker=ticker,
        headline=link.get_text().strip(),
        published_utc=published_utc,
        url=absolute_url(href),
    )


def absolute_url(href: str) -> str:
    """Resolve a listing href against the site origin."""
    if urlsplit(href).scheme:
        return href
    if not href.startswith("/"):
        href = f"/{href}"
    return f"{BASE_URL}{href}"
