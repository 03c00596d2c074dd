"""Extraction of a full announcement from its detail page.

Detail pages come in several historical layouts. Each known layout is a
:class:`BodyFormat`: a ``locate`` function that finds the node the layout is
anchored on (or ``None`` when the page is not in that layout) and an
``extract`` function that turns that node into body markup and text. Formats
are tried in order and the first one that locates its anchor wins.
"""

from __future__ import annotations

import copy
import logging
from datetime import datetime, timezone
from typing import Callable, NamedTuple, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from .config import SOURCE_NAME
from .errors import HeadlineNotFoundError, UnrecognizedContentFormatError
from .models import Article
from .text import normalize_whitespace

LOGGER = logging.getLogger(__name__)

CONTENT_CLASS = "news-window"
# Substrings of the src of the tracking pixel injected by the RNS distribution network.
TRACKER_MARKERS = ("tracker", "rns-distribution")


class BodyFormat(NamedTuple):
    name: str
    locate: Callable[[BeautifulSoup], Optional[Tag]]
    extract: Callable[[Tag], Tuple[str, str]]


def _find_content(soup: BeautifulSoup) -> Optional[Tag]:
    return soup.find(class_=CONTENT_CLASS)


def _is_tracker_src(src: Optional[str]) -> bool:
    return bool(src) and any(marker in src for marker in TRACKER_MARKERS)


def _find_tracker(soup: BeautifulSoup) -> Optional[Tag]:
    content = _find_content(soup)
    if content is None:
        return None
    return content.find("img", src=_is_tracker_src)


def detached_tail(node: Tag) -> Tag:
    """Return a new ``div`` holding copies of the element siblings after ``node``.

    ``node`` and anything before it are left out, and the source tree is not
    modified.
    """
    siblings = node.parent.find_all(recursive=False)
    start = next(index for index, sibling in enumerate(siblings) if sibling is node)

    fragment = BeautifulSoup("<div></div>", "html.parser").div
    for sibling in siblings[start:]:
        fragment.append(copy.copy(sibling))
    fragment.contents[0].decompose()
    return fragment


def _body_after_tracker(tracker: Tag) -> Tuple[str, str]:
    body = detached_tail(tracker)
    return body.decode_contents(), normalize_whitespace(body.get_text())


def _body_of_container(content: Tag) -> Tuple[str, str]:
    return content.decode_contents(), normalize_whitespace(content.get_text())


BODY_FORMATS: Tuple[BodyFormat, ...] = (
    BodyFormat("tracker", _find_tracker, _body_after_tracker),
    BodyFormat("news-window", _find_content, _body_of_container),
)


def parse_article(html: str, source_article_id: str, url: str) -> Article:
    """Build an :class:`Article` from a detail page.

    Raises :class:`HeadlineNotFoundError` when the page has no ``h1`` and
    :class:`UnrecognizedContentFormatError` when no known layout matches.
    """

    soup = BeautifulSoup(html, "html.parser")

    heading = soup.find("h1")
    if heading is None:
        raise HeadlineNotFoundError()
    headline = normalize_whitespace(heading.get_text())

    for body_format in BODY_FORMATS:
        anchor = body_format.locate(soup)
        if anchor is None:
            LOGGER.debug("Article %s is not in %s format", source_article_id, body_format.name)
            continue
        body_html, body_text = body_format.extract(anchor)
        LOGGER.info("Extracted article %s using %s format", source_article_id, body_format.name)
        return Article(
            source_article_id=source_article_id,
            source=SOURCE_NAME,
            headline=headline,
            retrieved_utc=datetime.now(timezone.utc),
            url=url,
            body_html=body_html,
            body_text=body_text,
        )

    raise UnrecognizedContentFormatError()
