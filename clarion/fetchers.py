"""Announcement providers that fetch pages and hand them to the extractors."""

from __future__ import annotations

import logging
from typing import List, Optional

import requests

from .config import Config, article_url, listing_url, load_config
from .detail import parse_article
from .listing import parse_listing
from .models import Article, ArticleSummary

LOGGER = logging.getLogger(__name__)


class ArticleProvider:
    """Abstract base class for source-specific providers."""

    name: str = "base"

    def get_articles(self, ticker: str) -> List[ArticleSummary]:
        raise NotImplementedError

    def get_article(self, source_article_id: str) -> Article:
        raise NotImplementedError


class InvestegateProvider(ArticleProvider):
    """Fetch RNS announcements from investegate.co.uk.

    HTTP failures are not caught here; ``requests`` exceptions reach the
    caller unchanged.
    """

    name = "investegate"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        config: Optional[Config] = None,
    ) -> None:
        self.config = config or load_config()
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = self.config.user_agent
        self.session = session

    def get_articles(self, ticker: str) -> List[ArticleSummary]:
        html = self._get(listing_url(ticker))
        return parse_listing(html, ticker)

    def get_article(self, source_article_id: str) -> Article:
        url = article_url(source_article_id)
        html = self._get(url)
        return parse_article(html, source_article_id, url)

    def _get(self, url: str) -> str:
        LOGGER.debug("%s: GET %s", self.name, url)
        response = self.session.get(url, timeout=self.config.timeout)
        response.raise_for_status()
        return response.text
