"""Public entry point for retrieving announcements."""

from __future__ import annotations

from typing import List, Optional

from .config import Config, load_config
from .fetchers import ArticleProvider, InvestegateProvider
from .models import Article, ArticleSummary


class ClarionClient:
    def __init__(self, provider: ArticleProvider) -> None:
        self._provider = provider

    @classmethod
    def create(cls, config: Optional[Config] = None) -> "ClarionClient":
        """Return a client backed by the Investegate provider."""
        return cls(InvestegateProvider(config=config or load_config()))

    def get_articles(self, ticker: str) -> List[ArticleSummary]:
        """List the announcements published for ``ticker``, in the order the site lists them."""
        return self._provider.get_articles(ticker)

    def get_article(self, source_article_id: str) -> Article:
        """Fetch the full announcement identified by a summary's ``source_article_id``."""
        return self._provider.get_article(source_article_id)


__all__ = ["ClarionClient"]
