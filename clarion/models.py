"""Shared dataclasses for extracted announcements."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict


def _serialize(values: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: value.isoformat() if isinstance(value, datetime) else value
        for key, value in values.items()
    }


@dataclass(frozen=True)
class ArticleSummary:
    """One row of a ticker's announcement listing."""

    source_article_id: str
    source: str
    ticker: str
    headline: str
    published_utc: datetime
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return _serialize(asdict(self))


@dataclass(frozen=True)
class Article:
    """Full content of a single announcement page.

    ``body_html`` holds the announcement markup with the distribution
    tracker removed; ``body_text`` is the same region as plain text with
    whitespace collapsed.
    """

    source_article_id: str
    source: str
    headline: str
    retrieved_utc: datetime
    url: str
    body_html: str
    body_text: str

    def to_dict(self) -> Dict[str, Any]:
        return _serialize(asdict(self))
