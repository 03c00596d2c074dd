"""Configuration utilities for the Clarion announcement reader."""

from __future__ import annotations

import os
from dataclasses import dataclass

BASE_URL = "https://www.investegate.co.uk"
SOURCE_NAME = "investegate"
SITE_TIMEZONE = "Europe/London"
LISTING_PAGE_SIZE = 1000

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"


@dataclass(frozen=True)
class Config:
    """Runtime configuration values for the HTTP transport."""

    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


def listing_url(ticker: str) -> str:
    """Return the announcement listing URL for a ticker."""
    return f"{BASE_URL}/company/{ticker}?perPage={LISTING_PAGE_SIZE}"


def article_url(source_article_id: str) -> str:
    """Return the detail page URL for an announcement."""
    return f"{BASE_URL}/announcement/{source_article_id}"


def load_config() -> Config:
    """Load configuration from environment variables and defaults."""

    timeout = os.getenv("CLARION_TIMEOUT")
    user_agent = os.getenv("CLARION_USER_AGENT")
    return Config(
        timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        user_agent=user_agent or DEFAULT_USER_AGENT,
    )
