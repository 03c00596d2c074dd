from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import pytest
import requests

DATA_DIR = Path(__file__).parent / "data"


@dataclass
class FakeResponse:
    text: str
    status_code: int = 200

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


@dataclass
class FakeSession:
    """Stands in for ``requests.Session``; serves one canned body for every GET."""

    body: str = ""
    status_code: int = 200
    error: Exception | None = None
    requests: list[dict[str, object]] = field(default_factory=list)

    def get(self, url: str, timeout: float | None = None) -> FakeResponse:
        self.requests.append({"url": url, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return FakeResponse(self.body, self.status_code)


@pytest.fixture
def load_article_html() -> Callable[[str], str]:
    def _load(article_id: str) -> str:
        return (DATA_DIR / "articles" / f"{article_id}.html").read_text(encoding="utf-8")

    return _load


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()
