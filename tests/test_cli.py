import json
from datetime import datetime, timezone

from clarion import __main__ as cli
from clarion.models import Article, ArticleSummary

SUMMARY = ArticleSummary(
    source_article_id="test-12345",
    source="investegate",
    ticker="TEST",
    headline="Trading Update",
    published_utc=datetime(2026, 1, 15, 7, 0, tzinfo=timezone.utc),
    url="https://www.investegate.co.uk/announcement/test-12345",
)
ARTICLE = Article(
    source_article_id="test-12345",
    source="investegate",
    headline="Trading Update",
    retrieved_utc=datetime(2026, 1, 15, 8, 0, tzinfo=timezone.utc),
    url="https://www.investegate.co.uk/announcement/test-12345",
    body_html="<p>Body</p>",
    body_text="Body",
)


class FakeClient:
    def __init__(self):
        self.calls = []

    def get_articles(self, ticker):
        self.calls.append(("get_articles", ticker))
        return [SUMMARY]

    def get_article(self, source_article_id):
        self.calls.append(("get_article", source_article_id))
        return ARTICLE


def _install(monkeypatch):
    client = FakeClient()
    monkeypatch.setattr(cli.ClarionClient, "create", classmethod(lambda cls, config=None: client))
    return client


def test_articles_command_prints_json(monkeypatch, capsys):
    client = _install(monkeypatch)

    cli.main(["articles", "TEST"])

    assert client.calls == [("get_articles", "TEST")]
    payload = json.loads(capsys.readouterr().out)
    assert payload == [
        {
            "source_article_id": "test-12345",
            "source": "investegate",
            "ticker": "TEST",
            "headline": "Trading Update",
            "published_utc": "2026-01-15T07:00:00+00:00",
            "url": "https://www.investegate.co.uk/announcement/test-12345",
        }
    ]


def test_article_command_writes_output_file(monkeypatch, tmp_path):
    client = _install(monkeypatch)
    output = tmp_path / "article.json"

    cli.main(["--output", str(output), "article", "test-12345"])

    assert client.calls == [("get_article", "test-12345")]
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["body_text"] == "Body"
    assert payload["retrieved_utc"] == "2026-01-15T08:00:00+00:00"
