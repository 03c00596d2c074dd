"""Command-line entry point for reading RNS announcements."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from .client import ClarionClient
from .config import load_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Read company announcements from Investegate")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the JSON result to this path instead of stdout",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    articles = commands.add_parser("articles", help="List announcements for a ticker")
    articles.add_argument("ticker")

    article = commands.add_parser("article", help="Fetch a single announcement")
    article.add_argument("source_article_id")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    client = ClarionClient.create(load_config())
    if args.command == "articles":
        payload = [summary.to_dict() for summary in client.get_articles(args.ticker)]
    else:
        payload = client.get_article(args.source_article_id).to_dict()

    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if args.output:
        args.output.write_text(text + "\n", encoding="utf-8")
    else:
        print(text)


if __name__ == "__main__":
    main()
