"""Whitespace helpers for extracted text."""

from __future__ import annotations


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    return " ".join(text.split())
