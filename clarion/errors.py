"""Errors raised while extracting announcements from page markup."""

from __future__ import annotations


class ClarionError(Exception):
    """Base class for extraction failures."""


class MalformedTimestampError(ClarionError, ValueError):
    """A listing row's date/time text does not match the expected layout."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Failed to parse date/time: {text}")
        self.text = text


class HeadlineNotFoundError(ClarionError):
    def __init__(self) -> None:
        super().__init__("Failed to find headline element")


class UnrecognizedContentFormatError(ClarionError):
    def __init__(self) -> None:
        super().__init__("Failed to parse article content - no recognized format found")


__all__ = [
    "ClarionError",
    "HeadlineNotFoundError",
    "MalformedTimestampError",
    "UnrecognizedContentFormatError",
]
