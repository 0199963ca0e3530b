"""Failure classes raised while fetching and scraping AtCoder pages."""
from __future__ import annotations

from typing import Any


class ScrapeError(Exception):
    """Base class for every failure surfaced by the client."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class TransportError(ScrapeError):
    """The document could not be fetched (network error or non-2xx status)."""

    def __init__(self, message: str, *, url: str = '', status_code: int | None = None,
                 context: dict[str, Any] | None = None):
        super().__init__(message, context=context)
        self.url = url
        self.status_code = status_code


class HtmlParseError(ScrapeError):
    """An expected element or attribute is missing from the page."""


class ValueParseError(HtmlParseError):
    """Text was found but does not convert to the expected type."""
