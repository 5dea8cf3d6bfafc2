"""Errors raised by sitemap documents."""

from __future__ import annotations


class SitemapError(Exception):
    """Base class for every sitemap document failure."""


class InvalidArgumentError(SitemapError, ValueError):
    """Raised when a parameter or field value is rejected."""


class AlreadyExistsError(SitemapError):
    """Raised when a loc is already registered in a document."""

    def __init__(self, loc: str, document: str | None = None) -> None:
        self.loc = loc
        self.document = document
        if document is None:
            super().__init__(f"url already exists: {loc}")
        else:
            super().__init__(f"url already exists in {document}: {loc}")


class NotValidatedError(SitemapError):
    """Raised when a file violates the sitemap schema."""


class NotLoadedError(SitemapError):
    """Raised when a file cannot be read or parsed."""


class NotFlushedError(SitemapError):
    """Raised when a document cannot be written."""
