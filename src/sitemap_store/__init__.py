"""In-memory, file-backed sitemap and sitemap index documents."""

from sitemap_store.config import MAX_URLS_PER_SITEMAP, ConfigError, DocumentConfig, load_config
from sitemap_store.documents import Document, SitemapDocument, SitemapIndexDocument, open_document
from sitemap_store.errors import (
    AlreadyExistsError,
    InvalidArgumentError,
    NotFlushedError,
    NotLoadedError,
    NotValidatedError,
    SitemapError,
)
from sitemap_store.models import ChangeFreq, SitemapReference, Url

__all__ = [
    "MAX_URLS_PER_SITEMAP",
    "AlreadyExistsError",
    "ChangeFreq",
    "ConfigError",
    "Document",
    "DocumentConfig",
    "InvalidArgumentError",
    "NotFlushedError",
    "NotLoadedError",
    "NotValidatedError",
    "SitemapDocument",
    "SitemapError",
    "SitemapIndexDocument",
    "SitemapReference",
    "Url",
    "load_config",
    "open_document",
]
