from __future__ import annotations

from typing import TYPE_CHECKING

from sitemap_store.documents.base import Document, Flushable, Loadable, Mutable
from sitemap_store.documents.index import SitemapIndexDocument, shard_filename
from sitemap_store.documents.sitemap import SitemapDocument

if TYPE_CHECKING:
    from pathlib import Path

    from sitemap_store.config import DocumentConfig


def open_document(path: Path | str, config: DocumentConfig | None = None, *, index: bool = False) -> Document:
    """Construct the document kind for ``path``; nothing is read until ``load``."""
    if index:
        return SitemapIndexDocument(path, config)
    return SitemapDocument(path, config)


__all__ = [
    "Document",
    "Flushable",
    "Loadable",
    "Mutable",
    "SitemapDocument",
    "SitemapIndexDocument",
    "open_document",
    "shard_filename",
]
