"""Serialize registries into ``urlset`` and ``sitemapindex`` documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from lxml import etree

from sitemap_store.errors import NotFlushedError
from sitemap_store.files import atomic_write
from sitemap_store.models import format_lastmod, format_priority

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from sitemap_store.models import SitemapReference, Url

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

T = TypeVar("T")


def _qname(name: str) -> str:
    return f"{{{SITEMAP_NS}}}{name}"


def _write_field(xf: etree.xmlfile, name: str, value: str) -> None:
    xf.write("\n    ")
    with xf.element(_qname(name)):
        xf.write(value)


def _write_url(xf: etree.xmlfile, url: Url) -> None:
    with xf.element(_qname("url")):
        _write_field(xf, "loc", url.loc)
        if url.lastmod is not None:
            _write_field(xf, "lastmod", format_lastmod(url.lastmod))
        if url.changefreq is not None:
            _write_field(xf, "changefreq", url.changefreq.value)
        if url.priority is not None:
            _write_field(xf, "priority", format_priority(url.priority))
        xf.write("\n  ")


def _write_reference(xf: etree.xmlfile, reference: SitemapReference) -> None:
    with xf.element(_qname("sitemap")):
        _write_field(xf, "loc", reference.loc)
        if reference.lastmod is not None:
            _write_field(xf, "lastmod", format_lastmod(reference.lastmod))
        xf.write("\n  ")


def _write_document(path: Path, root_tag: str, entries: Iterable[T], write_entry: Callable[[etree.xmlfile, T], None]) -> None:
    try:
        with atomic_write(path) as stream, etree.xmlfile(stream, encoding="utf-8") as xf:
            xf.write_declaration()
            with xf.element(_qname(root_tag), nsmap={None: SITEMAP_NS}):
                for entry in entries:
                    xf.write("\n  ")
                    write_entry(xf, entry)
                xf.write("\n")
    except (OSError, ValueError, etree.LxmlError) as exc:
        msg = f"{path}: {exc}"
        raise NotFlushedError(msg) from exc


def write_urlset(path: Path, urls: Iterable[Url]) -> None:
    _write_document(path, "urlset", urls, _write_url)


def write_sitemapindex(path: Path, references: Iterable[SitemapReference]) -> None:
    _write_document(path, "sitemapindex", references, _write_reference)
