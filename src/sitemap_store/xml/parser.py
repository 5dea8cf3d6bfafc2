"""Streaming sitemap parsing."""

from __future__ import annotations

import zlib
from typing import TYPE_CHECKING

from lxml import etree

from sitemap_store.errors import NotLoadedError, SitemapError
from sitemap_store.files import open_for_read
from sitemap_store.models import ChangeFreq, SitemapReference, Url, parse_lastmod, parse_priority

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


def _local_name(tag: str) -> str:
    _, _, local = tag.rpartition("}")
    return local


def _release_element_memory(element: etree._Element) -> None:
    element.clear()
    parent = element.getparent()
    if parent is None:
        return
    while element.getprevious() is not None:
        del parent[0]


class Parser:
    """Yield one field mapping per entry element of a sitemap file.

    Field names are element local names, so namespaced and namespace-less
    documents parse the same way. Only ``fields`` are collected; empty values
    are skipped.
    """

    def __init__(self, root_tag: str, entry_tag: str, fields: tuple[str, ...]) -> None:
        self._root_tag = root_tag
        self._entry_tag = entry_tag
        self._fields = fields

    def iter_fields(self, path: Path) -> Iterator[dict[str, str]]:
        try:
            with open_for_read(path) as stream:
                yield from self._iter_stream(stream, path)
        except (OSError, EOFError, zlib.error, etree.XMLSyntaxError) as exc:
            msg = f"{path}: {exc}"
            raise NotLoadedError(msg) from exc

    def _iter_stream(self, stream: object, path: Path) -> Iterator[dict[str, str]]:
        context = etree.iterparse(
            stream,
            events=("start", "end"),
            resolve_entities=False,
            no_network=True,
            remove_comments=True,
            remove_pis=True,
        )
        root_seen = False
        for event, element in context:
            if not isinstance(element.tag, str):
                continue
            name = _local_name(element.tag)
            if not root_seen:
                if name != self._root_tag:
                    msg = f"{path}: expected <{self._root_tag}> root, found <{name}>"
                    raise NotLoadedError(msg)
                root_seen = True
                continue
            if event != "end" or name != self._entry_tag:
                continue

            fields: dict[str, str] = {}
            for child in element:
                if not isinstance(child.tag, str):
                    continue
                child_name = _local_name(child.tag)
                text = child.text.strip() if child.text else ""
                if child_name in self._fields and text:
                    fields[child_name] = text
            _release_element_memory(element)
            yield fields


_URLSET_PARSER = Parser("urlset", "url", ("loc", "lastmod", "changefreq", "priority"))
_SITEMAPINDEX_PARSER = Parser("sitemapindex", "sitemap", ("loc", "lastmod"))


def _require_loc(fields: dict[str, str], path: Path) -> str:
    loc = fields.get("loc")
    if loc is None:
        msg = f"{path}: entry without <loc>"
        raise NotLoadedError(msg)
    return loc


def iter_urls(path: Path) -> Iterator[Url]:
    for fields in _URLSET_PARSER.iter_fields(path):
        loc = _require_loc(fields, path)
        try:
            lastmod = parse_lastmod(fields["lastmod"]) if "lastmod" in fields else None
            changefreq = ChangeFreq(fields["changefreq"].lower()) if "changefreq" in fields else None
            priority = parse_priority(fields["priority"]) if "priority" in fields else None
            url = Url.of(loc, lastmod=lastmod, changefreq=changefreq, priority=priority)
        except (ValueError, SitemapError) as exc:
            msg = f"{path}: invalid entry {loc}: {exc}"
            raise NotLoadedError(msg) from exc
        yield url


def iter_references(path: Path) -> Iterator[SitemapReference]:
    for fields in _SITEMAPINDEX_PARSER.iter_fields(path):
        loc = _require_loc(fields, path)
        try:
            lastmod = parse_lastmod(fields["lastmod"]) if "lastmod" in fields else None
            reference = SitemapReference.of(loc, lastmod=lastmod)
        except (ValueError, SitemapError) as exc:
            msg = f"{path}: invalid entry {loc}: {exc}"
            raise NotLoadedError(msg) from exc
        yield reference
