from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

import pytest

from sitemap_store.errors import NotLoadedError
from sitemap_store.models import ChangeFreq
from sitemap_store.xml import Parser, iter_references, iter_urls
from tests.test_utils.helpers import corrupt_gzip_body, fixture_path, read_fixture_bytes, write_gzip

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def test_iter_urls_yields_entries_in_document_order() -> None:
    urls = list(iter_urls(fixture_path("sitemap/urlset.xml")))

    assert [url.loc for url in urls] == [
        "https://example.com/",
        "https://example.com/posts/article-1",
        "https://example.com/posts/article-2",
    ]
    assert urls[0].lastmod == date(2024, 1, 15)
    assert urls[0].changefreq is ChangeFreq.DAILY


def test_iter_references_reads_loc_and_lastmod() -> None:
    references = list(iter_references(fixture_path("sitemap/index.xml")))

    assert [ref.loc for ref in references] == ["https://example.com/sitemap1.xml", "https://example.com/sitemap2.xml"]
    assert references[0].lastmod == datetime(2024, 1, 15, 10, tzinfo=UTC)


def test_parser_reads_gzip_by_suffix(tmp_path: Path) -> None:
    path = write_gzip(tmp_path / "sitemap.xml.gz", read_fixture_bytes("sitemap/urlset.xml"))

    assert len(list(iter_urls(path))) == 3


def test_parser_collects_only_requested_fields(tmp_path: Path) -> None:
    path = tmp_path / "sitemap.xml"
    path.write_text(
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"'
        ' xmlns:image="http://www.google.com/schemas/sitemap-image/1.1">'
        "<url><loc> https://example.com/a </loc><image:image><image:loc>https://example.com/a.png</image:loc></image:image>"
        "<changefreq>   </changefreq></url>"
        "</urlset>",
        encoding="utf-8",
    )

    fields = list(Parser("urlset", "url", ("loc", "changefreq")).iter_fields(path))

    assert fields == [{"loc": "https://example.com/a"}]


def test_changefreq_is_case_insensitive(tmp_path: Path) -> None:
    path = tmp_path / "sitemap.xml"
    path.write_text(
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
        "<url><loc>https://example.com/a</loc><changefreq>Monthly</changefreq></url>"
        "</urlset>",
        encoding="utf-8",
    )

    [url] = iter_urls(path)

    assert url.changefreq is ChangeFreq.MONTHLY


def test_entry_without_loc_raises(tmp_path: Path) -> None:
    path = tmp_path / "sitemap.xml"
    path.write_text("<urlset><url><priority>0.5</priority></url></urlset>", encoding="utf-8")

    with pytest.raises(NotLoadedError, match="loc"):
        list(iter_urls(path))


def test_lastmod_without_timezone_designator_must_be_a_date(tmp_path: Path) -> None:
    path = tmp_path / "sitemap.xml"
    path.write_text(
        "<urlset><url><loc>https://example.com/a</loc><lastmod>2024-01-15T10:00:00</lastmod></url></urlset>",
        encoding="utf-8",
    )

    with pytest.raises(NotLoadedError):
        list(iter_urls(path))


def _truncate(path: Path) -> Path:
    path.write_bytes(path.read_bytes()[:20])
    return path


@pytest.mark.parametrize("damage", [_truncate, corrupt_gzip_body], ids=["truncated", "corrupt_body"])
def test_damaged_gzip_raises(tmp_path: Path, damage: Callable[[Path], Path]) -> None:
    path = damage(write_gzip(tmp_path / "sitemap.xml.gz", read_fixture_bytes("sitemap/urlset.xml")))

    with pytest.raises(NotLoadedError):
        list(iter_urls(path))


def test_entity_expansion_is_disabled(tmp_path: Path) -> None:
    secret = tmp_path / "secret.txt"
    secret.write_text("top secret", encoding="utf-8")
    path = tmp_path / "sitemap.xml"
    path.write_text(
        f'<?xml version="1.0"?><!DOCTYPE urlset [<!ENTITY xxe SYSTEM "file://{secret}">]>'
        "<urlset><url><loc>https://example.com/&xxe;</loc></url></urlset>",
        encoding="utf-8",
    )

    locs = [url.loc for url in iter_urls(path)]

    assert all("top secret" not in loc for loc in locs)
