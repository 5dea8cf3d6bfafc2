from __future__ import annotations

from datetime import date

import factory
from factory.base import Factory

from sitemap_store.models import ChangeFreq, SitemapReference, Url


class UrlFactory(Factory[Url]):
    class Meta:
        model = Url

    loc = factory.Sequence(lambda n: f"https://example.com/page-{n}")
    lastmod = date(2024, 1, 1)
    changefreq = ChangeFreq.WEEKLY
    priority = 0.5


class SitemapReferenceFactory(Factory[SitemapReference]):
    class Meta:
        model = SitemapReference

    loc = factory.Sequence(lambda n: f"https://example.com/sitemap{n + 1}.xml")
    lastmod = None
