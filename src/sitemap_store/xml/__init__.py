from sitemap_store.xml.parser import Parser, iter_references, iter_urls
from sitemap_store.xml.validator import Schema, Validator
from sitemap_store.xml.writer import SITEMAP_NS, write_sitemapindex, write_urlset

__all__ = [
    "SITEMAP_NS",
    "Parser",
    "Schema",
    "Validator",
    "iter_references",
    "iter_urls",
    "write_sitemapindex",
    "write_urlset",
]
