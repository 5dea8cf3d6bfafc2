from tests.test_utils.factories.models import SitemapReferenceFactory, UrlFactory

__all__ = [
    "SitemapReferenceFactory",
    "UrlFactory",
]
