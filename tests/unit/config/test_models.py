from __future__ import annotations

import pytest
from pydantic import ValidationError

from sitemap_store.config import MAX_URLS_PER_SITEMAP, DocumentConfig
from sitemap_store.errors import InvalidArgumentError


def test_defaults() -> None:
    config = DocumentConfig()

    assert config.base_url is None
    assert config.max_urls == MAX_URLS_PER_SITEMAP
    assert config.filename_prefix == "sitemap"
    assert config.validate_on_load is True


@pytest.mark.parametrize("max_urls", [0, -1, MAX_URLS_PER_SITEMAP + 1])
def test_max_urls_outside_protocol_range_is_rejected(max_urls: int) -> None:
    with pytest.raises(ValidationError):
        DocumentConfig(max_urls=max_urls)


@pytest.mark.parametrize("max_urls", [1, MAX_URLS_PER_SITEMAP])
def test_max_urls_bounds_are_accepted(max_urls: int) -> None:
    assert DocumentConfig(max_urls=max_urls).max_urls == max_urls


def test_with_max_urls_returns_validated_copy() -> None:
    config = DocumentConfig(base_url="https://example.com")

    updated = config.with_max_urls(10)

    assert updated.max_urls == 10
    assert updated.base_url == "https://example.com"
    assert config.max_urls == MAX_URLS_PER_SITEMAP


def test_with_max_urls_rejects_ceiling_overflow() -> None:
    with pytest.raises(InvalidArgumentError, match="max_urls"):
        DocumentConfig().with_max_urls(MAX_URLS_PER_SITEMAP + 1)


@pytest.mark.parametrize("prefix", ["", "nested/sitemap"])
def test_invalid_filename_prefix_is_rejected(prefix: str) -> None:
    with pytest.raises(ValidationError):
        DocumentConfig(filename_prefix=prefix)


def test_invalid_base_url_is_rejected() -> None:
    with pytest.raises(ValidationError):
        DocumentConfig(base_url="example")


def test_config_is_frozen() -> None:
    config = DocumentConfig()

    with pytest.raises(ValidationError):
        config.max_urls = 10  # type: ignore[misc]
