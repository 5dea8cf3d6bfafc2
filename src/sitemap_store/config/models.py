from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sitemap_store.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Mapping

MAX_URLS_PER_SITEMAP = 50_000
DEFAULT_FILENAME_PREFIX = "sitemap"


def _is_valid_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme) and bool(parsed.netloc)


class DocumentConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str | None = None
    max_urls: int = Field(default=MAX_URLS_PER_SITEMAP, ge=1, le=MAX_URLS_PER_SITEMAP)
    filename_prefix: str = DEFAULT_FILENAME_PREFIX
    validate_on_load: bool = True

    @field_validator("base_url")
    @classmethod
    def _validate_base_url(cls, value: str | None) -> str | None:
        if value is None:
            return value
        if not _is_valid_url(value):
            msg = "must be a valid URL"
            raise ValueError(msg)
        return value

    @field_validator("filename_prefix")
    @classmethod
    def _validate_filename_prefix(cls, value: str) -> str:
        if value == "":
            msg = "is required"
            raise ValueError(msg)
        if "/" in value:
            msg = "must not contain '/'"
            raise ValueError(msg)
        return value

    def with_max_urls(self, max_urls: int) -> DocumentConfig:
        """Return a copy with a new capacity, rejecting values outside ``[1, 50000]``."""
        try:
            return DocumentConfig.model_validate({**self.model_dump(), "max_urls": max_urls})
        except ValidationError as exc:
            msg = f"max_urls must be between 1 and {MAX_URLS_PER_SITEMAP}, got {max_urls!r}"
            raise InvalidArgumentError(msg) from exc

    @classmethod
    def from_raw(cls, data: Mapping[str, object]) -> DocumentConfig:
        return cls.model_validate(data)
