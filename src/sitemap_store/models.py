"""Sitemap entry models.

``Url`` is a ``<url>`` entry of a ``urlset``; ``SitemapReference`` is a
``<sitemap>`` entry of a ``sitemapindex``. Both are keyed by ``loc``, which
cannot be reassigned after construction.
"""

from __future__ import annotations

import re
from contextlib import contextmanager
from datetime import UTC, date, datetime
from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sitemap_store.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterator

_TZD_PATTERN = re.compile(r"(\+\d{2}:\d{2}|-\d{2}:\d{2}|Z)")
_XML_ILLEGAL_PATTERN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


class ChangeFreq(StrEnum):
    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"])
        parts.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(parts)


@contextmanager
def invalid_argument() -> Iterator[None]:
    """Re-raise pydantic validation failures as ``InvalidArgumentError``."""
    try:
        yield
    except ValidationError as exc:
        raise InvalidArgumentError(_describe(exc)) from exc


def _check_loc(value: str) -> str:
    if not value or not value.strip():
        msg = "must not be empty"
        raise ValueError(msg)
    if _XML_ILLEGAL_PATTERN.search(value):
        msg = "must not contain characters that are illegal in XML"
        raise ValueError(msg)
    return value


def _normalize_lastmod(value: date | None) -> date | None:
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=UTC, microsecond=0)
    return value


class Url(BaseModel):
    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    loc: str = Field(frozen=True)
    lastmod: datetime | date | None = None
    changefreq: ChangeFreq | None = None
    priority: float | None = Field(default=None, ge=0.0, le=1.0)

    @field_validator("loc")
    @classmethod
    def _validate_loc(cls, value: str) -> str:
        return _check_loc(value)

    @field_validator("lastmod")
    @classmethod
    def _validate_lastmod(cls, value: date | None) -> date | None:
        return _normalize_lastmod(value)

    @classmethod
    def of(
        cls,
        loc: str,
        *,
        lastmod: date | None = None,
        changefreq: ChangeFreq | str | None = None,
        priority: float | None = None,
    ) -> Url:
        with invalid_argument():
            return cls(loc=loc, lastmod=lastmod, changefreq=changefreq, priority=priority)

    def set_lastmod(self, value: date | None) -> None:
        with invalid_argument():
            self.lastmod = value

    def set_changefreq(self, value: ChangeFreq | str | None) -> None:
        with invalid_argument():
            self.changefreq = value

    def set_priority(self, value: float | None) -> None:
        with invalid_argument():
            self.priority = value


class SitemapReference(BaseModel):
    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    loc: str = Field(frozen=True)
    lastmod: datetime | date | None = None

    @field_validator("loc")
    @classmethod
    def _validate_loc(cls, value: str) -> str:
        return _check_loc(value)

    @field_validator("lastmod")
    @classmethod
    def _validate_lastmod(cls, value: date | None) -> date | None:
        return _normalize_lastmod(value)

    @classmethod
    def of(cls, loc: str, *, lastmod: date | None = None) -> SitemapReference:
        with invalid_argument():
            return cls(loc=loc, lastmod=lastmod)

    def set_lastmod(self, value: date | None) -> None:
        with invalid_argument():
            self.lastmod = value


def build_loc(raw: str | None, base_url: str | None) -> str:
    """Prefix ``raw`` with ``base_url`` unless it already starts with it."""
    if raw is None or raw == "":
        msg = "loc must not be empty"
        raise InvalidArgumentError(msg)
    if base_url and not raw.startswith(base_url):
        return base_url + raw
    return raw


def parse_lastmod(value: str) -> date:
    """Parse a W3C datetime; a timezone designator selects timestamp parsing."""
    if _TZD_PATTERN.search(value):
        return datetime.fromisoformat(value)
    return date.fromisoformat(value)


def format_lastmod(value: date) -> str:
    return value.isoformat()


def parse_priority(value: str) -> float:
    return float(value)


def format_priority(value: float) -> str:
    text = f"{value:.4f}".rstrip("0")
    if text.endswith("."):
        text += "0"
    return text


def utc_now() -> datetime:
    return datetime.now(UTC).replace(microsecond=0)
