from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from sitemap_store.config import DocumentConfig
    from sitemap_store.models import Url


class Loadable(Protocol):
    def load(self, validate: bool | None = None) -> None: ...


class Mutable(Protocol):
    def create_url(self, raw: str) -> Url: ...

    def add_url(self, url: Url | str) -> bool: ...

    def modify_url(self, url: Url) -> bool: ...

    def contains_url(self, url: Url | str) -> bool: ...

    def set_max_urls(self, max_urls: int) -> None: ...


class Flushable(Protocol):
    def flush(self) -> None: ...


class Document(Loadable, Mutable, Flushable, Protocol):
    @property
    def path(self) -> Path: ...

    @property
    def config(self) -> DocumentConfig: ...

    def urls(self) -> list[Url]: ...
