from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from sitemap_store.config import DocumentConfig
from sitemap_store.errors import AlreadyExistsError, InvalidArgumentError
from sitemap_store.models import Url, build_loc
from sitemap_store.observability import get_logger
from sitemap_store.xml import Schema, Validator, iter_urls, write_urlset

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = get_logger(__name__)

_VALIDATOR = Validator(Schema.URLSET)


class SitemapDocument:
    """A ``urlset`` file held in memory as an insertion-ordered registry keyed by loc.

    ``load`` replaces the registry with the file contents, ``flush`` writes the
    registry back and empties it. Mutations never touch the file.
    """

    def __init__(self, path: Path | str, config: DocumentConfig | None = None) -> None:
        self._path = Path(path)
        self._config = config or DocumentConfig()
        self._urls: dict[str, Url] = {}
        self._dirty = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def config(self) -> DocumentConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._urls)

    def __iter__(self) -> Iterator[Url]:
        return iter(list(self._urls.values()))

    def __contains__(self, url: object) -> bool:
        if not isinstance(url, (Url, str)):
            return False
        return self.contains_url(url)

    def urls(self) -> list[Url]:
        return list(self._urls.values())

    def get_url(self, loc: str) -> Url | None:
        return self._urls.get(self._loc_of(loc))

    def is_full(self) -> bool:
        return len(self._urls) >= self._config.max_urls

    def set_max_urls(self, max_urls: int) -> None:
        self._config = self._config.with_max_urls(max_urls)

    def load(self, validate: bool | None = None) -> None:
        if validate is None:
            validate = self._config.validate_on_load
        if not self._path.exists():
            logger.debug("sitemap_load_skipped", path=str(self._path), reason="missing")
            return
        if validate:
            _VALIDATOR.validate(self._path)

        staged: dict[str, Url] = {}
        for url in iter_urls(self._path):
            if url.loc in staged:
                logger.warning("duplicate_loc_in_file", path=str(self._path), loc=url.loc)
            staged[url.loc] = url

        if self._dirty:
            logger.debug("unflushed_changes_discarded", path=str(self._path), urls=len(self._urls))
        self._urls = staged
        self._dirty = False
        logger.info("sitemap_loaded", path=str(self._path), urls=len(staged), validated=validate)

    def create_url(self, raw: str) -> Url:
        return Url.of(build_loc(raw, self._config.base_url))

    def add_url(self, url: Url | str) -> bool:
        """Insert ``url``; return ``False`` without mutation when the document is full."""
        url = self._coerce(url)
        if url.loc in self._urls:
            raise AlreadyExistsError(url.loc, self._path.name)
        if self.is_full():
            return False
        self._urls[url.loc] = url
        self._dirty = True
        return True

    def modify_url(self, url: Url) -> bool:
        if url is None:
            msg = "url must not be None"
            raise InvalidArgumentError(msg)
        if url.loc not in self._urls:
            return False
        self._urls[url.loc] = url
        self._dirty = True
        return True

    def delete_url(self, url: Url | str) -> bool:
        loc = self._loc_of(url)
        if self._urls.pop(loc, None) is None:
            return False
        self._dirty = True
        return True

    def contains_url(self, url: Url | str) -> bool:
        return self._loc_of(url) in self._urls

    def write(self) -> None:
        """Write the registry to ``path`` without clearing it."""
        write_urlset(self._path, self._urls.values())

    def clear(self) -> None:
        self._urls = {}
        self._dirty = False

    def flush(self) -> None:
        self.write()
        count = len(self._urls)
        self.clear()
        logger.info("sitemap_flushed", path=str(self._path), urls=count)

    def _coerce(self, url: Url | str | None) -> Url:
        if url is None:
            msg = "url must not be None"
            raise InvalidArgumentError(msg)
        if isinstance(url, str):
            return self.create_url(url)
        return url

    def _loc_of(self, url: Url | str | None) -> str:
        if isinstance(url, Url):
            return url.loc
        return build_loc(url, self._config.base_url)
