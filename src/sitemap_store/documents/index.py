"""Sitemap index that shards an unbounded URL stream over capacity-bound sitemaps."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from sitemap_store.config import DocumentConfig
from sitemap_store.documents.sitemap import SitemapDocument
from sitemap_store.errors import AlreadyExistsError, InvalidArgumentError, NotLoadedError
from sitemap_store.files import GZIP_SUFFIX, is_gzip
from sitemap_store.models import SitemapReference, Url, build_loc, utc_now
from sitemap_store.observability import get_logger
from sitemap_store.xml import Schema, Validator, iter_references, write_sitemapindex

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

logger = get_logger(__name__)

_VALIDATOR = Validator(Schema.SITEMAPINDEX)
_SITEMAP_SUFFIX = ".xml"


def shard_filename(loc: str) -> str:
    """Return the filename component of a shard loc."""
    _, _, filename = loc.rpartition("/")
    return filename


class SitemapIndexDocument:
    """A ``sitemapindex`` file plus the shard sitemaps it references.

    The index owns its shards: they are created, loaded and flushed only
    through it, and each shard's reference ``lastmod`` is refreshed whenever
    one of its entries is added or modified. ``load`` discards any unflushed
    mutations.
    """

    def __init__(
        self,
        path: Path | str,
        config: DocumentConfig | None = None,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._path = Path(path)
        self._config = config or DocumentConfig()
        self._clock = clock
        self._references: dict[str, SitemapReference] = {}
        self._shards: dict[str, SitemapDocument] = {}
        self._dirty = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def config(self) -> DocumentConfig:
        return self._config

    def __len__(self) -> int:
        return sum(len(shard) for shard in self._shards.values())

    def __contains__(self, url: object) -> bool:
        if not isinstance(url, (Url, str)):
            return False
        return self.contains_url(url)

    def references(self) -> list[SitemapReference]:
        return [reference.model_copy() for reference in self._references.values()]

    def shard_paths(self) -> dict[str, Path]:
        return {loc: shard.path for loc, shard in self._shards.items()}

    def urls(self) -> list[Url]:
        return [url for shard in self._shards.values() for url in shard.urls()]

    def set_max_urls(self, max_urls: int) -> None:
        self._config = self._config.with_max_urls(max_urls)
        for shard in self._shards.values():
            shard.set_max_urls(max_urls)

    def load(self, validate: bool | None = None) -> None:
        if validate is None:
            validate = self._config.validate_on_load
        if not self._path.exists():
            logger.debug("index_load_skipped", path=str(self._path), reason="missing")
            return
        if validate:
            _VALIDATOR.validate(self._path)

        references: dict[str, SitemapReference] = {}
        for reference in iter_references(self._path):
            if reference.loc in references:
                logger.warning("duplicate_loc_in_file", path=str(self._path), loc=reference.loc)
            references[reference.loc] = reference

        shards: dict[str, SitemapDocument] = {}
        for loc in references:
            filename = shard_filename(loc)
            if not filename:
                msg = f"{self._path}: cannot derive a shard filename from {loc}"
                raise NotLoadedError(msg)
            shard = SitemapDocument(self._path.parent / filename, self._config)
            shard.load(validate)
            shards[loc] = shard

        if self._dirty:
            logger.debug("unflushed_changes_discarded", path=str(self._path), shards=len(self._shards))
        self._references = references
        self._shards = shards
        self._dirty = False
        logger.info("index_loaded", path=str(self._path), shards=len(shards), urls=len(self))

    def create_url(self, raw: str) -> Url:
        return Url.of(build_loc(raw, self._config.base_url))

    def contains_url(self, url: Url | str) -> bool:
        return any(shard.contains_url(url) for shard in self._shards.values())

    def add_url(self, url: Url | str) -> bool:
        """Place ``url`` in the first shard with spare capacity, creating a shard if none has room.

        Raises ``AlreadyExistsError`` if any shard already holds the loc.
        """
        if url is None:
            msg = "url must not be None"
            raise InvalidArgumentError(msg)
        if isinstance(url, str):
            url = self.create_url(url)

        for shard in self._shards.values():
            if shard.contains_url(url):
                raise AlreadyExistsError(url.loc, shard.path.name)

        self._dirty = True
        for loc, shard in self._shards.items():
            if shard.add_url(url):
                self._references[loc].set_lastmod(self._clock())
                return True

        shard = self._create_shard()
        shard.add_url(url)
        return True

    def modify_url(self, url: Url) -> bool:
        if url is None:
            msg = "url must not be None"
            raise InvalidArgumentError(msg)
        for loc, shard in self._shards.items():
            if shard.modify_url(url):
                self._references[loc].set_lastmod(self._clock())
                self._dirty = True
                return True
        return False

    def flush(self) -> None:
        """Write the index, then every shard in order, and clear only once all are written.

        A failing shard aborts the remaining ones. Files already written stay
        written, and every registry keeps its entries so ``flush`` can be retried.
        """
        write_sitemapindex(self._path, self._references.values())
        for shard in self._shards.values():
            shard.write()
        count = len(self._references)
        urls = len(self)
        self._references = {}
        self._shards = {}
        self._dirty = False
        logger.info("index_flushed", path=str(self._path), shards=count, urls=urls)

    def _create_shard(self) -> SitemapDocument:
        number = len(self._shards) + 1
        filename = self._shard_filename(number)
        loc = self._shard_loc(filename)
        used_paths = {shard.path for shard in self._shards.values()}
        while loc in self._references or self._path.parent / filename in used_paths:
            number += 1
            filename = self._shard_filename(number)
            loc = self._shard_loc(filename)

        shard = SitemapDocument(self._path.parent / filename, self._config)
        self._references[loc] = SitemapReference.of(loc, lastmod=self._clock())
        self._shards[loc] = shard
        logger.info("shard_created", index=str(self._path), shard=filename, loc=loc)
        return shard

    def _shard_filename(self, number: int) -> str:
        filename = f"{self._config.filename_prefix}{number}{_SITEMAP_SUFFIX}"
        if is_gzip(self._path):
            filename += GZIP_SUFFIX
        return filename

    def _shard_loc(self, filename: str) -> str:
        base_url = self._config.base_url
        if not base_url:
            return filename
        separator = "" if base_url.endswith("/") else "/"
        return f"{base_url}{separator}{filename}"
