"""XSD validation of sitemap files against the bundled sitemaps.org schemas."""

from __future__ import annotations

import zlib
from enum import StrEnum
from functools import cache
from importlib.resources import files
from typing import TYPE_CHECKING

from lxml import etree

from sitemap_store.errors import NotValidatedError
from sitemap_store.files import open_for_read

if TYPE_CHECKING:
    from pathlib import Path


class Schema(StrEnum):
    URLSET = "sitemap.xsd"
    SITEMAPINDEX = "siteindex.xsd"


@cache
def _load_schema(schema: Schema) -> etree.XMLSchema:
    resource = files("sitemap_store.xml").joinpath("schemas", schema.value)
    with resource.open("rb") as handle:
        return etree.XMLSchema(etree.parse(handle))


class Validator:
    def __init__(self, schema: Schema) -> None:
        self._schema = schema

    def validate(self, path: Path) -> None:
        schema = _load_schema(self._schema)
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            with open_for_read(path) as stream:
                document = etree.parse(stream, parser)
        except (OSError, EOFError, zlib.error, etree.XMLSyntaxError) as exc:
            msg = f"{path}: {exc}"
            raise NotValidatedError(msg) from exc

        if not schema.validate(document):
            error = schema.error_log.last_error
            msg = f"{path}: line {error.line}: {error.message}"
            raise NotValidatedError(msg)
