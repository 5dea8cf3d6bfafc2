from __future__ import annotations

import os
import tomllib
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .errors import ConfigError
from .models import DocumentConfig

if TYPE_CHECKING:
    from pathlib import Path

_BASE_URL_ENV = "SITEMAP_BASE_URL"


def _parse_sitemap_table(data: dict[str, Any]) -> dict[str, Any]:
    table = data.get("sitemap", {})
    if not isinstance(table, dict):
        msg = "sitemap must be a table"
        raise ConfigError(msg)
    raw = dict(table)
    base_url = os.environ.get(_BASE_URL_ENV)
    if base_url:
        raw["base_url"] = base_url
    return raw


def load_config(path: Path) -> DocumentConfig:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = "toml parse error"
        raise ConfigError(msg) from exc
    except OSError as exc:
        msg = f"config not readable: {path}"
        raise ConfigError(msg) from exc

    raw = _parse_sitemap_table(data)
    try:
        return DocumentConfig.from_raw(raw)
    except ValidationError as exc:
        msg = f"invalid sitemap config: {path}"
        raise ConfigError(msg) from exc
