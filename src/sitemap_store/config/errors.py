"""Errors raised while reading the ``[sitemap]`` configuration table."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when a sitemap configuration file cannot be read or is invalid."""
