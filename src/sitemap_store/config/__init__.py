from .errors import ConfigError
from .loader import load_config
from .models import DEFAULT_FILENAME_PREFIX, MAX_URLS_PER_SITEMAP, DocumentConfig

__all__ = [
    "DEFAULT_FILENAME_PREFIX",
    "MAX_URLS_PER_SITEMAP",
    "ConfigError",
    "DocumentConfig",
    "load_config",
]
