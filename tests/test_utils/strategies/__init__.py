from __future__ import annotations

from tests.test_utils.strategies.url import loc_strategy, path_strategy

__all__ = [
    "loc_strategy",
    "path_strategy",
]
