"""Test helpers."""

from tests.test_utils.helpers.documents import FixedClock, copy_fixture, corrupt_gzip_body, write_gzip
from tests.test_utils.helpers.fixture import (
    fixture_path,
    read_fixture_bytes,
)

__all__ = [
    "FixedClock",
    "copy_fixture",
    "corrupt_gzip_body",
    "fixture_path",
    "read_fixture_bytes",
    "write_gzip",
]
