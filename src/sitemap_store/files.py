"""Scoped file handles with gzip selected by filename suffix."""

from __future__ import annotations

import gzip
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import IO, TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

GZIP_SUFFIX = ".gz"


def is_gzip(path: Path) -> bool:
    return path.name.endswith(GZIP_SUFFIX)


@contextmanager
def open_for_read(path: Path) -> Iterator[IO[bytes]]:
    with path.open("rb") as raw:
        if is_gzip(path):
            with gzip.GzipFile(fileobj=raw, mode="rb") as stream:
                yield stream
        else:
            yield raw


@contextmanager
def atomic_write(path: Path) -> Iterator[IO[bytes]]:
    """Write to a temp file beside ``path`` and rename it into place on success.

    The destination is untouched if the body raises.
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as raw:
            if is_gzip(path):
                with gzip.GzipFile(filename=path.name.removesuffix(GZIP_SUFFIX), fileobj=raw, mode="wb") as stream:
                    yield stream
            else:
                yield raw
            raw.flush()
            os.fsync(raw.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
