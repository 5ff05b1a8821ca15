"""Results of advancing through a streamed source archive."""

from __future__ import annotations

import tarfile
import zlib
from dataclasses import dataclass
from typing import IO, Optional, Union

import urllib3

# Faults raised while pulling bytes through the HTTP body, gunzip and tar stages.
STREAM_ERRORS = (tarfile.TarError, OSError, EOFError, zlib.error, urllib3.exceptions.HTTPError)


@dataclass(slots=True)
class ArchiveEntry:
    """A regular file in the archive; ``reader`` is only valid until the next step."""

    name: str
    reader: IO[bytes]


@dataclass(slots=True)
class ArchiveExhausted:
    """End of the archive, either clean or caused by ``fault``."""

    fault: Optional[BaseException] = None


ArchiveStep = Union[ArchiveEntry, ArchiveExhausted]


__all__ = ["ArchiveEntry", "ArchiveExhausted", "ArchiveStep", "STREAM_ERRORS"]
