"""Line-oriented detection of exported Go interface declarations."""

from __future__ import annotations

import re
from typing import IO

from ..logging import get_logger
from ..models import Interface, InterfaceLocation, InterfaceMap
from ..paths import is_test_fixture, strip_archive_root
from .base import STREAM_ERRORS

LOGGER = get_logger(__name__)

DEFAULT_SOURCE_URL = "https://github.com/golang/go/blob/go{version}/{path}#L{line}"

# A declaration must fit on one line: `type Name interface {`. Anchored at the
# line start so commented-out declarations do not count.
INTERFACE_RE = re.compile(rb"\s*type\s+([A-Z]\w*)\s+interface\s+\{")


class SourceReadError(RuntimeError):
    """Raised when a source file cannot be read to the end."""


def source_link(version: str, path: str, line: int, *, template: str = DEFAULT_SOURCE_URL) -> str:
    """Return the web link to ``path`` at ``line`` for a Go release."""
    return template.format(version=version, path=path, line=line)


def scan_source(
    reader: IO[bytes],
    *,
    entry_name: str,
    package: str,
    version: str,
    source_url: str = DEFAULT_SOURCE_URL,
) -> InterfaceMap:
    """Return the interfaces declared in one archive entry.

    Files below a ``testdata`` directory yield nothing and are not read.
    Any error while reading lines is raised as :class:`SourceReadError`.
    """
    if is_test_fixture(entry_name):
        LOGGER.debug("Skipping test fixture %s", entry_name)
        return {}
    source_file = strip_archive_root(entry_name)
    interfaces: InterfaceMap = {}
    try:
        for line_number, line in enumerate(reader, start=1):
            match = INTERFACE_RE.match(line)
            if match is None:
                continue
            interface = Interface(name=match.group(1).decode("ascii"), package=package)
            interfaces[interface] = InterfaceLocation(
                version=version,
                source_file=source_file,
                line_number=line_number,
                link=source_link(version, source_file, line_number, template=source_url),
            )
    except STREAM_ERRORS as exc:
        raise SourceReadError(f"Error reading source file {entry_name}: {exc}") from exc
    return interfaces


__all__ = ["DEFAULT_SOURCE_URL", "INTERFACE_RE", "SourceReadError", "scan_source", "source_link"]
