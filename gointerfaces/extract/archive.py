"""Stream Go source releases: HTTP body -> gunzip -> tar entries."""

from __future__ import annotations

import gzip
import tarfile
from contextlib import contextmanager
from typing import Iterator

import requests

from ..logging import get_logger
from .base import STREAM_ERRORS, ArchiveEntry, ArchiveExhausted, ArchiveStep

LOGGER = get_logger(__name__)

DEFAULT_BASE_URL = "https://storage.googleapis.com/golang/"
DEFAULT_ARTIFACT_TEMPLATE = "go{version}.src.tar.gz"


class ArchiveOpenError(RuntimeError):
    """Raised when the decompressed archive stream cannot be opened."""


def archive_url(
    version: str,
    *,
    base_url: str = DEFAULT_BASE_URL,
    artifact_template: str = DEFAULT_ARTIFACT_TEMPLATE,
) -> str:
    """Return the download URL of the source archive for ``version``."""
    return base_url.rstrip("/") + "/" + artifact_template.format(version=version)


def advance(archive: tarfile.TarFile) -> ArchiveStep:
    """Move to the next regular file of a streamed archive."""
    while True:
        try:
            member = archive.next()
        except STREAM_ERRORS as exc:
            return ArchiveExhausted(fault=exc)
        if member is None:
            return ArchiveExhausted()
        if not member.isreg():
            continue
        reader = archive.extractfile(member)
        if reader is None:  # pragma: no cover - isreg() members always have data
            continue
        return ArchiveEntry(name=member.name, reader=reader)


def iter_entries(archive: tarfile.TarFile) -> Iterator[ArchiveEntry]:
    """Yield archive entries until the stream ends or faults."""
    while True:
        step = advance(archive)
        if isinstance(step, ArchiveExhausted):
            if step.fault is not None:
                LOGGER.debug("Archive iteration stopped early: %s", step.fault)
            return
        yield step


@contextmanager
def open_archive(
    version: str,
    *,
    session: requests.Session,
    base_url: str = DEFAULT_BASE_URL,
    artifact_template: str = DEFAULT_ARTIFACT_TEMPLATE,
) -> Iterator[Iterator[ArchiveEntry]]:
    """Open the source archive of ``version`` as a lazy sequence of entries.

    The HTTP response, the gzip stage and the tar reader are closed when the
    context exits, whether or not the entries were fully consumed.
    """
    url = archive_url(version, base_url=base_url, artifact_template=artifact_template)
    LOGGER.debug("Downloading %s", url)
    with session.get(url, stream=True) as response:
        response.raise_for_status()
        with gzip.GzipFile(fileobj=response.raw, mode="rb") as decompressed:
            try:
                archive = tarfile.open(fileobj=decompressed, mode="r|")
            except STREAM_ERRORS as exc:
                raise ArchiveOpenError(f"Cannot open source archive {url}: {exc}") from exc
            with archive:
                yield iter_entries(archive)


__all__ = [
    "ArchiveOpenError",
    "DEFAULT_ARTIFACT_TEMPLATE",
    "DEFAULT_BASE_URL",
    "advance",
    "archive_url",
    "iter_entries",
    "open_archive",
]
