"""Collect interface declarations across archive entries and Go versions."""

from __future__ import annotations

from typing import Iterable

import requests

from .extract.archive import DEFAULT_ARTIFACT_TEMPLATE, DEFAULT_BASE_URL, open_archive
from .extract.scanner import DEFAULT_SOURCE_URL, scan_source
from .logging import get_logger
from .models import InterfaceMap
from .paths import package_for_entry, should_scan
from .versions import source_root_for

LOGGER = get_logger(__name__)


def merge_into(target: InterfaceMap, source: InterfaceMap) -> InterfaceMap:
    """Copy ``source`` into ``target``; colliding keys take the ``source`` location."""
    # Same (name, package) declared twice in one version also lands here and
    # silently keeps the last file scanned.
    target.update(source)
    return target


def interfaces_for_version(
    version: str,
    *,
    session: requests.Session,
    base_url: str = DEFAULT_BASE_URL,
    artifact_template: str = DEFAULT_ARTIFACT_TEMPLATE,
    source_url: str = DEFAULT_SOURCE_URL,
) -> InterfaceMap:
    """Scan the source archive of one Go release."""
    LOGGER.info("Generating interface list for version %s...", version)
    source_root = source_root_for(version)
    interfaces: InterfaceMap = {}
    scanned = 0
    with open_archive(
        version,
        session=session,
        base_url=base_url,
        artifact_template=artifact_template,
    ) as entries:
        for entry in entries:
            if not should_scan(entry.name, source_root):
                continue
            found = scan_source(
                entry.reader,
                entry_name=entry.name,
                package=package_for_entry(entry.name, source_root),
                version=version,
                source_url=source_url,
            )
            merge_into(interfaces, found)
            scanned += 1
    LOGGER.debug("Scanned %d files for version %s, %d interfaces", scanned, version, len(interfaces))
    return interfaces


def collect_interfaces(
    versions: Iterable[str],
    *,
    session: requests.Session,
    base_url: str = DEFAULT_BASE_URL,
    artifact_template: str = DEFAULT_ARTIFACT_TEMPLATE,
    source_url: str = DEFAULT_SOURCE_URL,
) -> InterfaceMap:
    """Merge the interfaces of all versions; later versions win on collisions."""
    merged: InterfaceMap = {}
    for version in versions:
        per_version = interfaces_for_version(
            version,
            session=session,
            base_url=base_url,
            artifact_template=artifact_template,
            source_url=source_url,
        )
        merge_into(merged, per_version)
    return merged


__all__ = ["collect_interfaces", "interfaces_for_version", "merge_into"]
