"""Go release version helpers."""

from __future__ import annotations

import re

_LEADING_DIGITS = re.compile(r"\d+")

# Releases before 1.4 keep the standard library under src/pkg.
LEGACY_SOURCE_ROOT = "go/src/pkg"
SOURCE_ROOT = "go/src"


def _component(text: str) -> int:
    match = _LEADING_DIGITS.match(text)
    if match is None:
        return 0
    return int(match.group())


def maj_min(version: str) -> tuple[int, int]:
    """Return the (major, minor) pair of a Go version such as ``1.4rc1``.

    Pre-release suffixes are dropped and anything unparsable counts as 0.
    """
    major, _, minor = version.partition(".")
    return _component(major), _component(minor)


def source_root_for(version: str) -> str:
    """Return the archive directory holding the standard library sources."""
    major, minor = maj_min(version)
    if major <= 1 and minor < 4:
        return LEGACY_SOURCE_ROOT
    return SOURCE_ROOT


__all__ = ["LEGACY_SOURCE_ROOT", "SOURCE_ROOT", "maj_min", "source_root_for"]
