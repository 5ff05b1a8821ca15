"""Archive path helper utilities."""

from __future__ import annotations

from pathlib import PurePosixPath

ARCHIVE_ROOT = "go/"
SOURCE_SUFFIX = ".go"
DOC_FILE = "doc.go"
TEST_SUFFIX = "_test.go"
TEST_FIXTURE_DIR = "testdata"


def _normalize_relative(path: str) -> str:
    """Return a forward-slashed relative path without leading separators."""
    return path.replace("\\", "/").lstrip("/")


def strip_archive_root(name: str) -> str:
    """Drop the ``go/`` directory every release archive is rooted at."""
    normalized = _normalize_relative(name)
    if normalized.startswith(ARCHIVE_ROOT):
        return normalized[len(ARCHIVE_ROOT) :]
    return normalized


def package_for_entry(name: str, source_root: str) -> str:
    """Return the package directory of an entry relative to the source root.

    ``go/src/net/http/server.go`` under ``go/src`` gives ``net/http``.
    """
    normalized = _normalize_relative(name)
    start = len(source_root.rstrip("/")) + 1
    end = normalized.rfind("/")
    if end < start:
        return ""
    return normalized[start:end]


def is_test_fixture(name: str) -> bool:
    """Return True when the entry sits anywhere below a ``testdata`` directory."""
    parent = PurePosixPath(_normalize_relative(name)).parent
    return TEST_FIXTURE_DIR in parent.parts


def should_scan(name: str, source_root: str) -> bool:
    """Decide whether an archive entry is a non-test Go source file under the root."""
    normalized = _normalize_relative(name)
    if not normalized.startswith(source_root.rstrip("/") + "/"):
        return False
    if not normalized.endswith(SOURCE_SUFFIX):
        return False
    basename = normalized.rsplit("/", 1)[-1]
    if basename == DOC_FILE:
        return False
    return not basename.endswith(TEST_SUFFIX)


__all__ = [
    "ARCHIVE_ROOT",
    "TEST_FIXTURE_DIR",
    "is_test_fixture",
    "package_for_entry",
    "should_scan",
    "strip_archive_root",
]
