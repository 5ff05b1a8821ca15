"""Shared fixtures: in-memory Go source archives served by a fake HTTP session."""

from __future__ import annotations

import gzip
import io
import tarfile
from typing import Callable

import pytest
import requests
from urllib3.response import HTTPResponse

BLOCK = 512


def build_tar(files: dict[str, bytes], *, directories: tuple[str, ...] = ()) -> bytes:
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w", format=tarfile.USTAR_FORMAT) as archive:
        for directory in directories:
            info = tarfile.TarInfo(directory)
            info.type = tarfile.DIRTYPE
            archive.addfile(info)
        for name, content in files.items():
            info = tarfile.TarInfo(name)
            info.size = len(content)
            archive.addfile(info, io.BytesIO(content))
    return buffer.getvalue()


@pytest.fixture()
def member_span() -> Callable[[bytes], int]:
    """Bytes one USTAR member occupies: header block plus padded data."""

    def _span(content: bytes) -> int:
        return BLOCK + -(-len(content) // BLOCK) * BLOCK

    return _span


@pytest.fixture()
def make_archive() -> Callable[..., bytes]:
    def _make(
        files: dict[str, bytes],
        *,
        directories: tuple[str, ...] = (),
        truncate_at: int | None = None,
    ) -> bytes:
        raw = build_tar(files, directories=directories)
        if truncate_at is not None:
            raw = raw[:truncate_at]
        return gzip.compress(raw)

    return _make


class FakeResponse:
    def __init__(self, url: str, payload: bytes, status_code: int = 200, *, cut_at: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        self.raw: io.BytesIO | HTTPResponse
        if cut_at is None:
            self.raw = io.BytesIO(payload)
        else:
            # Connection dropped: fewer bytes arrive than Content-Length announces.
            self.raw = HTTPResponse(
                body=io.BytesIO(payload[:cut_at]),
                headers={"content-length": str(len(payload))},
                status=status_code,
                preload_content=False,
                decode_content=False,
                enforce_content_length=True,
            )
        self.closed = False

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error for url: {self.url}")

    def close(self) -> None:
        self.closed = True
        self.raw.close()

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()


class FakeSession:
    """Serves archives keyed by file name and records the requested URLs."""

    def __init__(self, archives: dict[str, bytes], *, cut_at: dict[str, int] | None = None) -> None:
        self.archives = archives
        self.cut_at = cut_at or {}
        self.requested: list[str] = []
        self.responses: list[FakeResponse] = []

    def get(self, url: str, **kwargs: object) -> FakeResponse:
        assert kwargs.get("stream") is True
        self.requested.append(url)
        name = url.rsplit("/", 1)[-1]
        if name in self.archives:
            response = FakeResponse(url, self.archives[name], cut_at=self.cut_at.get(name))
        else:
            response = FakeResponse(url, b"", status_code=404)
        self.responses.append(response)
        return response

    def close(self) -> None:
        return None

    def __enter__(self) -> "FakeSession":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()


@pytest.fixture()
def fake_session() -> Callable[..., FakeSession]:
    return FakeSession
