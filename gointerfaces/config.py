"""Configuration model for gointerfaces."""

from __future__ import annotations

import logging
from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

from .extract.archive import DEFAULT_ARTIFACT_TEMPLATE, DEFAULT_BASE_URL
from .extract.scanner import DEFAULT_SOURCE_URL


class GoInterfacesConfig(BaseModel):
    versions: List[str] = Field(min_length=1)
    base_url: str = DEFAULT_BASE_URL
    artifact_template: str = DEFAULT_ARTIFACT_TEMPLATE
    source_url: str = DEFAULT_SOURCE_URL
    output_format: Literal["table", "json"] = "table"
    output: str | None = None
    log_level: str = "INFO"

    @field_validator("versions")
    @classmethod
    def _strip_versions(cls, value: List[str]) -> List[str]:
        versions = [item.strip() for item in value]
        if not all(versions):
            raise ValueError("versions must not be blank")
        return versions

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


__all__ = ["GoInterfacesConfig"]
