"""Interface records produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True, slots=True)
class Interface:
    """Identity of an interface: two declarations are the same when both fields match."""

    name: str
    package: str


@dataclass(frozen=True, slots=True)
class InterfaceLocation:
    version: str
    source_file: str
    line_number: int
    link: str


InterfaceMap = Dict[Interface, InterfaceLocation]


__all__ = ["Interface", "InterfaceLocation", "InterfaceMap"]
