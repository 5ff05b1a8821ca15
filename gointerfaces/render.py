"""Render collected interfaces as a markdown-friendly table or JSON."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import orjson

from .models import Interface, InterfaceLocation, InterfaceMap

HEADERS = ("Interface", "Package", "Source File", "Line")
COLUMN_GAP = "  "

Row = tuple[Interface, InterfaceLocation]


def sorted_rows(interfaces: InterfaceMap) -> list[Row]:
    """Return (interface, location) pairs ordered by interface name."""
    return sorted(interfaces.items(), key=lambda item: item[0].name)


def markdown_link(name: str, link: str) -> str:
    return f"[{name}]({link})"


def _cells(row: Row) -> tuple[str, str, str, str]:
    interface, location = row
    return (
        markdown_link(interface.name, location.link),
        interface.package,
        location.source_file,
        str(location.line_number),
    )


def _format_line(cells: Iterable[str], widths: Iterable[int]) -> str:
    return COLUMN_GAP.join(cell.ljust(width) for cell, width in zip(cells, widths))


def render_table(interfaces: InterfaceMap) -> list[str]:
    """Return the report lines: header, dash separator, then one row per interface.

    Column widths come from the data rows only.
    """
    rows = [_cells(row) for row in sorted_rows(interfaces)]
    widths = [max((len(row[index]) for row in rows), default=0) for index in range(len(HEADERS))]
    lines = [_format_line(HEADERS, widths), COLUMN_GAP.join("-" * width for width in widths)]
    lines.extend(_format_line(row, widths) for row in rows)
    return lines


def render_json(interfaces: InterfaceMap) -> bytes:
    """Serialize the sorted report as an indented JSON array."""
    payload = [
        {
            "name": interface.name,
            "package": interface.package,
            "version": location.version,
            "source_file": location.source_file,
            "line": location.line_number,
            "link": location.link,
        }
        for interface, location in sorted_rows(interfaces)
    ]
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE)


def write_report(text: str, file_path: Path) -> None:
    """Write a rendered report to ``file_path``."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(text, encoding="utf-8")


__all__ = ["HEADERS", "markdown_link", "render_json", "render_table", "sorted_rows", "write_report"]
