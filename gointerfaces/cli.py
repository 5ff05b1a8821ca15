"""Command-line interface for gointerfaces."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import requests
import typer
import yaml
from pydantic import ValidationError

from .aggregate import collect_interfaces
from .config import GoInterfacesConfig
from .extract.archive import ArchiveOpenError
from .extract.scanner import SourceReadError
from .logging import configure_logging, get_logger
from .models import InterfaceMap
from .render import render_json, render_table, write_report

app = typer.Typer(help="List the interfaces declared in Go standard library releases.")
LOGGER = get_logger(__name__)


@app.callback()
def main() -> None:
    """gointerfaces CLI root."""
    return None


def _load_yaml_config(config_path: Optional[Path]) -> dict[str, object]:
    if config_path is None:
        return {}
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as error:
        raise typer.BadParameter(f"Failed to parse {config_path}: {error}") from error
    if not isinstance(data, dict):
        raise typer.BadParameter(f"{config_path} must contain a mapping")
    return data


def _merge_config(config_path: Optional[Path], cli_options: dict[str, object]) -> GoInterfacesConfig:
    file_overrides = _load_yaml_config(config_path)
    given = {key: value for key, value in cli_options.items() if value is not None}
    merged: dict[str, object] = {**file_overrides, **given}
    try:
        return GoInterfacesConfig(**merged)
    except ValidationError as error:
        raise typer.BadParameter(str(error)) from error


def _render(config: GoInterfacesConfig, interfaces: InterfaceMap) -> str:
    if config.output_format == "json":
        return render_json(interfaces).decode("utf-8")
    return "\n".join(render_table(interfaces)) + "\n"


@app.command("generate")
def generate(
    versions: List[str] = typer.Argument(..., help="Go versions to scan, e.g. 1.21.0 1.22rc1."),
    config_file: Optional[Path] = typer.Option(
        None, "--config", exists=True, dir_okay=False, file_okay=True, help="YAML file with default options."
    ),
    base_url: Optional[str] = typer.Option(None, help="Base URL of the Go source archives."),
    source_url: Optional[str] = typer.Option(None, help="Link template with {version}, {path} and {line}."),
    output_format: Optional[str] = typer.Option(None, "--format", help="Report format: table or json."),
    output: Optional[Path] = typer.Option(None, help="Write the report to a file instead of stdout."),
    log_level: Optional[str] = typer.Option(None, help="Log level."),
) -> None:
    cli_options: dict[str, object] = {
        "versions": list(versions),
        "base_url": base_url,
        "source_url": source_url,
        "output_format": output_format,
        "output": str(output) if output is not None else None,
        "log_level": log_level,
    }
    config = _merge_config(config_file, cli_options)
    configure_logging(config.log_level)

    try:
        with requests.Session() as session:
            interfaces = collect_interfaces(
                config.versions,
                session=session,
                base_url=config.base_url,
                artifact_template=config.artifact_template,
                source_url=config.source_url,
            )
    except requests.RequestException as error:
        LOGGER.error("Download failed: %s", error)
        raise typer.Exit(code=1) from error
    except (ArchiveOpenError, SourceReadError) as error:
        LOGGER.error("%s", error)
        raise typer.Exit(code=1) from error

    LOGGER.info("Printing table...")
    report = _render(config, interfaces)
    if config.output:
        write_report(report, Path(config.output))
        LOGGER.info("Report written to %s", config.output)
    else:
        typer.echo(report, nl=False)
