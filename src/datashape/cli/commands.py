from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any, NoReturn

import typer

from datashape.config import ShapeConfig, load_options
from datashape.constants import EXIT_INPUT_ERROR, EXIT_SUCCESS
from datashape.io import SUPPORTED_FORMATS, dump_document, load_document
from datashape.prune import Pruner


def _version_callback(value: bool) -> None:
    if value:
        from datashape import __version__

        typer.echo(f"datashape {__version__}")
        raise typer.Exit()


app = typer.Typer(add_completion=False, help="Inspect the shape of nested data, or prune its empty values")


@app.callback(invoke_without_command=True)
def _main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
) -> None:
    pass


class _EchoHandler(logging.Handler):
    """Writes log records to whatever stderr typer resolves at emit time."""

    def emit(self, record: logging.LogRecord) -> None:
        typer.echo(self.format(record), err=True)


def _enable_debug_logging() -> None:
    package_logger = logging.getLogger("datashape")
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(handler, _EchoHandler) for handler in package_logger.handlers):
        handler = _EchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"ERROR: {exc}", err=True)
    raise typer.Exit(EXIT_INPUT_ERROR) from exc


def _load(path: Path, config_path: Path | None, fmt: str) -> tuple[Any, ShapeConfig]:
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported output format: {fmt}. Expected one of: {', '.join(SUPPORTED_FORMATS)}")
    if not path.is_file():
        raise ValueError(f"Input file not found: {path}")
    return load_document(path), load_options(config_path)


@app.command()
def skeleton(
    path: Path = typer.Argument(..., help="JSON or YAML document to skeletonize"),
    marker: str | None = typer.Option(None, "--marker", help="Replacement for every leaf value"),
    fmt: str = typer.Option("json", "--format", help="Output format: json | yaml"),
    config_path: Path | None = typer.Option(None, "--config", help="YAML options file"),
) -> None:
    """Print the document with every leaf value blanked out."""
    try:
        document, config = _load(path, config_path, fmt)
        skeletonizer = config.skeleton
        if marker is not None:
            skeletonizer = dataclasses.replace(skeletonizer, value_marker=marker)
        rendered = dump_document(skeletonizer.deflesh(document), fmt)
    except ValueError as exc:
        _fail(exc)
    typer.echo(rendered.rstrip("\n"))
    raise typer.Exit(EXIT_SUCCESS)


@app.command()
def prune(
    path: Path = typer.Argument(..., help="JSON or YAML document to prune"),
    keep_empty_strings: bool = typer.Option(
        False, "--keep-empty-strings", help="Keep entries whose value is an empty string."
    ),
    debug: bool = typer.Option(False, "--debug", help="Log skipped repeated references to stderr."),
    fmt: str = typer.Option("json", "--format", help="Output format: json | yaml"),
    config_path: Path | None = typer.Option(None, "--config", help="YAML options file"),
) -> None:
    """Print the document with null and empty-string entries removed."""
    try:
        document, config = _load(path, config_path, fmt)
        options = config.prune
        if keep_empty_strings:
            options = dataclasses.replace(options, prune_empty_string=False)
        if debug:
            options = dataclasses.replace(options, debug=True)
        if options.debug:
            _enable_debug_logging()
        rendered = dump_document(Pruner(options).prune(document), fmt)
    except ValueError as exc:
        _fail(exc)
    typer.echo(rendered.rstrip("\n"))
    raise typer.Exit(EXIT_SUCCESS)
