"""Command-line entry point for the s3-crc checksum tool."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Optional

import typer

from s3crc.config import ConfigError, load_config
from s3crc.crc.formatting import select_mode
from s3crc.errors import AggregationError
from s3crc.report import render_json, render_line
from s3crc.runner import ChecksumRun
from s3crc.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Compute CRC64-NVMe checksums compatible with AWS S3.")


def _version_callback(value: bool) -> None:
    if not value:
        return
    try:
        typer.echo(f"s3-crc {version('s3crc')}")
    except PackageNotFoundError:
        typer.echo("s3-crc (not installed)")
    raise typer.Exit()


@app.command()
def checksum(
    patterns: list[str] = typer.Argument(..., help="Files or globs to process. Use - for stdin."),
    uppercase: bool = typer.Option(False, "--uppercase", help="Output checksum as uppercase hex"),
    as_json: bool = typer.Option(False, "--json", help="Output results as formatted JSON"),
    as_hex: bool = typer.Option(False, "--hex", help="Output checksum as lowercase hex (wins over --uppercase)"),
    chunk_size: Optional[int] = typer.Option(None, "--chunk-size", min=1, help="Read size in bytes"),
    strict: bool = typer.Option(False, "--strict", help="Exit with status 1 if any source could not be processed"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML/TOML/JSON config file"),
    show_version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Print the CRC64-NVMe checksum of every file matching PATTERNS."""

    overrides: dict[str, Any] = {}
    if chunk_size is not None:
        overrides["runtime.chunk_size"] = chunk_size
    if strict:
        overrides["runtime.fail_on_error"] = True

    try:
        cfg = load_config(config_path, overrides=overrides)
    except ConfigError as exc:
        typer.echo(f"config error: {exc}", err=True)
        raise typer.Exit(code=2)

    logger = configure_logging(
        level=cfg.logging.level,
        fmt=cfg.logging.format,
        log_path=cfg.logging.log_path,
    )

    mode = select_mode(hex_lower=as_hex, uppercase=uppercase)
    run = ChecksumRun(
        mode,
        chunk_size=cfg.runtime.chunk_size,
        stdin=typer.get_binary_stream("stdin"),
        logger=logger,
    )

    if as_json:
        entries = run.collect(patterns)
        try:
            document = render_json(entries)
        except AggregationError as exc:
            logger.error("%s", exc)
            raise typer.Exit(code=1)
        typer.echo(document)
    else:
        for entry in run.iter_results(patterns):
            typer.echo(render_line(entry))

    if run.errors:
        logger.info("%s source(s) could not be processed", len(run.errors))
        if cfg.runtime.fail_on_error:
            raise typer.Exit(code=1)


def main() -> None:
    app()


__all__ = ["main", "app"]
