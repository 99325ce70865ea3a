from __future__ import annotations

import logging
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import List

import click
import typer
import yaml

from .config import ScanConfig, load_config
from .scanner import scan_stream

LOGGER = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

app = typer.Typer(
    help="Print the printable Unicode strings found in binary files.",
    no_args_is_help=True,
)


@app.command()
def scan(
    ctx: typer.Context,
    files: List[Path] | None = typer.Argument(
        None, help="Files to scan, processed in order."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    min_length: int | None = typer.Option(
        None,
        "--min-length",
        "-l",
        min=1,
        help="Minimum number of characters a string needs to be printed.",
    ),
    letters: bool | None = typer.Option(
        None, "--letters/--no-letters", help="Treat letters as printable."
    ),
    numbers: bool | None = typer.Option(
        None, "--numbers/--no-numbers", help="Treat numbers as printable."
    ),
    space: bool | None = typer.Option(
        None, "--space/--no-space", help="Treat white space as printable."
    ),
    punctuation: bool | None = typer.Option(
        None,
        "--punctuation/--no-punctuation",
        help="Treat punctuation as printable.",
    ),
    offsets: bool | None = typer.Option(
        None,
        "--offsets/--no-offsets",
        "-o",
        help="Prefix each string with its byte offset from the start of the file.",
    ),
    flush_trailing: bool | None = typer.Option(
        None,
        "--flush-trailing/--no-flush-trailing",
        help="Also print a string that is still open when the file ends.",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        click_type=click.Choice(LOG_LEVELS, case_sensitive=False),
        help="Logging level.",
    ),
) -> None:
    """Scan each file in turn and print its strings to stdout."""
    logging.basicConfig(level=log_level.upper())
    if not files:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)

    cfg = _load_scan_config(config)
    try:
        cfg = dc_replace(
            cfg,
            **_overrides(
                min_length=min_length,
                letters=letters,
                numbers=numbers,
                space=space,
                punctuation=punctuation,
                emit_offsets=offsets,
                flush_trailing=flush_trailing,
            ),
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if not cfg.any_category_enabled:
        LOGGER.warning("All character categories are disabled; nothing will match.")

    for path in files:
        try:
            handle = path.open("rb")
        except IsADirectoryError:
            # Reading a directory fails like a read error: no output, move on.
            LOGGER.warning("Skipping %s: is a directory", path)
            continue
        except OSError as exc:
            # Remaining files are not scanned once one fails to open.
            typer.echo(f"Cannot open {path}: {exc.strerror or exc}", err=True)
            raise typer.Exit(code=1) from exc
        with handle:
            LOGGER.debug("Scanning %s", path)
            scan_stream(handle, cfg, _write)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ScanConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_scan_config(path: Path | None) -> ScanConfig:
    """Load the YAML configuration, reporting problems as bad parameters."""
    try:
        return load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _overrides(**values: bool | int | None) -> dict[str, bool | int]:
    """Keep only the options that were given on the command line."""
    return {key: value for key, value in values.items() if value is not None}


def _write(line: str) -> None:
    typer.echo(line, nl=False)


if __name__ == "__main__":
    main()
