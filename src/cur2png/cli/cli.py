#!/usr/bin/env python3
"""
cur2png.cli.cli

Typer-based CLI converting a directory of ``.cur`` files to PNG and writing
the cursor hotspots to one JSON file.

Examples
--------
Convert a cursor theme:

    cur2png --input ./cursors --output ./png

Write the hotspot data somewhere else and show debug logs:

    cur2png -i ./cursors -o ./png -j ./png/hotspots.json --verbose
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from cur2png import __version__
from cur2png.application.results import (
    BatchResult,
    ConversionFailure,
    ConversionOutcome,
)
from cur2png.errors import Cur2PngError
from cur2png.schemas import DEFAULT_METADATA_FILENAME

app = typer.Typer(
    name="cur2png",
    help="Converts .cur files to .png with hotspot extraction.",
    add_completion=False,
)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    """Route library logs to stderr; DEBUG when ``verbose`` is set."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cur2png {__version__}")
        raise typer.Exit()


def _print_fatal_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly fatal error.

    Parameters
    ----------
    exc : Exception
        Exception that aborted the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    if isinstance(exc, Cur2PngError):
        typer.echo(f"Error: {exc}", err=True)
    else:
        typer.echo(f"Error: {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo(
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            err=True,
        )
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _echo_outcome(outcome: ConversionOutcome) -> None:
    """Print one per-file line: successes to stdout, failures to stderr."""
    if isinstance(outcome, ConversionFailure):
        typer.echo(f"Error processing {outcome.entry.path}: {outcome.reason}", err=True)
        return
    typer.echo(f"Processed: {outcome.entry.name} -> {outcome.output_name}")


def _echo_summary(result: BatchResult) -> None:
    typer.echo("\nConversion complete!")
    typer.echo(f"Processed {result.processed_count} cursor files")
    typer.echo(f"PNG files saved to: {result.output_dir}")
    typer.echo(f"Hotspot data saved to: {result.metadata_path}")


@app.command()
def convert_cmd(
    input_dir: Path = typer.Option(
        ...,
        "--input",
        "-i",
        metavar="INPUT_DIR",
        help="Input directory containing .cur files.",
    ),
    output_dir: Path = typer.Option(
        ...,
        "--output",
        "-o",
        metavar="OUTPUT_DIR",
        help="Output directory for .png files.",
    ),
    json_file: Path = typer.Option(
        Path(DEFAULT_METADATA_FILENAME),
        "--json",
        "-j",
        metavar="JSON_FILE",
        help="Output JSON file for hotspot data.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging on stderr."
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Convert every .cur file in INPUT_DIR to PNG and collect hotspots.

    Parameters
    ----------
    input_dir : Path
        Directory scanned (non-recursively) for ``.cur`` files.
    output_dir : Path
        Directory receiving ``<stem>.png`` files; created if missing.
    json_file : Path, default="hotspots.json"
        Aggregated hotspot metadata destination.
    verbose : bool, default=False
        Whether to log debug details.
    debug : bool, default=False
        Whether to print tracebacks for fatal errors.

    Notes
    -----
    - Files that fail to convert are reported and skipped; the exit code stays 0.
    - A missing input directory, an uncreatable output directory or an
      unwritable JSON file exit non-zero.
    """
    del version
    _configure_logging(verbose)

    try:
        from cur2png.api import convert_directory

        result = convert_directory(
            input_dir=input_dir,
            output_dir=output_dir,
            metadata_path=json_file,
            on_outcome=_echo_outcome,
        )
    except Cur2PngError as exc:
        raise typer.Exit(code=_print_fatal_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_fatal_error(exc, debug))

    _echo_summary(result)


if __name__ == "__main__":
    app()
