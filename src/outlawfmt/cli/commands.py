"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from outlawfmt.config import Settings, load_config
from outlawfmt.core.pipeline import format_text
from outlawfmt.core.utils.diff import Reformat
from outlawfmt.util.fs import SourceReadError, read_source, write_text_file
from outlawfmt.util.logging import get_logger, setup_logger


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _read(path: Optional[Path]) -> str:
    try:
        return read_source(path)
    except SourceReadError as e:
        if e.reason == "io_error":
            _fail(f"Could not read {e.source}", e.__cause__)
        _fail(str(e))


def format_cmd(
    path: Annotated[Optional[Path], typer.Argument(help="Outline file to format; reads stdin when omitted")] = None,
    line_length: Annotated[Optional[int], typer.Option("--max-line-length", "-l", help="Wrap body lines longer than this")] = None,
    indent: Annotated[Optional[int], typer.Option("--indent-shift", help="Spaces per nesting level")] = None,
    check: Annotated[bool, typer.Option("--check", help="Exit 1 if the input is not formatted; print nothing")] = False,
    diff: Annotated[bool, typer.Option("--diff", help="Print a unified diff instead of the formatted text")] = False,
    in_place: Annotated[bool, typer.Option("--in-place", "-i", help="Rewrite PATH with the formatted text")] = False,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
    ):
    """Format an outline document and write the canonical text to stdout."""
    settings = _settings(overrides={
        "max_line_length": line_length, "indent_shift": indent, "log_level": log_level,
    })
    setup_logger(settings.log_level)
    logger = get_logger()

    if in_place and path is None:
        _fail("--in-place needs a PATH to write to")

    name = str(path) if path else "<stdin>"
    contents = _read(path)
    formatted = format_text(contents, settings)
    logger.debug(f"Formatted {name}: {len(contents)} -> {len(formatted)} characters")

    report = Reformat(name, contents, formatted)
    if check:
        if report.changed:
            typer.echo(report.check_message(), err=True)
            raise typer.Exit(1)
        logger.info(report.check_message())
        return

    if diff:
        typer.echo(report.diff(), nl=False)
        return

    if in_place:
        if formatted == contents:
            logger.info(f"Unchanged: {name}")
            return
        try:
            written = write_text_file(path, formatted)
        except OSError as e:
            _fail(f"Could not write {name}", e)
        logger.info(f"Saved: {name} ({written} bytes)")
        return

    typer.echo(formatted, nl=False)
