"""CLI entrypoint: Typer app definition and command registration"""

import typer

from outlawfmt.cli.commands import format_cmd


app = typer.Typer(name="outlawfmt", add_completion=False, help="Canonical formatter for outline documents")

app.command(name="format")(format_cmd)
