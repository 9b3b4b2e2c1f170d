"""pacreader: read installed package metadata from pacman."""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from pydantic import TypeAdapter
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from pacreader import constants
from pacreader.exceptions import PacreaderError
from pacreader.models import PackageRecord
from pacreader.parser import parse_packages
from pacreader.query import query_installed

logger = logging.getLogger(__name__)

cli = typer.Typer(help="Parse and display installed package metadata from pacman.", no_args_is_help=True)
console = Console()
err_console = Console(stderr=True)

_records_adapter = TypeAdapter(list[PackageRecord])


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


DEFAULT_LOG_LEVEL = LogLevel(constants.LOG_LEVEL) if constants.LOG_LEVEL in LogLevel.__members__ else LogLevel.INFO


def setup_logging(level: LogLevel = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, tracebacks_suppress=[typer])],
    )


def render_table(packages: list[PackageRecord]) -> Table:
    """Build the package listing table."""
    table = Table(*constants.LIST_COLUMNS, header_style="bold", expand=True)
    for pkg in packages:
        table.add_row(
            Text(pkg.name, style="dim"),
            Text(pkg.version),
            Text(pkg.description),
            Text(pkg.licenses_str, style="green"),
            Text(pkg.url_str),
            Text(pkg.installed_size),
            Text(pkg.install_date),
        )
    return table


def _fail(error: Exception) -> typer.Exit:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}", highlight=False, soft_wrap=True)
    return typer.Exit(code=1)


@cli.callback()
def main(
    log_level: Annotated[
        LogLevel, typer.Option("--log-level", case_sensitive=False, help="Console logging level.")
    ] = DEFAULT_LOG_LEVEL,
) -> None:
    setup_logging(log_level)


@cli.command("list")
def list_packages(
    names: Annotated[list[str] | None, typer.Argument(help="Packages to show. All installed when omitted.")] = None,
    skip_invalid: Annotated[
        bool, typer.Option("--skip-invalid", help="Skip package blocks that fail to parse.")
    ] = False,
) -> None:
    """Query pacman and show installed packages as a table."""
    try:
        output = query_installed(names or [])
        packages = parse_packages(output, skip_invalid=skip_invalid)
    except PacreaderError as e:
        raise _fail(e) from e

    console.print(render_table(packages))


@cli.command("parse")
def parse_file(
    file: Annotated[
        Path | None, typer.Argument(help="Saved `pacman -Qi` output. Reads stdin when omitted or '-'.")
    ] = None,
    skip_invalid: Annotated[
        bool, typer.Option("--skip-invalid", help="Skip package blocks that fail to parse.")
    ] = False,
    indent: Annotated[int, typer.Option("--indent", min=0, help="JSON indentation.")] = 2,
) -> None:
    """Parse `pacman -Qi` output and print the records as JSON."""
    try:
        if file is None or str(file) == "-":
            text = sys.stdin.read()
        else:
            text = file.read_text(encoding="utf-8")
    except OSError as e:
        raise _fail(e) from e

    try:
        packages = parse_packages(text, skip_invalid=skip_invalid)
    except PacreaderError as e:
        raise _fail(e) from e

    typer.echo(_records_adapter.dump_json(packages, indent=indent or None).decode())
