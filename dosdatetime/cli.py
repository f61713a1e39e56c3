"""
Command line conversion between MS-DOS date and time and readable timestamps.

    dosdatetime format 11642 39712      # 2002-11-26 19:25:00
    dosdatetime parse 2002-11-26T19:25  # (11642, 39712)
"""

import logging
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Annotated, Callable

import typer
from typer import Argument, Option

from dosdatetime.adapter.dos_date_time import DosDateTime

_LOGGER = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True)

_PARSERS: list[Callable[[str], datetime]] = [
    datetime.fromisoformat,
    parsedate_to_datetime,
]


def parse_datetime(value: str) -> datetime:
    """Parse an ISO 8601 or RFC 2822 date and time."""

    for parser in _PARSERS:
        try:
            return parser(value)
        except (TypeError, ValueError) as ex:
            _LOGGER.debug("%s could not parse %r: %s", parser.__name__, value, ex)

    raise ValueError(f"Invalid date and time: {value!r}")


@app.callback()
def main(verbose: Annotated[bool, Option("--verbose", "-v")] = False):
    """
    Convert between MS-DOS date and time and readable timestamps
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARN)


@app.command("format")
def format_date_time(
    date: Annotated[int, Argument(help="MS-DOS date to print")],
    time: Annotated[int, Argument(help="MS-DOS time to print")],
):
    """
    Print an MS-DOS date and time as YYYY-MM-DD HH:MM:SS
    """
    try:
        dt = DosDateTime.from_words(date, time)
    except ValueError as ex:
        typer.echo(f"could not convert date and time: {ex}", err=True)
        raise typer.Exit(1)

    print(dt)


@app.command("parse")
def parse_date_time(
    value: Annotated[
        str, Argument(help="Date and time in ISO 8601 or RFC 2822 format")
    ],
):
    """
    Print a readable date and time as the (date, time) MS-DOS pair
    """
    try:
        dt = DosDateTime(parse_datetime(value))
        date, time = dt.words
    except ValueError as ex:
        typer.echo(f"could not convert date and time: {ex}", err=True)
        raise typer.Exit(1)

    print((date, time))
