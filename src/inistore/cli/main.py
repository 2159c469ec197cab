import codecs
import logging
import pathlib
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..exceptions import LoadError
from ..store import IniStore

from .console import console, err_console

LOG_LEVELS = [
    logging.CRITICAL,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
]

app = typer.Typer(no_args_is_help=True)

File = Annotated[pathlib.Path, typer.Argument(dir_okay=False, resolve_path=True)]


def _check_encoding(value: Optional[str]) -> Optional[str]:
    if value is not None:
        try:
            codecs.lookup(value)
        except LookupError:
            raise typer.BadParameter(f"unknown encoding: {value}")

    return value


Encoding = Annotated[
    Optional[str],
    typer.Option(
        help="file encoding, detected if not given", callback=_check_encoding
    ),
]


def _load(file: pathlib.Path, encoding: str | None) -> IniStore:
    store = IniStore()

    try:
        store.load(file, encoding=encoding)
    except LoadError as e:
        err_console.print(f"[red]error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=1)

    return store


@app.callback()
def common(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, min=0, max=5, help="set logging level"
        ),
    ] = 0
):
    """Read values from INI config files."""

    if verbose == 0:
        logging.disable()
    else:
        logging.disable(logging.NOTSET)
        logging.basicConfig(level=LOG_LEVELS[verbose - 1])


@app.command()
def get(
    file: File,
    section: Annotated[str, typer.Argument(help="section name, '' for top-level")],
    key: str,
    default: Annotated[str, typer.Option(help="printed if the key is missing")] = "",
    encoding: Encoding = None,
):
    """Print the value of a key."""

    store = _load(file, encoding)
    console.print(
        store.get(section, key, default), markup=False, highlight=False, soft_wrap=True
    )


@app.command()
def show(file: File, encoding: Encoding = None):
    """Show every section and property in a config file."""

    store = _load(file, encoding)

    table = Table(title=str(file))
    table.add_column("Section")
    table.add_column("Key")
    table.add_column("Value")

    for section, properties in store.items():
        for key, value in properties.items():
            table.add_row(Text(section), Text(key), Text(value))

    console.print(table)
