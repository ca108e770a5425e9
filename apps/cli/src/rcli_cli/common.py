"""Shared CLI helpers: argument validators, logging setup and error-to-exit mapping."""
from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence, Tuple

import typer

from rcli import config
from rcli.errors import (
    EXIT_AUTH,
    EXIT_FORMAT,
    EXIT_IO,
    AuthenticationError,
    FormatError,
    RcliError,
)

log = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def verify_file(value: str) -> str:
    if value == "-" or Path(value).exists():
        return value
    raise typer.BadParameter("File does not exist")


def verify_input_file(value: str) -> str:
    if Path(value).is_file():
        return value
    raise typer.BadParameter("File does not exist")


def verify_path(value: Path) -> Path:
    if value.exists() and value.is_dir():
        return value
    raise typer.BadParameter("Path does not exist or is not a directory")


def verify_output(value: Path) -> Path:
    """``-`` means stdout; anything else must be an existing directory."""
    if str(value) == "-":
        return value
    return verify_path(value)


def write_files(files: Sequence[Tuple[Path, bytes]]) -> None:
    """Write all ``files`` or none of them.

    Contents go to ``.tmp`` siblings first and are renamed into place only
    once every write has succeeded.
    """
    staged: list[Tuple[Path, Path]] = []
    try:
        for target, data in files:
            tmp = target.with_name(target.name + ".tmp")
            staged.append((tmp, target))
            tmp.write_bytes(data)
        for tmp, target in staged:
            os.replace(tmp, target)
    except OSError:
        for tmp, target in staged:
            tmp.unlink(missing_ok=True)
        raise


def configure_logging(verbose: int = 0) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = config.log_level()
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    logging.getLogger().setLevel(level)


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Report engine failures on stderr and exit with a status per error kind."""
    try:
        yield
    except AuthenticationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=EXIT_AUTH)
    except FormatError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=EXIT_FORMAT)
    except OSError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=EXIT_IO)
    except RcliError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
