"""Built-in CLI commands registered on the root Typer app by :mod:`querent.app`."""

from __future__ import annotations

import contextlib
from typing import Iterator

import typer

from querent.exceptions import QuerentError
from querent.exit_codes import EXIT_IO_ERROR
from querent.output import error


@contextlib.contextmanager
def reporting_errors() -> Iterator[None]:
    """Turn querent and filesystem errors into a message and an exit code."""
    try:
        yield
    except QuerentError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    except OSError as exc:
        error(f"Cannot write generated files: {exc}")
        raise typer.Exit(code=EXIT_IO_ERROR) from None
