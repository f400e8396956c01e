"""Typer application and CLI entry point for querent.

:func:`main` is the console-script entry point declared in
``pyproject.toml``. It registers the built-in commands and invokes the
Typer app. :class:`~querent.exceptions.QuerentError` exits with its own
code; filesystem errors during generation exit with
:data:`~querent.exit_codes.EXIT_IO_ERROR`; anything else writes a crash log
under the data directory.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from typing import Any

import typer

from querent import __version__
from querent.exit_codes import EXIT_GENERIC_FAILURE, EXIT_IO_ERROR


app = typer.Typer(
    name="querent",
    help="Generate build profiles, locale resources and language schemas for Android modules.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"querent {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output."),
) -> None:
    """Initialise output formatting and logging before every command."""
    from querent.output import OutputFormat, OutputManager, configure_logging, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    output = OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose)
    set_output(output)
    configure_logging(output)


def _register_commands() -> None:
    from querent.commands.blueprints import blueprints_command
    from querent.commands.generate import generate_command, paths_command, source_sets_command
    from querent.commands.init import init_command

    app.command("init")(init_command)
    app.command("generate")(generate_command)
    app.command("paths")(paths_command)
    app.command("source-sets")(source_sets_command)
    app.command("blueprints")(blueprints_command)


_register_commands()


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write the current traceback to the data directory and return its path."""
    from querent.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``querent`` console script.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from querent.exceptions import QuerentError
        from querent.output import error

        if isinstance(exc, QuerentError):
            error(str(exc))
            sys.exit(exc.exit_code)
        if isinstance(exc, OSError):
            error(f"Cannot write generated files: {exc}")
            sys.exit(EXIT_IO_ERROR)

        log_path = _write_crash_log(exc)
        error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
