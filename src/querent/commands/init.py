"""Init command -- write a starter ``querent.yaml``.

The starter config enables every built-in blueprint and declares the
usual ``debug`` and ``release`` build types. Existing files are only
replaced with ``--force``.
"""

from __future__ import annotations

from pathlib import Path

import typer

from querent.commands import reporting_errors
from querent.models import ModuleKind
from querent.output import info, success


def init_command(
    namespace: str = typer.Option(
        ..., "--namespace", "-n", help="Module namespace, e.g. com.example.app."
    ),
    kind: ModuleKind = typer.Option(
        ModuleKind.APPLICATION, "--kind", "-k", help="Module type.", case_sensitive=False
    ),
    project_dir: Path = typer.Option(
        Path("."), "--project-dir", "-C", help="Module directory.", file_okay=False
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config."),
) -> None:
    """Create ``querent.yaml`` in the module directory.

    Example::

        querent init --namespace com.example.app
        querent init -n com.example.feature --kind dynamic-feature
    """
    from querent.config import CONFIG_FILENAMES, find_config_file, save_config, starter_config
    from querent.exceptions import ConfigError, InvalidUsageError

    with reporting_errors():
        existing = find_config_file(project_dir)
        if existing is not None and not force:
            raise InvalidUsageError(f"{existing} already exists (use --force to overwrite).")

        path = existing or project_dir / CONFIG_FILENAMES[0]
        try:
            save_config(starter_config(namespace, kind=kind), path)
        except ConfigError as exc:
            raise InvalidUsageError(str(exc)) from exc

    success(f"Wrote {path}")
    info("Run 'querent generate' to emit sources.")
