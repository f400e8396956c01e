"""``querent blueprints`` -- list loaded blueprints and their resolved packages."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from querent.commands import reporting_errors
from querent.output import print_table


def blueprints_command(
    project_dir: Path = typer.Option(
        Path("."), "--project-dir", "-C", help="Module directory.", file_okay=False
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file (default: querent.yaml in the module). "
        "Relative paths resolve against --project-dir.",
    ),
) -> None:
    """List blueprints, whether they are enabled, and their package names."""
    from querent.config import resolve_config
    from querent.plugin import apply_querent, create_project

    with reporting_errors():
        resolved, _ = resolve_config(project_dir, config)
        project = create_project(project_dir, resolved)
        manager, _ = apply_querent(project, resolved.querent)
        project.evaluate(variant_names=[])

    rows = [
        [row["name"] or "", row["class"] or "", row["enabled"] or "", row["package_name"] or ""]
        for row in manager.list_blueprints()
    ]
    print_table(["name", "class", "enabled", "package"], rows, title="Blueprints")
