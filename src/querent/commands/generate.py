"""Generation commands -- ``generate``, ``paths`` and ``source-sets``.

``generate`` runs the full lifecycle for the module in the project
directory. ``source-sets`` only finalizes the configuration and prints the
source roots the blueprints register, without writing anything, so a build
script can wire them into its compilation. ``paths`` is the bare output
path resolver.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from querent.commands import reporting_errors
from querent.output import debug, info, print_json, print_table, success, warning


def generate_command(
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
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Root for generated sources. Relative paths resolve against --project-dir.",
    ),
    variants: Optional[list[str]] = typer.Option(
        None, "--variant", help="Only generate this variant (repeatable)."
    ),
) -> None:
    """Generate sources for every enabled blueprint and variant.

    Example::

        querent generate
        querent generate -C app --variant debug
    """
    from querent.config import resolve_config
    from querent.plugin import generate

    with reporting_errors():
        resolved, config_path = resolve_config(project_dir, config, output_dir)
        if config_path is None:
            warning(f"No querent config found in {project_dir}; every blueprint is disabled.")
        else:
            debug(f"Using config {config_path}")

        report = generate(project_dir, resolved, variant_names=variants or None)

    print_table(
        ["blueprint", "state", "package"],
        report.summary_rows(),
        title=f"querent: {report.project.name}",
    )
    for path in report.files:
        debug(f"  {path}")
    variant_list = ", ".join(v.name for v in report.variants) or "none"
    success(f"Wrote {len(report.files)} file(s) for variant(s): {variant_list}")
    info(f"Output: {report.project.source_output_dir}")


def paths_command(
    blueprint: str = typer.Argument(help="Blueprint name, e.g. 'buildProfile'."),
    variant: str = typer.Argument(help="Variant name, e.g. 'debug'."),
    output_dir: Path = typer.Option(
        Path("build/generated/querent"), "--output-dir", "-o", help="Generated source root."
    ),
) -> None:
    """Print the four output directories of a blueprint and variant."""
    from querent.codegen.paths import OutputDirectorySet

    print_json(OutputDirectorySet.resolve(output_dir, blueprint, variant).as_dict())


def source_sets_command(
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
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Root for generated sources. Relative paths resolve against --project-dir.",
    ),
) -> None:
    """Print the source roots registered per build type, as JSON.

    Nothing is written: configuration is finalized but no variant is emitted.
    """
    from querent.config import resolve_config
    from querent.plugin import apply_querent, create_project

    with reporting_errors():
        resolved, _ = resolve_config(project_dir, config, output_dir)
        project = create_project(project_dir, resolved)
        apply_querent(project, resolved.querent)
        project.evaluate(variant_names=[])
    print_json(project.source_sets.as_dict())
