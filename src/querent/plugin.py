"""Applying querent to a project, and the one-call generation pipeline.

:func:`apply_querent` is what the build plugin does when a module applies
it: create the code writer, load every blueprint and subscribe them to the
module's callbacks. :func:`generate` additionally builds the
:class:`~querent.host.Project` from a config and evaluates it, which is
what ``querent generate`` runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from querent.blueprints.base import FoundationData
from querent.blueprints.manager import BlueprintManager
from querent.codegen.writer import CodeWriter
from querent.host.project import Project
from querent.models import ProjectConfig, QuerentOptions, Variant

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    """Outcome of one :func:`generate` run."""

    project: Project
    manager: BlueprintManager
    variants: list[Variant] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)

    def summary_rows(self) -> list[list[str]]:
        """One ``[blueprint, state, package]`` row per blueprint."""
        return [
            [row["name"] or "", row["state"] or "", row["package_name"] or ""]
            for row in self.manager.list_blueprints()
        ]


def create_project(
    project_dir: Path,
    config: ProjectConfig,
    output_dir: Optional[Path] = None,
) -> Project:
    """Build the host :class:`~querent.host.Project` described by *config*.

    The source output root is *output_dir* if given, else
    ``config.querent.output_dir`` (relative to *project_dir*), else the
    project default.
    """
    source_output_dir: Optional[Path] = output_dir
    if source_output_dir is None and config.querent.output_dir:
        source_output_dir = Path(config.querent.output_dir)
    if source_output_dir is not None and not source_output_dir.is_absolute():
        source_output_dir = project_dir / source_output_dir

    return Project(
        project_dir,
        extension=config.android,
        name=config.name,
        source_output_dir=source_output_dir,
    )


def apply_querent(
    project: Project,
    options: QuerentOptions,
    discover: bool = True,
) -> tuple[BlueprintManager, CodeWriter]:
    """Load every blueprint into *project*.

    Args:
        project: The module to apply querent to. Must not be evaluated yet.
        options: The ``querent:`` configuration block.
        discover: Also load third-party blueprints from entry points.

    Returns:
        The blueprint manager and the shared code writer.
    """
    writer = CodeWriter(project.source_output_dir, project.intermediates_output_dir)
    manager = BlueprintManager(FoundationData(project=project, code_writer=writer, options=options))
    manager.load_builtins()
    if discover:
        manager.discover()
    return manager, writer


def generate(
    project_dir: Path,
    config: ProjectConfig,
    variant_names: Optional[Iterable[str]] = None,
    output_dir: Optional[Path] = None,
    discover: bool = True,
) -> GenerationReport:
    """Generate sources for *config* in *project_dir*.

    Args:
        project_dir: The module directory.
        config: The resolved project configuration.
        variant_names: Only emit these variants (default: all).
        output_dir: Override for the generated source root.
        discover: Also load third-party blueprints.

    Returns:
        A :class:`GenerationReport`.

    Raises:
        HostError: If a requested variant does not exist.
        OSError: If a generated file cannot be written.
    """
    project = create_project(project_dir, config, output_dir)
    manager, writer = apply_querent(project, config.querent, discover=discover)
    variants = project.evaluate(variant_names)
    logger.info(
        "Generated %d file(s) for %d variant(s) of '%s'",
        len(writer.written_files),
        len(variants),
        project.name,
    )
    return GenerationReport(
        project=project,
        manager=manager,
        variants=variants,
        files=writer.written_files,
    )
