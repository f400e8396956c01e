"""Abstract base class for querent blueprints.

A blueprint is one independent code-generation responsibility, such as the
build profile constants or the locale resources. Every blueprint subclasses
:class:`Blueprint` and implements :meth:`Blueprint.on_variants`; the other
hooks (:meth:`~Blueprint.apply`, :meth:`~Blueprint.finalize_dsl`) are
optional no-ops.

Lifecycle, driven entirely by host callbacks::

    created --finalize_dsl--> configured --on_variants--> emitting --after_variants--> emitted_all
                                        \\--> skipped   (is_enabled() was False; terminal)

1. :meth:`Blueprint.on_create` -- runs :meth:`apply` and subscribes to the
   host's callbacks.
2. Finalization -- :meth:`is_enabled` is evaluated once, ``namespace`` and
   ``package_name`` are resolved and frozen, and the blueprint's
   directories are registered as source roots of every build type. A
   disabled blueprint then moves to ``skipped`` and never emits.
3. :meth:`Blueprint.emit` -- once per variant: the four output directories
   are recomputed, created and bound, then :meth:`on_variants` runs.

Example:
    Minimal blueprint::

        class GreetingBlueprint(Blueprint):
            package_name_suffix = "greeting"

            def on_variants(self, variant):
                self.write_kotlin_file("Greeting", f"package {self.package_name}\\n")
"""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from querent.codegen.paths import DirectoryKind, OutputDirectorySet, resolve_directory
from querent.codegen.templates import render_template
from querent.codegen.writer import CodeWriter, kotlin_file_path
from querent.exceptions import BlueprintError
from querent.host.project import Project
from querent.models import ModuleExtension, QuerentOptions, Variant

DEFAULT_NAMESPACE = "dev.teogor.ceres"
"""Namespace used when the module declares none, or is not recognized."""

_NAME_SUFFIX = "Blueprint"


class BlueprintState(str, enum.Enum):
    """Lifecycle state of a :class:`Blueprint`."""

    CREATED = "created"
    CONFIGURED = "configured"
    SKIPPED = "skipped"
    EMITTING = "emitting"
    EMITTED_ALL = "emitted_all"


@dataclass
class FoundationData:
    """Everything a blueprint needs from the build, passed to its constructor."""

    project: Project
    code_writer: CodeWriter
    options: QuerentOptions


def blueprint_name(cls: type) -> str:
    """Derive a blueprint name from its class: ``BuildProfileBlueprint`` -> ``buildProfile``."""
    name = cls.__name__
    if name.endswith(_NAME_SUFFIX) and len(name) > len(_NAME_SUFFIX):
        name = name[: -len(_NAME_SUFFIX)]
    return name[0].lower() + name[1:]


class Blueprint(ABC):
    """Base class for all blueprints.

    Attributes:
        package_name_suffix: Appended to the module namespace to form
            :attr:`package_name`. ``None`` means the namespace itself.
        project: The module being built.
        options: The ``querent:`` configuration block.
        state: Current :class:`BlueprintState`.
        enabled: Result of :meth:`is_enabled`, fixed at finalization.
            ``None`` until then.
    """

    package_name_suffix: Optional[str] = None

    def __init__(self, data: FoundationData) -> None:
        self.project = data.project
        self.options = data.options
        self._code_writer = data.code_writer
        self.tag = type(self).__name__
        self.logger = logging.getLogger(f"{type(self).__module__}.{self.tag}")
        self.state = BlueprintState.CREATED
        self.enabled: Optional[bool] = None
        self._namespace: Optional[str] = None
        self._package_name: Optional[str] = None
        self._directories: Optional[OutputDirectorySet] = None

    # ------------------------------------------------------------------
    # Identity and configuration
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Unique name, used as the first path segment of every output directory."""
        return blueprint_name(type(self))

    def is_enabled(self) -> bool:
        """Whether this blueprint generates anything. Evaluated once, at finalization."""
        return True

    @property
    def namespace(self) -> str:
        """The module's base package, resolved at finalization."""
        if self._namespace is None:
            raise BlueprintError(f"[{self.tag}] namespace is not resolved before finalization")
        return self._namespace

    @property
    def package_name(self) -> str:
        """Package of the generated code: ``namespace`` plus the optional suffix."""
        if self._package_name is None:
            raise BlueprintError(f"[{self.tag}] package name is not resolved before finalization")
        return self._package_name

    @property
    def intermediates(self) -> Path:
        """This blueprint's scratch directory under the intermediates root."""
        return self._code_writer.intermediates_output_dir / self.name

    # ------------------------------------------------------------------
    # Output directories
    # ------------------------------------------------------------------

    def kotlin(self, variant: str) -> Path:
        return resolve_directory(self._code_writer.source_output_dir, DirectoryKind.KOTLIN, self.name, variant)

    def java(self, variant: str) -> Path:
        return resolve_directory(self._code_writer.source_output_dir, DirectoryKind.JAVA, self.name, variant)

    def res(self, variant: str) -> Path:
        return resolve_directory(self._code_writer.source_output_dir, DirectoryKind.RES, self.name, variant)

    def resources(self, variant: str) -> Path:
        return resolve_directory(self._code_writer.source_output_dir, DirectoryKind.RESOURCES, self.name, variant)

    def directories_for(self, variant: str) -> OutputDirectorySet:
        """Compute (without creating) the four directories for *variant*."""
        return OutputDirectorySet.resolve(self._code_writer.source_output_dir, self.name, variant)

    @property
    def directories(self) -> OutputDirectorySet:
        """Directories bound for the variant currently being emitted."""
        if self._directories is None:
            raise BlueprintError(f"[{self.tag}] no variant is being emitted")
        return self._directories

    @property
    def kotlin_sources(self) -> Path:
        return self.directories.kotlin

    @property
    def java_sources(self) -> Path:
        return self.directories.java

    @property
    def res_sources(self) -> Path:
        return self.directories.res

    @property
    def resources_sources(self) -> Path:
        return self.directories.resources

    # ------------------------------------------------------------------
    # Lifecycle (driven by the host)
    # ------------------------------------------------------------------

    def on_create(self) -> None:
        """Run :meth:`apply` and subscribe to the host's lifecycle callbacks."""
        self.apply()
        components = self.project.components
        components.finalize_dsl(self._on_finalize_dsl)
        components.on_variants(self.emit)
        components.after_variants(self._on_after_variants)

    def _on_finalize_dsl(self, extension: Optional[ModuleExtension]) -> None:
        if self.state is not BlueprintState.CREATED:
            raise BlueprintError(f"[{self.tag}] configuration was already finalized")

        self.enabled = bool(self.is_enabled())

        base = extension.resolve_namespace() if extension is not None else None
        if base is None:
            self.logger.info(
                "[%s] No module namespace found, using '%s'", self.tag, DEFAULT_NAMESPACE
            )
            base = DEFAULT_NAMESPACE
        self._namespace = base
        if self.package_name_suffix is not None:
            self._package_name = f"{base}.{self.package_name_suffix}"
        else:
            self._package_name = base

        if extension is not None:
            for build_type in extension.build_types:
                source_set = self.project.source_sets[build_type.name]
                for kind, path in zip(DirectoryKind, self.directories_for(build_type.name)):
                    source_set.src_dirs(kind, path)

        self.state = BlueprintState.CONFIGURED
        self.logger.debug("[%s] Configured with package '%s'", self.tag, self._package_name)
        self.finalize_dsl(extension)

        if not self.enabled:
            self.state = BlueprintState.SKIPPED
            self.logger.debug("[%s] Disabled, skipping", self.tag)

    def emit(self, variant: Variant) -> None:
        """Generate this blueprint's files for *variant*.

        Does nothing for a skipped blueprint. Calling it twice for the same
        variant rewrites the same files with the same content.

        Raises:
            BlueprintError: If called before finalization.
        """
        if self.state is BlueprintState.CREATED:
            raise BlueprintError(f"[{self.tag}] cannot emit before configuration is finalized")
        if not self.enabled:
            return

        self._directories = self.directories_for(variant.name)
        self._code_writer.prepare(self._directories)
        self.state = BlueprintState.EMITTING
        self.logger.debug("[%s] Emitting variant '%s'", self.tag, variant.name)
        self.on_variants(variant)

    def _on_after_variants(self) -> None:
        if self.state in (BlueprintState.CONFIGURED, BlueprintState.EMITTING):
            self.state = BlueprintState.EMITTED_ALL

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------

    def apply(self) -> None:
        """One-time setup, called from :meth:`on_create` before any callback."""

    def finalize_dsl(self, extension: Optional[ModuleExtension]) -> None:
        """Called after namespace resolution and source-root registration, enabled or not."""

    @abstractmethod
    def on_variants(self, variant: Variant) -> None:
        """Generate files for *variant* into :attr:`directories`."""
        ...

    # ------------------------------------------------------------------
    # Writing helpers
    # ------------------------------------------------------------------

    def render(self, template: str, **context: Any) -> str:
        """Render *template* with ``package_name`` and *context*."""
        return render_template(template, package_name=self.package_name, **context)

    def write_kotlin_file(self, file_name: str, content: str) -> Path:
        """Write a Kotlin file into the current variant's package directory."""
        path = kotlin_file_path(self.kotlin_sources, self.package_name, file_name)
        return self._code_writer.write_text(path, content)

    def write_res_file(self, relative_path: str, content: str) -> Path:
        """Write an Android resource file, e.g. ``xml/locales_config.xml``."""
        return self._code_writer.write_text(self.res_sources / relative_path, content)
