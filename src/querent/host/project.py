"""A module as seen by the build orchestrator.

:class:`Project` owns the module extension, the output roots, the source
set container and the callback registry. :meth:`Project.evaluate` plays the
host's part of the lifecycle exactly once::

    finalize_dsl(extension)          # once
    on_variants(variant)             # once per selected variant
    after_variants()                 # once
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from querent.exceptions import HostError
from querent.host.components import AndroidComponents
from querent.host.source_sets import SourceSetContainer
from querent.models import ApplicationModule, ModuleExtension, Variant

logger = logging.getLogger(__name__)

_DEFAULT_BUILD_DIRNAME = "build"


class Project:
    """An Android module under build.

    Args:
        project_dir: The module's root directory.
        extension: The module configuration, or ``None`` when the module
            type is not recognized.
        build_dir: Build output directory (default ``<project_dir>/build``).
        name: Display name (default: the directory name).
        source_output_dir: Override for the generated source root (default
            ``<build_dir>/generated/querent``).
    """

    def __init__(
        self,
        project_dir: Union[str, Path],
        extension: Optional[ModuleExtension] = None,
        build_dir: Optional[Union[str, Path]] = None,
        name: Optional[str] = None,
        source_output_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        self.project_dir = Path(project_dir)
        self.extension = extension
        self.build_dir = (
            Path(build_dir) if build_dir is not None
            else self.project_dir / _DEFAULT_BUILD_DIRNAME
        )
        self.name = name or self.project_dir.resolve().name
        self.source_output_dir = (
            Path(source_output_dir) if source_output_dir is not None
            else self.build_dir / "generated" / "querent"
        )
        self.intermediates_output_dir = self.build_dir / "intermediates" / "querent"
        self.components = AndroidComponents()
        self.source_sets = SourceSetContainer()
        self.logger = logging.getLogger(f"querent.project.{self.name}")
        self._evaluated = False

    @property
    def evaluated(self) -> bool:
        """Whether :meth:`evaluate` already ran."""
        return self._evaluated

    def variants(self) -> list[Variant]:
        """Return one :class:`~querent.models.Variant` per declared build type."""
        if self.extension is None:
            return []

        defaults = self.extension.default_config
        application_id = (
            defaults.application_id
            if isinstance(self.extension, ApplicationModule)
            else None
        )
        variants = []
        for build_type in self.extension.build_types:
            version_name = defaults.version_name
            if version_name is not None and build_type.version_name_suffix:
                version_name += build_type.version_name_suffix
            variants.append(
                Variant(
                    name=build_type.name,
                    build_type=build_type.name,
                    is_debuggable=build_type.is_debuggable,
                    version_name=version_name,
                    version_code=defaults.version_code,
                    application_id=application_id,
                )
            )
        return variants

    def evaluate(self, variant_names: Optional[Iterable[str]] = None) -> list[Variant]:
        """Fire the lifecycle callbacks.

        Args:
            variant_names: Restrict the reported variants to these names.
                ``None`` reports every variant.

        Returns:
            The variants that were reported, in report order.

        Raises:
            HostError: If the project was already evaluated or a requested
                variant does not exist.
        """
        if self._evaluated:
            raise HostError(f"Project '{self.name}' has already been evaluated")

        available = self.variants()
        if variant_names is not None:
            wanted = list(dict.fromkeys(variant_names))
            by_name = {v.name: v for v in available}
            unknown = [n for n in wanted if n not in by_name]
            if unknown:
                known = ", ".join(by_name) or "none"
                raise HostError(
                    f"Unknown variant(s): {', '.join(unknown)} (available: {known})"
                )
            selected = [by_name[n] for n in wanted]
        else:
            selected = available

        self._evaluated = True
        if self.extension is None:
            self.logger.info("No Android module configuration found")

        self.components.run_finalize_dsl(self.extension)
        for variant in selected:
            self.components.run_on_variants(variant)
        self.components.run_after_variants()
        return selected
