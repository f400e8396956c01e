"""Output layout, file writing and templates for generated sources.

* :mod:`~querent.codegen.paths` -- pure computation of the per-blueprint,
  per-variant output directories.
* :mod:`~querent.codegen.writer` -- :class:`CodeWriter`, the only place
  that touches the filesystem.
* :mod:`~querent.codegen.templates` -- Jinja2 environment for the Kotlin,
  XML and properties templates.
"""

from querent.codegen.paths import DirectoryKind, OutputDirectorySet, resolve_directory
from querent.codegen.writer import CodeWriter

__all__ = ["CodeWriter", "DirectoryKind", "OutputDirectorySet", "resolve_directory"]
