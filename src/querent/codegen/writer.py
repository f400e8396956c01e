"""The code writer: the only component that writes generated files.

Blueprints compute *what* to write; :class:`CodeWriter` creates output
directories and writes file contents. Writes are atomic and contain no
timestamps, so emitting the same variant twice with unchanged inputs
produces byte-identical files.

I/O errors are not caught here. They propagate to the caller (ultimately
the host build), which reports the underlying filesystem error.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Union

from querent.utils.files import atomic_write

logger = logging.getLogger(__name__)


class CodeWriter:
    """Writes generated sources below a project's output roots.

    Args:
        source_output_dir: Root of the generated source trees (see
            :mod:`querent.codegen.paths`).
        intermediates_output_dir: Root for files that are not source
            roots, such as per-blueprint scratch data.
    """

    def __init__(
        self,
        source_output_dir: Union[str, Path],
        intermediates_output_dir: Union[str, Path],
    ) -> None:
        self.source_output_dir = Path(source_output_dir)
        self.intermediates_output_dir = Path(intermediates_output_dir)
        self._written: list[Path] = []

    @property
    def written_files(self) -> list[Path]:
        """Every file written by this writer, in write order."""
        return list(self._written)

    def prepare(self, directories: Iterable[Path]) -> None:
        """Create every directory in *directories*, including parents."""
        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Union[str, Path], content: str) -> Path:
        """Write *content* to *path* atomically and return the path.

        A trailing newline is appended when *content* lacks one.
        """
        target = Path(path)
        if not content.endswith("\n"):
            content += "\n"
        atomic_write(target, content)
        if target not in self._written:
            self._written.append(target)
        logger.debug("Wrote %s (%d bytes)", target, len(content.encode("utf-8")))
        return target


def kotlin_file_path(root: Union[str, Path], package_name: str, file_name: str) -> Path:
    """Lay out a Kotlin file by package, e.g. ``<root>/com/example/build/BuildProfile.kt``."""
    name = file_name if file_name.endswith(".kt") else f"{file_name}.kt"
    return Path(root).joinpath(*package_name.split("."), name)
