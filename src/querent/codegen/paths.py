"""Per-blueprint, per-variant output directory layout.

Every blueprint writes into its own subtree of the source output root::

    <root>/<blueprint name>/<variant name>/kotlin
    <root>/<blueprint name>/<variant name>/java
    <root>/<blueprint name>/<variant name>/res
    <root>/<blueprint name>/<variant name>/resources

Paths are pure functions of their inputs. Nothing in this module touches
the filesystem; directory creation belongs to
:class:`~querent.codegen.writer.CodeWriter`. Because blueprint names are
unique within a project (enforced by
:class:`~querent.blueprints.manager.BlueprintManager`), two blueprints never
share a directory for the same variant.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union


class DirectoryKind(str, enum.Enum):
    """The four kinds of generated source roots."""

    KOTLIN = "kotlin"
    JAVA = "java"
    RES = "res"
    RESOURCES = "resources"


def resolve_directory(
    root: Union[str, Path],
    kind: Union[DirectoryKind, str],
    generator_name: str,
    variant_name: str,
) -> Path:
    """Return the directory of *kind* for a blueprint and variant.

    Args:
        root: Source output root shared by all blueprints.
        kind: One of :class:`DirectoryKind` (or its string value).
        generator_name: The blueprint's :attr:`~querent.blueprints.base.Blueprint.name`.
        variant_name: The variant's name, e.g. ``"debug"``.

    Returns:
        ``<root>/<generator_name>/<variant_name>/<kind>``.

    Raises:
        ValueError: If *kind* is not a known directory kind.
    """
    return Path(root) / generator_name / variant_name / DirectoryKind(kind).value


@dataclass(frozen=True)
class OutputDirectorySet:
    """The four output directories of one (blueprint, variant) pair."""

    kotlin: Path
    java: Path
    res: Path
    resources: Path

    @classmethod
    def resolve(
        cls, root: Union[str, Path], generator_name: str, variant_name: str
    ) -> OutputDirectorySet:
        """Compute the directory set for *generator_name* and *variant_name*."""
        return cls(
            **{
                kind.value: resolve_directory(root, kind, generator_name, variant_name)
                for kind in DirectoryKind
            }
        )

    def get(self, kind: Union[DirectoryKind, str]) -> Path:
        """Return the directory of the given *kind*."""
        return getattr(self, DirectoryKind(kind).value)

    def __iter__(self) -> Iterator[Path]:
        for kind in DirectoryKind:
            yield self.get(kind)

    def as_dict(self) -> dict[str, str]:
        """Return ``{kind: path}`` with string paths, for JSON output."""
        return {kind.value: str(self.get(kind)) for kind in DirectoryKind}
