"""Additional source roots registered per build type."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Union

from querent.codegen.paths import DirectoryKind


@dataclass
class SourceSet:
    """Source roots of one build type, grouped by :class:`DirectoryKind`."""

    name: str
    kotlin: list[Path] = field(default_factory=list)
    java: list[Path] = field(default_factory=list)
    res: list[Path] = field(default_factory=list)
    resources: list[Path] = field(default_factory=list)

    def src_dirs(self, kind: Union[DirectoryKind, str], *paths: Path) -> None:
        """Add *paths* as roots of *kind*. Already registered paths are ignored."""
        roots: list[Path] = getattr(self, DirectoryKind(kind).value)
        for path in paths:
            if path not in roots:
                roots.append(path)

    def as_dict(self) -> dict[str, list[str]]:
        return {
            kind.value: [str(p) for p in getattr(self, kind.value)]
            for kind in DirectoryKind
        }


class SourceSetContainer:
    """Source sets by name, created on first access like the host's container."""

    def __init__(self) -> None:
        self._sets: dict[str, SourceSet] = {}

    def __getitem__(self, name: str) -> SourceSet:
        if name not in self._sets:
            self._sets[name] = SourceSet(name=name)
        return self._sets[name]

    def __contains__(self, name: object) -> bool:
        return name in self._sets

    def __iter__(self) -> Iterator[SourceSet]:
        return iter(self._sets.values())

    def __len__(self) -> int:
        return len(self._sets)

    def as_dict(self) -> dict[str, dict[str, list[str]]]:
        return {s.name: s.as_dict() for s in self._sets.values()}
