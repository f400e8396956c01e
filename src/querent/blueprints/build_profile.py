"""Build profile blueprint -- a ``BuildProfile`` constants object per variant."""

from __future__ import annotations

from querent.blueprints.base import Blueprint
from querent.models import Variant
from querent.utils.git import git_commit_hash


class BuildProfileBlueprint(Blueprint):
    """Emits ``<namespace>.build.BuildProfile`` with version, build type and commit."""

    package_name_suffix = "build"

    def is_enabled(self) -> bool:
        return self.options.build_features.build_profile

    def on_variants(self, variant: Variant) -> None:
        content = self.render(
            "build_profile.kt.j2",
            variant=variant,
            git_hash=git_commit_hash(self.project.project_dir),
        )
        self.write_kotlin_file("BuildProfile", content)
