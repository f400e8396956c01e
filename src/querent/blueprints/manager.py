"""Blueprint manager -- registration, discovery and lifecycle wiring.

:class:`BlueprintManager` instantiates the built-in blueprints and any
third-party blueprints registered as Python entry points, rejects duplicate
names (two blueprints with one name would share output directories), and
calls :meth:`~querent.blueprints.base.Blueprint.on_create` on each so they
subscribe to the host's callbacks.

Third-party packages register blueprints in their ``pyproject.toml``::

    [project.entry-points."querent.blueprints"]
    my-blueprint = "my_package.blueprints:MyBlueprint"
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import Optional

from querent.blueprints.base import Blueprint, BlueprintState, FoundationData
from querent.blueprints.build_profile import BuildProfileBlueprint
from querent.blueprints.languages_schema import LanguagesSchemaBlueprint
from querent.blueprints.xml_resources import XmlResourcesBlueprint
from querent.exceptions import BlueprintError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "querent.blueprints"
"""The entry-point group name used for third-party blueprint discovery."""

BUILTIN_BLUEPRINTS: tuple[type[Blueprint], ...] = (
    BuildProfileBlueprint,
    XmlResourcesBlueprint,
    LanguagesSchemaBlueprint,
)
"""Blueprints shipped with querent, loaded before any third-party ones."""


class BlueprintManager:
    """Owns every blueprint of one project for one build invocation.

    Example:
        Typical usage::

            manager = BlueprintManager(data)
            manager.load_builtins()
            manager.discover()
            project.evaluate()
    """

    def __init__(self, data: FoundationData) -> None:
        self._data = data
        self._blueprints: dict[str, Blueprint] = {}

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_builtins(self) -> list[str]:
        """Instantiate and load every class in :data:`BUILTIN_BLUEPRINTS`."""
        names = []
        for cls in BUILTIN_BLUEPRINTS:
            names.append(self.load_blueprint(cls(self._data)))
        return names

    def discover(self) -> list[str]:
        """Load third-party blueprints from the ``querent.blueprints`` entry points.

        Returns:
            Names of the blueprints that were loaded. Entry points that fail
            to import or instantiate are logged as warnings and skipped.
        """
        loaded: list[str] = []
        for ep in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
            try:
                blueprint_cls = ep.load()
                blueprint: Blueprint = blueprint_cls(self._data)
                loaded.append(self.load_blueprint(blueprint))
            except Exception as exc:
                logger.warning("Failed to load blueprint '%s': %s", ep.name, exc)
        return loaded

    def load_blueprint(self, blueprint: Blueprint) -> str:
        """Register *blueprint* and subscribe it to the host's callbacks.

        Returns:
            The blueprint's name.

        Raises:
            BlueprintError: If a blueprint with the same name is already
                loaded, or the project was already evaluated.
        """
        name = blueprint.name
        if name in self._blueprints:
            raise BlueprintError(f"Blueprint '{name}' is already loaded")
        if self._data.project.evaluated:
            raise BlueprintError(
                f"Cannot load blueprint '{name}' after the project was evaluated"
            )

        blueprint.on_create()
        self._blueprints[name] = blueprint
        logger.debug("Loaded blueprint '%s'", name)
        return name

    # ------------------------------------------------------------------
    # Querying
    # ------------------------------------------------------------------

    def get_blueprint(self, name: str) -> Blueprint:
        """Return the loaded blueprint called *name*.

        Raises:
            BlueprintError: If no such blueprint is loaded.
        """
        try:
            return self._blueprints[name]
        except KeyError:
            raise BlueprintError(f"Blueprint '{name}' is not loaded") from None

    @property
    def blueprints(self) -> list[Blueprint]:
        """Loaded blueprints in load order."""
        return list(self._blueprints.values())

    def list_blueprints(self) -> list[dict[str, Optional[str]]]:
        """Describe every loaded blueprint for display.

        Package names are only known after finalization; before that the
        ``package_name`` entry is ``None``.
        """
        rows = []
        for bp in self._blueprints.values():
            rows.append(
                {
                    "name": bp.name,
                    "class": bp.tag,
                    "state": bp.state.value,
                    "enabled": None if bp.enabled is None else str(bp.enabled).lower(),
                    "package_name": (
                        bp.package_name if bp.state is not BlueprintState.CREATED else None
                    ),
                }
            )
        return rows
