"""Blueprints -- the code-generation units of querent.

* :class:`Blueprint` -- abstract base every blueprint extends.
* :class:`BlueprintManager` -- loads blueprints and wires them to the host.
* :class:`BuildProfileBlueprint`, :class:`XmlResourcesBlueprint`,
  :class:`LanguagesSchemaBlueprint` -- the built-in blueprints, each
  enabled by one flag of :class:`~querent.models.BuildFeatures`.
"""

from querent.blueprints.base import (
    DEFAULT_NAMESPACE,
    Blueprint,
    BlueprintState,
    FoundationData,
)
from querent.blueprints.build_profile import BuildProfileBlueprint
from querent.blueprints.languages_schema import LanguagesSchemaBlueprint
from querent.blueprints.manager import BlueprintManager
from querent.blueprints.xml_resources import XmlResourcesBlueprint

__all__ = [
    "DEFAULT_NAMESPACE",
    "Blueprint",
    "BlueprintManager",
    "BlueprintState",
    "BuildProfileBlueprint",
    "FoundationData",
    "LanguagesSchemaBlueprint",
    "XmlResourcesBlueprint",
]
