"""Canonical Pydantic models shared across all querent modules.

The models fall into two groups:

**Querent options** -- what the build script configures for the generator:
    :class:`BuildFeatures`, :class:`LanguagesSchemaOptions` and
    :class:`QuerentOptions`.

**Host module model** -- what the build orchestrator knows about the
Android module being built:
    :class:`DefaultConfig`, :class:`BuildType`, the tagged union
    :data:`ModuleExtension` over :class:`ApplicationModule`,
    :class:`LibraryModule` and :class:`DynamicFeatureModule`, and the
    per-variant :class:`Variant`.

:class:`ProjectConfig` ties both together and is what
:func:`~querent.config.load_config` returns for a ``querent.yaml`` file.
"""

from __future__ import annotations

import enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from querent.locales import LocaleId


_IDENTIFIER_PATTERN = r"^[A-Za-z][A-Za-z0-9_]*$"
_PACKAGE_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$"


# --- Querent options ---


class BuildFeatures(BaseModel):
    """Feature flags, one per built-in blueprint. All blueprints are opt-in."""

    build_profile: bool = Field(
        default=False, description="Generate the BuildProfile constants object"
    )
    xml_resources: bool = Field(
        default=False, description="Generate locales_config.xml and resources.properties"
    )
    languages_schema: bool = Field(
        default=False, description="Generate the SupportedLanguage enumeration"
    )


class LanguagesSchemaOptions(BaseModel):
    """Locales the module ships resources for.

    ``default_locale`` is the locale of the unqualified ``res/values``
    directory. ``supported_locales`` keeps declaration order; it is the
    order in which locales appear in the generated files.

    Example::

        LanguagesSchemaOptions(
            default_locale="en-US",
            supported_locales=["ro-RO", "en-GB", "ja"],
        )
    """

    default_locale: LocaleId = Field(default_factory=lambda: LocaleId(language="en"))
    supported_locales: list[LocaleId] = Field(default_factory=list)

    @field_validator("supported_locales")
    @classmethod
    def _reject_duplicates(cls, value: list[LocaleId]) -> list[LocaleId]:
        seen: set[LocaleId] = set()
        for locale in value:
            if locale in seen:
                raise ValueError(f"Locale '{locale}' is listed more than once")
            seen.add(locale)
        return value

    def all_locales(self) -> list[LocaleId]:
        """Return the default locale followed by every other supported locale."""
        return [self.default_locale] + [
            loc for loc in self.supported_locales if loc != self.default_locale
        ]


class QuerentOptions(BaseModel):
    """The ``querent:`` block of the project configuration."""

    build_features: BuildFeatures = Field(default_factory=BuildFeatures)
    languages_schema_options: LanguagesSchemaOptions = Field(
        default_factory=LanguagesSchemaOptions
    )
    output_dir: Optional[str] = Field(
        default=None,
        description="Root for generated sources (default: <build>/generated/querent)",
    )


# --- Host module model ---


class ModuleKind(str, enum.Enum):
    """The ``kind`` discriminator of :data:`ModuleExtension`."""

    APPLICATION = "application"
    LIBRARY = "library"
    DYNAMIC_FEATURE = "dynamic-feature"


class DefaultConfig(BaseModel):
    """Module-wide defaults shared by every variant."""

    application_id: Optional[str] = Field(default=None, pattern=_PACKAGE_PATTERN)
    version_code: int = 1
    version_name: Optional[str] = None


class BuildType(BaseModel):
    """A declared build type such as ``debug`` or ``release``."""

    name: str = Field(pattern=_IDENTIFIER_PATTERN)
    debuggable: Optional[bool] = None
    version_name_suffix: Optional[str] = None

    @property
    def is_debuggable(self) -> bool:
        """Explicit ``debuggable`` flag, otherwise ``True`` only for ``debug``."""
        if self.debuggable is not None:
            return self.debuggable
        return self.name == "debug"


def _default_build_types() -> list[BuildType]:
    return [BuildType(name="debug"), BuildType(name="release")]


class _ModuleBase(BaseModel):
    namespace: Optional[str] = Field(default=None, pattern=_PACKAGE_PATTERN)
    default_config: DefaultConfig = Field(default_factory=DefaultConfig)
    build_types: list[BuildType] = Field(default_factory=_default_build_types)

    @field_validator("build_types")
    @classmethod
    def _unique_build_types(cls, value: list[BuildType]) -> list[BuildType]:
        names = [bt.name for bt in value]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate build types: {', '.join(duplicates)}")
        return value

    def resolve_namespace(self) -> Optional[str]:
        """Return the base package of the module, or ``None`` if undeclared."""
        return self.namespace


class ApplicationModule(_ModuleBase):
    """An application module. Falls back to ``application_id`` for its namespace."""

    kind: Literal["application"] = "application"

    def resolve_namespace(self) -> Optional[str]:
        return self.namespace or self.default_config.application_id


class LibraryModule(_ModuleBase):
    """A library module."""

    kind: Literal["library"] = "library"


class DynamicFeatureModule(_ModuleBase):
    """A dynamic feature module."""

    kind: Literal["dynamic-feature"] = "dynamic-feature"


ModuleExtension = Annotated[
    Union[ApplicationModule, LibraryModule, DynamicFeatureModule],
    Field(discriminator="kind"),
]
"""Tagged union of the module types querent recognizes, keyed on ``kind``."""


class Variant(BaseModel):
    """One build variant as reported by the host, e.g. ``debug``."""

    model_config = ConfigDict(frozen=True)

    name: str
    build_type: str
    is_debuggable: bool = False
    version_name: Optional[str] = None
    version_code: int = 1
    application_id: Optional[str] = None


class ProjectConfig(BaseModel):
    """A complete ``querent.yaml`` document.

    ``android`` is ``None`` for modules querent does not recognize; the
    blueprints then fall back to the default namespace.
    """

    name: Optional[str] = None
    android: Optional[ModuleExtension] = None
    querent: QuerentOptions = Field(default_factory=QuerentOptions)
