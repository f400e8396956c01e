"""Locale identifiers and their Android resource qualifiers.

A :class:`LocaleId` is a language with an optional script and region. It is
accepted in the configuration file as a plain string and rendered three
ways by the blueprints:

* :attr:`LocaleId.tag` -- BCP 47 language tag (``en-US``), used in
  ``locales_config.xml`` and ``resources.properties``.
* :attr:`LocaleId.android_qualifier` -- resource directory qualifier
  (``en-rUS``, or ``b+zh+Hans+CN`` when a script is present).
* :attr:`LocaleId.constant_name` -- Kotlin enum constant (``EN_US``).
"""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator


# <lang>[-<Script>][-[r]<REGION>], with '_' accepted as separator.
_LOCALE_RE = re.compile(
    r"^(?P<language>[A-Za-z]{2,3})"
    r"(?:[-_](?P<script>[A-Za-z]{4}))?"
    r"(?:[-_]r?(?P<region>[A-Za-z]{2}|[0-9]{3}))?$"
)

# Android resource qualifier in BCP 47 form: b+<lang>[+<tag>...]
_BCP47_QUALIFIER_RE = re.compile(r"^b\+(?P<tags>[A-Za-z0-9+]+)$")


def parse_locale(value: str) -> dict[str, Optional[str]]:
    """Split a locale identifier into normalized components.

    Accepts ``en``, ``en-US``, ``en_US``, ``en-rUS``, ``zh-Hans-CN`` and the
    Android ``b+zh+Hans+CN`` form.

    Args:
        value: The identifier to parse.

    Returns:
        A dict with ``language``, ``script`` and ``region`` keys.

    Raises:
        ValueError: If *value* is not a recognizable locale identifier.
    """
    text = value.strip()
    m = _BCP47_QUALIFIER_RE.match(text)
    if m:
        text = "-".join(m.group("tags").split("+"))

    m = _LOCALE_RE.match(text)
    if not m:
        raise ValueError(f"Invalid locale identifier: {value!r}")

    script = m.group("script")
    region = m.group("region")
    return {
        "language": m.group("language").lower(),
        "script": script.title() if script else None,
        "region": region.upper() if region else None,
    }


class LocaleId(BaseModel):
    """A language with optional script and region.

    Instances are immutable and hashable so they can be deduplicated in sets.
    Validation accepts either a mapping of components or any string
    understood by :func:`parse_locale`.

    Example::

        LocaleId.model_validate("en_gb").tag   # "en-GB"
    """

    model_config = ConfigDict(frozen=True)

    language: str
    script: Optional[str] = None
    region: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return parse_locale(data)
        return data

    @classmethod
    def parse(cls, value: str) -> LocaleId:
        """Build a :class:`LocaleId` from a string identifier."""
        return cls.model_validate(value)

    @property
    def tag(self) -> str:
        """BCP 47 language tag, e.g. ``en-US`` or ``zh-Hans-CN``."""
        return "-".join(p for p in (self.language, self.script, self.region) if p)

    @property
    def android_qualifier(self) -> str:
        """Android resource qualifier, e.g. ``en-rUS`` or ``b+zh+Hans+CN``."""
        if self.script:
            return "b+" + "+".join(
                p for p in (self.language, self.script, self.region) if p
            )
        if self.region:
            return f"{self.language}-r{self.region}"
        return self.language

    @property
    def constant_name(self) -> str:
        """Identifier usable as a Kotlin enum constant, e.g. ``EN_US``."""
        return self.tag.replace("-", "_").upper()

    def __str__(self) -> str:
        return self.tag
