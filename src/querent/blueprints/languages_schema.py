"""Languages schema blueprint -- a Kotlin enumeration of supported locales."""

from __future__ import annotations

from querent.blueprints.base import Blueprint
from querent.models import Variant


class LanguagesSchemaBlueprint(Blueprint):
    """Emits ``<namespace>.i18n.LanguagesSchema`` and ``SupportedLanguage``.

    The unqualified locale comes first, followed by the supported locales in
    declaration order. Constant names are derived from the language tag
    (``en-US`` -> ``EN_US``).
    """

    package_name_suffix = "i18n"

    def is_enabled(self) -> bool:
        return self.options.build_features.languages_schema

    def on_variants(self, variant: Variant) -> None:
        languages = self.options.languages_schema_options
        content = self.render(
            "languages_schema.kt.j2",
            locales=languages.all_locales(),
            default_locale=languages.default_locale,
        )
        self.write_kotlin_file("LanguagesSchema", content)
