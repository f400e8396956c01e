"""XML resources blueprint -- per-app language resources.

Emits two files into the variant's ``res`` directory:

* ``xml/locales_config.xml`` -- the ``<locale-config>`` document referenced
  from the manifest's ``android:localeConfig``.
* ``resources.properties`` -- declares ``unqualifiedResLocale``, the locale
  of the unqualified ``values`` directory.
"""

from __future__ import annotations

from querent.blueprints.base import Blueprint
from querent.models import Variant

LOCALES_CONFIG_PATH = "xml/locales_config.xml"
RESOURCES_PROPERTIES_PATH = "resources.properties"


class XmlResourcesBlueprint(Blueprint):

    def is_enabled(self) -> bool:
        return self.options.build_features.xml_resources

    def on_variants(self, variant: Variant) -> None:
        languages = self.options.languages_schema_options
        if languages.default_locale in languages.supported_locales:
            self.logger.warning(
                "[%s] Default locale '%s' is also listed as supported; emitting it once",
                self.tag,
                languages.default_locale,
            )

        self.write_res_file(
            LOCALES_CONFIG_PATH,
            self.render("locales_config.xml.j2", locales=languages.all_locales()),
        )
        self.write_res_file(
            RESOURCES_PROPERTIES_PATH,
            self.render("resources.properties.j2", default_locale=languages.default_locale),
        )
