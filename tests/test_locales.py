"""Tests for querent.locales."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from querent.locales import LocaleId, parse_locale


class TestParseLocale:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("en", {"language": "en", "script": None, "region": None}),
            ("en-US", {"language": "en", "script": None, "region": "US"}),
            ("en_us", {"language": "en", "script": None, "region": "US"}),
            ("en-rGB", {"language": "en", "script": None, "region": "GB"}),
            ("zh-hans-cn", {"language": "zh", "script": "Hans", "region": "CN"}),
            ("b+zh+Hant+TW", {"language": "zh", "script": "Hant", "region": "TW"}),
            ("es-419", {"language": "es", "script": None, "region": "419"}),
            ("fil", {"language": "fil", "script": None, "region": None}),
        ],
    )
    def test_accepted_forms(self, value: str, expected: dict) -> None:
        assert parse_locale(value) == expected

    @pytest.mark.parametrize("value", ["", "e", "english", "en-", "en-USA1", "12-US"])
    def test_rejects_malformed(self, value: str) -> None:
        with pytest.raises(ValueError, match="Invalid locale identifier"):
            parse_locale(value)


class TestLocaleId:
    def test_validates_from_string(self) -> None:
        locale = LocaleId.model_validate("ro_ro")
        assert locale == LocaleId(language="ro", region="RO")

    def test_parse_rejects_malformed(self) -> None:
        with pytest.raises(ValidationError):
            LocaleId.parse("not a locale")

    def test_tag(self) -> None:
        assert LocaleId.parse("en-rUS").tag == "en-US"
        assert LocaleId.parse("ja").tag == "ja"
        assert str(LocaleId.parse("zh-Hans-CN")) == "zh-Hans-CN"

    def test_android_qualifier(self) -> None:
        assert LocaleId.parse("ja").android_qualifier == "ja"
        assert LocaleId.parse("en-GB").android_qualifier == "en-rGB"
        assert LocaleId.parse("zh-Hans-CN").android_qualifier == "b+zh+Hans+CN"

    def test_constant_name(self) -> None:
        assert LocaleId.parse("en-US").constant_name == "EN_US"
        assert LocaleId.parse("zh-Hant").constant_name == "ZH_HANT"

    def test_hashable_and_frozen(self) -> None:
        locales = {LocaleId.parse("en-US"), LocaleId.parse("en_us")}
        assert len(locales) == 1
        with pytest.raises(ValidationError):
            LocaleId.parse("en").language = "fr"  # type: ignore[misc]
