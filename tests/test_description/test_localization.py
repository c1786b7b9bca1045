"""Tests for translation providers."""

import json
from pathlib import Path

import pytest

from constenum import (
    DictLocalizationProvider,
    JsonLocalizationProvider,
    LocalizationError,
    LocalizationProvider,
    define,
    get_description,
)
from constenum.description import lookup_translation


class TestLookupTranslation:
    """Tests for flat/nested key lookup."""

    def test_flat(self):
        assert lookup_translation({"enums.role.1": "Admin"}, "enums.role.1") == "Admin"

    def test_nested(self):
        table = {"enums": {"role": {"1": "Admin"}}}
        assert lookup_translation(table, "enums.role.1") == "Admin"

    def test_mixed(self):
        table = {"enums.role": {"1": "Admin"}}
        assert lookup_translation(table, "enums.role.1") == "Admin"

    def test_dotted_leaf(self):
        """Float values keep their dot in the final segment."""
        table = {"enums": {"ratio": {"0.5": "Half"}}}
        assert lookup_translation(table, "enums.ratio.0.5") == "Half"

    def test_missing(self):
        assert lookup_translation({"enums": {"role": {}}}, "enums.role.1") is None

    def test_non_string_leaf_ignored(self):
        assert lookup_translation({"enums.role.1": 5}, "enums.role.1") is None


class TestDictProvider:
    """Tests for in-memory translations."""

    def test_satisfies_protocol(self):
        assert isinstance(DictLocalizationProvider({}), LocalizationProvider)

    def test_fallback_locale(self):
        provider = DictLocalizationProvider(
            {"en": {"greeting": "Hello"}, "es": {"farewell": "Adiós"}},
            locale="es",
            fallback_locale="en",
        )
        assert provider.translate("farewell") == "Adiós"
        assert provider.translate("greeting") == "Hello"
        assert provider.translate("missing") is None

    def test_unknown_locale(self):
        provider = DictLocalizationProvider({"en": {"greeting": "Hello"}})
        assert provider.translate("greeting", locale="de") is None


class TestJsonProvider:
    """Tests for JSON file translations."""

    @pytest.fixture
    def lang_dir(self, tmp_path: Path) -> Path:
        (tmp_path / "es").mkdir()
        (tmp_path / "es" / "enums.json").write_text(
            json.dumps({"user_type": {"3": "Súper administrador"}}), encoding="utf-8"
        )
        (tmp_path / "en.json").write_text(
            json.dumps({"enums.user_type.1": "Mod"}), encoding="utf-8"
        )
        return tmp_path

    def test_namespace_file(self, lang_dir):
        provider = JsonLocalizationProvider(lang_dir, locale="es")
        assert provider.translate("enums.user_type.3") == "Súper administrador"

    def test_locale_file(self, lang_dir):
        provider = JsonLocalizationProvider(lang_dir, locale="en")
        assert provider.translate("enums.user_type.1") == "Mod"

    def test_fallback_across_files(self, lang_dir):
        provider = JsonLocalizationProvider(lang_dir, locale="es", fallback_locale="en")
        assert provider.translate("enums.user_type.1") == "Mod"

    def test_missing_directory_is_empty(self, tmp_path):
        provider = JsonLocalizationProvider(tmp_path / "nowhere")
        assert provider.translate("enums.user_type.1") is None

    def test_malformed_json(self, tmp_path):
        (tmp_path / "en").mkdir()
        (tmp_path / "en" / "enums.json").write_text("{not json", encoding="utf-8")
        provider = JsonLocalizationProvider(tmp_path)
        with pytest.raises(LocalizationError, match="Malformed"):
            provider.translate("enums.x.1")

    def test_invalid_utf8(self, tmp_path):
        """Undecodable bytes are reported like any other malformed file."""
        (tmp_path / "en.json").write_bytes(b'{"a": "\xff\xfe"}')
        provider = JsonLocalizationProvider(tmp_path)
        with pytest.raises(LocalizationError, match="Malformed"):
            provider.translate("greeting")

    def test_non_object_json(self, tmp_path):
        (tmp_path / "en.json").write_text("[1, 2]", encoding="utf-8")
        provider = JsonLocalizationProvider(tmp_path)
        with pytest.raises(LocalizationError, match="must contain an object"):
            provider.translate("greeting")

    def test_files_cached_until_cleared(self, lang_dir):
        provider = JsonLocalizationProvider(lang_dir, locale="en")
        assert provider.translate("enums.user_type.1") == "Mod"

        (lang_dir / "en.json").write_text(json.dumps({"enums.user_type.1": "Moderator!"}), encoding="utf-8")
        assert provider.translate("enums.user_type.1") == "Mod"

        provider.clear()
        assert provider.translate("enums.user_type.1") == "Moderator!"

    def test_drives_descriptions(self, lang_dir):
        user_type = define(
            "UserType",
            {"Administrator": 0, "Moderator": 1, "Subscriber": 2, "SuperAdministrator": 3},
            localization_key="enums.user_type",
        )
        provider = JsonLocalizationProvider(lang_dir, locale="es")
        assert get_description(user_type, 3, provider) == "Súper administrador"
        assert get_description(user_type, 2, provider) == "Subscriber"
