"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest

from constenum import (
    ConstEnumConfig,
    JsonLocalizationProvider,
    ValueRule,
    create_provider,
    define,
    get_description,
)


class TestFromEnv:
    """Tests for reading settings from the environment."""

    def test_defaults(self):
        config = ConstEnumConfig.from_env({})
        assert config == ConstEnumConfig()
        assert config.default_locale == "en"
        assert config.fallback_locale is None
        assert config.translations_path is None
        assert config.strict_validation is True

    def test_all_variables(self, tmp_path):
        config = ConstEnumConfig.from_env({
            "CONSTENUM_LOCALE": "es",
            "CONSTENUM_FALLBACK_LOCALE": "en",
            "CONSTENUM_TRANSLATIONS": str(tmp_path),
            "CONSTENUM_STRICT": "false",
        })
        assert config.default_locale == "es"
        assert config.fallback_locale == "en"
        assert config.translations_path == tmp_path
        assert config.strict_validation is False

    @pytest.mark.parametrize("raw, expected", [("1", True), ("yes", True), ("0", False), (" Off ", False)])
    def test_strict_parsing(self, raw, expected):
        assert ConstEnumConfig.from_env({"CONSTENUM_STRICT": raw}).strict_validation is expected

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("CONSTENUM_LOCALE", "fr")
        assert ConstEnumConfig.from_env().default_locale == "fr"


class TestCreateProvider:
    """Tests for building providers from config."""

    def test_none_without_translations(self):
        assert create_provider(ConstEnumConfig()) is None

    def test_json_provider(self, tmp_path: Path):
        (tmp_path / "es").mkdir()
        (tmp_path / "es" / "enums.json").write_text(
            json.dumps({"user_type": {"3": "Súper administrador"}}), encoding="utf-8"
        )
        config = ConstEnumConfig(default_locale="es", translations_path=tmp_path)

        provider = create_provider(config)

        assert isinstance(provider, JsonLocalizationProvider)
        user_type = define(
            "UserType",
            {"Administrator": 0, "SuperAdministrator": 3},
            localization_key="enums.user_type",
        )
        assert get_description(user_type, 3, provider) == "Súper administrador"

    def test_strictness_feeds_rules(self):
        config = ConstEnumConfig.from_env({"CONSTENUM_STRICT": "off"})
        rule = ValueRule(define("UserType", {"Moderator": 1}), strict=config.strict_validation)
        assert rule.passes("1")
