"""
Configuration — Locale and validation defaults for applications.

Nothing in the library reads this implicitly; applications build a config
(usually from the environment) and pass the resulting provider and
strictness flag where they need them.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from constenum.description.localization import JsonLocalizationProvider, LocalizationProvider


_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class ConstEnumConfig:
    """Configuration for descriptions and validation."""
    default_locale: str = "en"
    fallback_locale: str | None = None
    translations_path: Path | None = None  # Directory of JSON translation files
    strict_validation: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ConstEnumConfig":
        """
        Read settings from the environment.

        Variables:
            CONSTENUM_LOCALE: default locale
            CONSTENUM_FALLBACK_LOCALE: locale tried when a key is missing
            CONSTENUM_TRANSLATIONS: translations directory
            CONSTENUM_STRICT: "0"/"false"/"no"/"off" disables strict validation
        """
        env = os.environ if environ is None else environ
        translations = env.get("CONSTENUM_TRANSLATIONS")
        strict = env.get("CONSTENUM_STRICT")
        return cls(
            default_locale=env.get("CONSTENUM_LOCALE") or "en",
            fallback_locale=env.get("CONSTENUM_FALLBACK_LOCALE") or None,
            translations_path=Path(translations) if translations else None,
            strict_validation=strict is None or strict.strip().lower() not in _FALSE_VALUES,
        )


def create_provider(config: ConstEnumConfig) -> LocalizationProvider | None:
    """JSON provider for the configured translations directory, or None."""
    if config.translations_path is None:
        return None
    return JsonLocalizationProvider(
        config.translations_path,
        locale=config.default_locale,
        fallback_locale=config.fallback_locale,
    )
