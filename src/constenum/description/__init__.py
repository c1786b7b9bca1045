"""
Description — Display labels for enum values, optionally localized.
"""

from constenum.description.localization import (
    LocalizationError,
    LocalizationProvider,
    FallbackProvider,
    DictLocalizationProvider,
    JsonLocalizationProvider,
    lookup_translation,
)
from constenum.description.resolver import (
    get_description,
    humanize_key,
)

__all__ = [
    # Localization
    "LocalizationError",
    "LocalizationProvider",
    "FallbackProvider",
    "DictLocalizationProvider",
    "JsonLocalizationProvider",
    "lookup_translation",
    # Resolver
    "get_description",
    "humanize_key",
]
