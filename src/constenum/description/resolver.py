"""
Description Resolver — Human-readable labels for enum values.

Resolution order for a value:
1. The enum's ``describe`` override, when it returns a string
2. ``<localization_key>.<value>`` from the given provider
3. The key name split into words: "SuperAdministrator" → "Super administrator"
"""

import re
from typing import Any

from constenum.core.definition import EnumLike, resolve_definition
from constenum.description.localization import LocalizationProvider


# Any character followed by an uppercase letter marks a word boundary
_WORD_BOUNDARY = re.compile(r"(.)(?=[A-Z])")


def humanize_key(key: str) -> str:
    """
    Turn a constant name into a sentence-case phrase.

    Examples:
        >>> humanize_key("SuperAdministrator")
        'Super administrator'
        >>> humanize_key("SUPER_ADMIN")
        'Super admin'
        >>> humanize_key("read_only")
        'Read only'
    """
    if key.replace("_", "").isupper():
        key = key.lower()
    snake = _WORD_BOUNDARY.sub(r"\1_", key).lower()
    phrase = " ".join(word for word in snake.split("_") if word)
    return phrase[:1].upper() + phrase[1:]


def get_description(
    enum: EnumLike,
    value: Any,
    provider: LocalizationProvider | None = None,
    locale: str | None = None,
) -> str:
    """
    Describe one enum value.

    Args:
        enum: EnumDefinition or BaseEnum subclass
        value: A declared value (strict match)
        provider: Translation source; skipped when None
        locale: Locale passed through to the provider

    Raises:
        ValueNotFoundError: ``value`` is not declared on the enum
    """
    definition = resolve_definition(enum)
    key = definition.key_for(value, strict=True)

    if definition.describe is not None:
        override = definition.describe(value)
        if override is not None:
            return override

    if definition.localization_key and provider is not None:
        translated = provider.translate(f"{definition.localization_key}.{value}", locale)
        if translated is not None:
            return translated

    return humanize_key(key)
