"""
Lookup & Projection — Free functions over an enum's constant table.

Every function takes the enum as its first argument: an EnumDefinition
from ``define()`` or a BaseEnum subclass. Callers extend the toolkit by
writing their own functions in the same shape.
"""

import random
from typing import Any

from constenum.core.definition import EnumLike, Scalar, resolve_definition, values_match
from constenum.core.errors import DefinitionError, KeyNotFoundError
from constenum.description.localization import LocalizationProvider
from constenum.description.resolver import get_description


def get_keys(enum: EnumLike) -> list[str]:
    """All keys in declaration order."""
    return list(resolve_definition(enum).constants.keys())


def get_values(enum: EnumLike) -> list[Scalar]:
    """All values, matching the order of ``get_keys``."""
    return list(resolve_definition(enum).constants.values())


def to_array(enum: EnumLike) -> dict[str, Scalar]:
    """The full key→value table as a new dict."""
    return dict(resolve_definition(enum).constants)


def get_key(enum: EnumLike, value: Any) -> str:
    """
    First key whose value is strictly equal to ``value``.

    Raises:
        ValueNotFoundError: No key maps to ``value``
    """
    return resolve_definition(enum).key_for(value, strict=True)


def get_value(enum: EnumLike, key: str) -> Scalar:
    """
    Value mapped to ``key``.

    Raises:
        KeyNotFoundError: ``key`` is not declared
    """
    definition = resolve_definition(enum)
    constants = definition.constants
    if not isinstance(key, str) or key not in constants:
        raise KeyNotFoundError(definition.name, key)
    return constants[key]


def _choose(enum: EnumLike, rng: random.Random | None) -> tuple[str, Scalar]:
    definition = resolve_definition(enum)
    items = list(definition.members.items())
    if not items:
        raise DefinitionError(f"Cannot pick a random constant: {definition.name} declares no constants")
    return (rng or random).choice(items)


def get_random_key(enum: EnumLike, rng: random.Random | None = None) -> str:
    """Uniformly chosen key. Pass ``rng`` for reproducible draws."""
    return _choose(enum, rng)[0]


def get_random_value(enum: EnumLike, rng: random.Random | None = None) -> Scalar:
    """Uniformly chosen value. Pass ``rng`` for reproducible draws."""
    return _choose(enum, rng)[1]


def has_key(enum: EnumLike, key: Any) -> bool:
    """Case-sensitive key membership."""
    return isinstance(key, str) and key in resolve_definition(enum).constants


def has_value(enum: EnumLike, value: Any, strict: bool = True) -> bool:
    """Value membership; see ``values_match`` for strict vs loose."""
    return any(
        values_match(value, declared, strict)
        for declared in resolve_definition(enum).constants.values()
    )


def to_select_array(
    enum: EnumLike,
    provider: LocalizationProvider | None = None,
    locale: str | None = None,
) -> dict[Scalar, str]:
    """
    Map each value to its description, in declaration order.

    Duplicate values keep the description of their first key.
    """
    definition = resolve_definition(enum)
    options: dict[Scalar, str] = {}
    for value in definition.constants.values():
        if value not in options:
            options[value] = get_description(definition, value, provider, locale)
    return options
