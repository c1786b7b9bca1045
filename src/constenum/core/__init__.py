"""
Core — Enum declarations, the constant table, and lookups over it.
"""

from constenum.core.errors import (
    ConstEnumError,
    DefinitionError,
    KeyNotFoundError,
    ValueNotFoundError,
)
from constenum.core.definition import (
    Scalar,
    EnumLike,
    EnumDefinition,
    define,
    reflect,
    clear_cache,
    resolve_definition,
    values_match,
)
from constenum.core.lookup import (
    get_keys,
    get_values,
    to_array,
    get_key,
    get_value,
    get_random_key,
    get_random_value,
    to_select_array,
    has_key,
    has_value,
)
from constenum.core.base import BaseEnum

__all__ = [
    # Errors
    "ConstEnumError",
    "DefinitionError",
    "KeyNotFoundError",
    "ValueNotFoundError",
    # Definition
    "Scalar",
    "EnumLike",
    "EnumDefinition",
    "define",
    "reflect",
    "clear_cache",
    "resolve_definition",
    "values_match",
    # Lookup
    "get_keys",
    "get_values",
    "to_array",
    "get_key",
    "get_value",
    "get_random_key",
    "get_random_value",
    "to_select_array",
    "has_key",
    "has_value",
    # Declaration
    "BaseEnum",
]
