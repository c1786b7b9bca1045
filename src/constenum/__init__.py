"""
constenum — Class-declared scalar enumerations with reflective utilities.

Declare constants on a class (or with ``define``) and get key/value
lookups, random sampling, select-list projection, localized descriptions,
and validation rules for submitted input.
"""

__version__ = "0.1.0"

from constenum.core import (
    BaseEnum,
    EnumDefinition,
    define,
    resolve_definition,
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
    ConstEnumError,
    DefinitionError,
    KeyNotFoundError,
    ValueNotFoundError,
)
from constenum.description import (
    get_description,
    humanize_key,
    LocalizationProvider,
    DictLocalizationProvider,
    JsonLocalizationProvider,
    LocalizationError,
)
from constenum.validation import (
    ValueRule,
    KeyRule,
    RuleResult,
    ValidationResult,
    Validator,
)
from constenum.config import ConstEnumConfig, create_provider

__all__ = [
    "__version__",
    # Declaration
    "BaseEnum",
    "EnumDefinition",
    "define",
    "resolve_definition",
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
    # Errors
    "ConstEnumError",
    "DefinitionError",
    "KeyNotFoundError",
    "ValueNotFoundError",
    "LocalizationError",
    # Description
    "get_description",
    "humanize_key",
    "LocalizationProvider",
    "DictLocalizationProvider",
    "JsonLocalizationProvider",
    # Validation
    "ValueRule",
    "KeyRule",
    "RuleResult",
    "ValidationResult",
    "Validator",
    # Config
    "ConstEnumConfig",
    "create_provider",
]
