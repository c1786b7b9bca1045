"""
Errors raised by enum lookups and declarations.

Lookups that cannot satisfy their contract raise one of these instead of
returning a sentinel. Validation rules never raise them.
"""

from typing import Any


class ConstEnumError(Exception):
    """Base class for all constenum errors."""
    pass


class DefinitionError(ConstEnumError, TypeError):
    """Raised for empty or malformed enum declarations."""
    pass


class KeyNotFoundError(ConstEnumError, KeyError):
    """Raised when a key is not declared on the enum."""

    def __init__(self, enum_name: str, key: Any):
        self.enum_name = enum_name
        self.key = key
        super().__init__(f"Key {key!r} is not declared on {enum_name}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class ValueNotFoundError(ConstEnumError, ValueError):
    """Raised when no key maps to the requested value."""

    def __init__(self, enum_name: str, value: Any):
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"Value {value!r} is not a valid {enum_name} value")
