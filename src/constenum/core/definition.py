"""
Constant Enumerator — Ordered key→value tables behind every enum.

An EnumDefinition is built once per declared enum, either explicitly with
``define()`` or by reflecting the public class attributes of a BaseEnum
subclass. Reflected definitions are cached per type.
"""

import math
import re
import weakref
from dataclasses import dataclass, field
from threading import Lock
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Union

from constenum.core.errors import DefinitionError, ValueNotFoundError
from constenum.observability.logging import get_logger


logger = get_logger("core.definition")

Scalar = Union[int, float, str]
DescribeFn = Callable[[Scalar], "str | None"]

_SCALAR_TYPES = (int, float, str)

# Plain decimal form submitted by users: no exponents, underscores or nan/inf
_DECIMAL = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)\s*")


def is_scalar(value: Any) -> bool:
    """True for int, float and str values (bool excluded)."""
    return isinstance(value, _SCALAR_TYPES) and not isinstance(value, bool)


def _parse_number(text: str) -> int | float | None:
    if not _DECIMAL.fullmatch(text):
        return None
    if "." in text:
        return float(text)
    return int(text)


def values_match(candidate: Any, value: Scalar, strict: bool = True) -> bool:
    """
    Compare a candidate against a declared enum value.

    Strict comparison requires the exact same type and content, so ``"1"``,
    ``1.0`` and ``True`` never match ``1``. Loose comparison lets numeric
    strings match numbers and numbers match their string form.
    """
    if type(candidate) is type(value):
        return candidate == value
    if strict:
        return False

    if isinstance(candidate, str) and isinstance(value, (int, float)):
        return _parse_number(candidate) == value
    if isinstance(value, str) and is_scalar(candidate):
        return _parse_number(value) == candidate
    try:
        return bool(candidate == value)
    except Exception:
        return False


@dataclass(frozen=True)
class EnumDefinition:
    """
    Immutable, ordered mapping of constant names to scalar values.

    Keys are unique identifiers. Values need not be unique; lookups by
    value return the first declared key.

    Attributes:
        name: Display name used in error and validation messages
        members: Constants in declaration order
        localization_key: Prefix for translation lookups, if localized
        describe: Optional override consulted before any other description
    """
    name: str
    members: Mapping[str, Scalar] = field(default_factory=dict, hash=False)
    localization_key: str | None = None
    describe: DescribeFn | None = field(default=None, compare=False, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise DefinitionError(f"Enum name must be a non-empty string, got {self.name!r}")

        table: dict[str, Scalar] = {}
        for key, value in self.members.items():
            if not isinstance(key, str) or not key.isidentifier():
                raise DefinitionError(f"{self.name}: {key!r} is not a valid constant name")
            if not is_scalar(value):
                raise DefinitionError(
                    f"{self.name}.{key}: constant values must be int, float or str, "
                    f"got {type(value).__name__}"
                )
            if isinstance(value, float) and not math.isfinite(value):
                raise DefinitionError(f"{self.name}.{key}: constant values must be finite, got {value!r}")
            # 1, 1.0 hash alike but are distinct values under strict matching
            for other_key, other in table.items():
                if other == value and type(other) is not type(value):
                    raise DefinitionError(
                        f"{self.name}.{key}: {value!r} collides with {self.name}.{other_key} = {other!r}"
                    )
            table[key] = value

        object.__setattr__(self, "members", MappingProxyType(table))

    @property
    def constants(self) -> Mapping[str, Scalar]:
        """
        The key→value table.

        Raises:
            DefinitionError: The enum declares no constants
        """
        if not self.members:
            raise DefinitionError(f"{self.name} declares no constants")
        return self.members

    def key_for(self, value: Any, strict: bool = True) -> str:
        """First key whose value matches, else ValueNotFoundError."""
        for key, declared in self.constants.items():
            if values_match(value, declared, strict):
                return key
        raise ValueNotFoundError(self.name, value)

    def __len__(self) -> int:
        return len(self.members)


# An EnumDefinition or a class exposing __enum_definition__
EnumLike = Union[EnumDefinition, type]


def define(
    name: str,
    members: Mapping[str, Scalar] | Iterable[tuple[str, Scalar]],
    *,
    localization_key: str | None = None,
    describe: DescribeFn | None = None,
) -> EnumDefinition:
    """
    Declare an enum from an explicit constant table.

    Args:
        name: Display name of the enum
        members: Mapping or (key, value) pairs, in declaration order
        localization_key: Translation prefix, e.g. ``"enums.user_type"``
        describe: Override called with a value; returning None falls through

    Example:
        UserType = define("UserType", {"Administrator": 0, "Moderator": 1})
    """
    if isinstance(members, Mapping):
        pairs = list(members.items())
    else:
        pairs = list(members)

    seen: set[str] = set()
    for key, _ in pairs:
        if key in seen:
            raise DefinitionError(f"{name}: duplicate constant {key!r}")
        seen.add(key)

    definition = EnumDefinition(
        name=name,
        members=dict(pairs),
        localization_key=localization_key,
        describe=describe,
    )
    logger.debug("Defined %s with %d constants", name, len(definition))
    return definition


# Per-type cache of reflected definitions; entries go away with their class
_cache: "weakref.WeakKeyDictionary[type, EnumDefinition]" = weakref.WeakKeyDictionary()
_cache_lock = Lock()


def _detach(cls: type, describe: DescribeFn | None) -> DescribeFn | None:
    # A method bound to cls would keep the cache key alive
    if describe is None or getattr(describe, "__self__", None) is not cls:
        return describe
    method_ref = weakref.WeakMethod(describe)

    def describe_detached(value: Scalar) -> str | None:
        method = method_ref()
        return method(value) if method is not None else None

    return describe_detached


def _is_constant(name: str, attr: Any) -> bool:
    if name.startswith("_"):
        return False
    if isinstance(attr, (classmethod, staticmethod, property)):
        return False
    return not callable(attr)


def _collect_constants(cls: type) -> dict[str, Any]:
    table: dict[str, Any] = {}
    # Ancestors first so inherited constants keep their original position
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            if _is_constant(name, attr):
                table[name] = attr
    return table


def reflect(
    cls: type,
    *,
    localization_key: str | None = None,
    describe: DescribeFn | None = None,
) -> EnumDefinition:
    """
    Build (or fetch from cache) the definition of a declared enum class.

    The first call per type scans the class hierarchy; later calls return
    the cached definition. Concurrent first calls publish a single result.
    """
    cached = _cache.get(cls)
    if cached is not None:
        return cached

    definition = EnumDefinition(
        name=cls.__name__,
        members=_collect_constants(cls),
        localization_key=localization_key,
        describe=_detach(cls, describe),
    )

    with _cache_lock:
        published = _cache.setdefault(cls, definition)
    if published is definition:
        logger.debug("Reflected %s with %d constants", cls.__name__, len(definition))
    return published


def clear_cache() -> None:
    """Drop all reflected definitions (for testing)."""
    with _cache_lock:
        _cache.clear()


def resolve_definition(enum: Any) -> EnumDefinition:
    """
    Turn an enum reference into its definition.

    Accepts an EnumDefinition or any class exposing ``__enum_definition__``
    (every BaseEnum subclass does).

    Raises:
        DefinitionError: ``enum`` is not an enum declaration
    """
    if isinstance(enum, EnumDefinition):
        return enum
    if isinstance(enum, type):
        factory = getattr(enum, "__enum_definition__", None)
        if factory is not None:
            return factory()
    raise DefinitionError(f"{enum!r} is not an enum declaration")
