"""
BaseEnum — Declarative surface for class-based enums.

Public class attributes holding scalars become the enum's constants, in
declaration order:

    class UserType(BaseEnum, localization_key="enums.user_type"):
        Administrator = 0
        Moderator = 1
        Subscriber = 2
        SuperAdministrator = 3

    UserType.get_key(1)              # "Moderator"
    UserType.get_description(3)      # "Super administrator"

Every classmethod delegates to the free functions in ``constenum.core.lookup``
and ``constenum.description``, which accept the class itself as their enum
argument.
"""

import random
from typing import Any, ClassVar

from constenum.core import lookup
from constenum.core.definition import DescribeFn, EnumDefinition, Scalar, reflect
from constenum.description.localization import LocalizationProvider
from constenum.description.resolver import get_description


class BaseEnum:
    """
    Base class for enums declared as class constants.

    Class keyword arguments:
        localization_key: Translation prefix for descriptions
        describe: Function ``value -> str | None`` consulted before the
            localization table and the formatted key name

    Subclasses may also override the ``describe`` classmethod.
    """

    _localization_key: ClassVar[str | None] = None
    _describe_fn: ClassVar[DescribeFn | None] = None

    def __init_subclass__(
        cls,
        localization_key: str | None = None,
        describe: DescribeFn | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if localization_key is not None:
            cls._localization_key = localization_key
        if describe is not None:
            cls._describe_fn = staticmethod(describe)

    def __init__(self) -> None:
        raise TypeError(f"{type(self).__name__} is a constant table and cannot be instantiated")

    @classmethod
    def __enum_definition__(cls) -> EnumDefinition:
        return reflect(cls, localization_key=cls._localization_key, describe=cls.describe)

    @classmethod
    def describe(cls, value: Scalar) -> str | None:
        """Value-specific description override; None falls through."""
        if cls._describe_fn is not None:
            return cls._describe_fn(value)
        return None

    @classmethod
    def get_keys(cls) -> list[str]:
        return lookup.get_keys(cls)

    @classmethod
    def get_values(cls) -> list[Scalar]:
        return lookup.get_values(cls)

    @classmethod
    def to_array(cls) -> dict[str, Scalar]:
        return lookup.to_array(cls)

    @classmethod
    def get_key(cls, value: Any) -> str:
        return lookup.get_key(cls, value)

    @classmethod
    def get_value(cls, key: str) -> Scalar:
        return lookup.get_value(cls, key)

    @classmethod
    def get_random_key(cls, rng: random.Random | None = None) -> str:
        return lookup.get_random_key(cls, rng)

    @classmethod
    def get_random_value(cls, rng: random.Random | None = None) -> Scalar:
        return lookup.get_random_value(cls, rng)

    @classmethod
    def has_key(cls, key: Any) -> bool:
        return lookup.has_key(cls, key)

    @classmethod
    def has_value(cls, value: Any, strict: bool = True) -> bool:
        return lookup.has_value(cls, value, strict)

    @classmethod
    def get_description(
        cls,
        value: Any,
        provider: LocalizationProvider | None = None,
        locale: str | None = None,
    ) -> str:
        return get_description(cls, value, provider, locale)

    @classmethod
    def to_select_array(
        cls,
        provider: LocalizationProvider | None = None,
        locale: str | None = None,
    ) -> dict[Scalar, str]:
        return lookup.to_select_array(cls, provider, locale)
