"""
Validation Rules — Input predicates checking membership in an enum.

Rules answer "does this submitted input belong to the enum?" and report
failures as user-facing messages. They never raise for bad input: a
missing, null, wrongly typed or unhashable candidate simply fails.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BeforeValidator, ValidationInfo

from constenum.core.definition import EnumDefinition, EnumLike, resolve_definition, values_match
from constenum.core.errors import ConstEnumError
from constenum.observability.logging import get_logger


logger = get_logger("validation.rules")


@dataclass
class RuleResult:
    """Outcome of one rule against one candidate."""
    passed: bool
    message: str | None = None

    @classmethod
    def ok(cls) -> "RuleResult":
        return cls(passed=True)

    @classmethod
    def fail(cls, message: str) -> "RuleResult":
        return cls(passed=False, message=message)

    def __bool__(self) -> bool:
        return self.passed


class EnumRule(ABC):
    """
    Base for rules bound to one enum and a strictness flag.

    Args:
        enum: EnumDefinition or BaseEnum subclass
        strict: Require identical type and content when comparing
        message: Failure template; ``{attribute}`` and ``{enum}`` are
            replaced with the field name and the enum's display name

    Raises:
        DefinitionError: ``enum`` is not an enum declaration
    """

    default_message: ClassVar[str] = "The {attribute} is invalid."

    def __init__(self, enum: EnumLike, strict: bool = True, message: str | None = None):
        self.definition: EnumDefinition = resolve_definition(enum)
        self.strict = strict
        self.message_template = message or self.default_message

    @abstractmethod
    def passes(self, candidate: Any) -> bool:
        """True when ``candidate`` belongs to the enum. Must not raise."""
        ...

    def message(self, attribute: str = "value") -> str:
        return self.message_template.format(attribute=attribute, enum=self.definition.name)

    def check(self, candidate: Any, attribute: str = "value") -> RuleResult:
        """Run the rule and build a pass/fail result with its message."""
        if candidate is None:
            return RuleResult.fail(self.message(attribute))

        try:
            passed = self.passes(candidate)
        except ConstEnumError as e:
            logger.warning("%s could not check %s: %s", type(self).__name__, attribute, e)
            passed = False

        if passed:
            return RuleResult.ok()
        logger.debug(
            "%s rejected %r for %s (%s)",
            type(self).__name__, candidate, attribute, self.definition.name,
            extra={"extra_data": {
                "rule": type(self).__name__,
                "enum": self.definition.name,
                "attribute": attribute,
                "strict": self.strict,
            }},
        )
        return RuleResult.fail(self.message(attribute))

    def __call__(self, candidate: Any) -> Any:
        """
        Plain validator callable: return the candidate or raise ValueError.

        For pipelines that expect exceptions, e.g. pydantic validators.
        """
        result = self.check(candidate)
        if not result.passed:
            raise ValueError(result.message)
        return candidate

    def _pydantic_check(self, candidate: Any, info: ValidationInfo) -> Any:
        attribute = getattr(info, "field_name", None) or "value"
        result = self.check(candidate, attribute)
        if not result.passed:
            raise ValueError(result.message)
        return candidate

    def as_validator(self) -> BeforeValidator:
        """
        Pydantic adapter running before type coercion.

        Example:
            class Signup(BaseModel):
                role: Annotated[int, ValueRule(UserType).as_validator()]
        """
        return BeforeValidator(self._pydantic_check)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.definition.name}, strict={self.strict})"


class ValueRule(EnumRule):
    """
    Passes when the candidate equals one of the enum's values.

    Strict (default): ``"1"`` does not match ``1``.
    Loose: numeric strings match numbers and numbers match their string form.
    """

    default_message: ClassVar[str] = "The {attribute} must be a valid {enum} value."

    def passes(self, candidate: Any) -> bool:
        return any(
            values_match(candidate, declared, self.strict)
            for declared in self.definition.constants.values()
        )


class KeyRule(EnumRule):
    """
    Passes when the candidate is a string equal to one of the enum's keys.

    Comparison is case-sensitive. ``strict`` is accepted for symmetry with
    ValueRule and has no effect.
    """

    default_message: ClassVar[str] = "The {attribute} must be a valid {enum} key."

    def passes(self, candidate: Any) -> bool:
        return isinstance(candidate, str) and candidate in self.definition.constants
