"""
Validator — Runs enum rules over submitted form data.

Collects failures per field instead of stopping at the first one, so a
whole submission can be reported back to the user at once.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from constenum.validation.rules import EnumRule


@dataclass
class ValidationResult:
    """Result of validating a submission: failure messages keyed by field."""
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, attribute: str, message: str) -> "ValidationResult":
        return cls(errors={attribute: [message]})

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Combine two results."""
        merged = {name: list(messages) for name, messages in self.errors.items()}
        for name, messages in other.errors.items():
            merged.setdefault(name, []).extend(messages)
        return ValidationResult(errors=merged)

    def first(self, attribute: str) -> str | None:
        """First message for a field, if it failed."""
        messages = self.errors.get(attribute)
        return messages[0] if messages else None


class Validator:
    """
    Applies rules to the fields of a submission.

    Fields absent from the submitted data are checked as None, so they
    fail every enum rule.

    Usage:
        validator = Validator({
            "role": ValueRule(UserType),
            "role_name": [KeyRule(UserType)],
        })
        result = validator.validate(request_data)
        if not result.valid:
            ...
    """

    def __init__(self, rules: Mapping[str, EnumRule | Sequence[EnumRule]]):
        self.rules: dict[str, list[EnumRule]] = {
            name: [spec] if isinstance(spec, EnumRule) else list(spec)
            for name, spec in rules.items()
        }

    def validate(self, data: Mapping[str, Any]) -> ValidationResult:
        result = ValidationResult.success()
        for attribute, rules in self.rules.items():
            candidate = data.get(attribute)
            for rule in rules:
                outcome = rule.check(candidate, attribute)
                if not outcome.passed:
                    result = result.merge(ValidationResult.failure(attribute, outcome.message))
        return result
