"""
Validation — Rules checking that submitted input belongs to an enum.

Provides:
- ValueRule / KeyRule predicates with user-facing messages
- Validator for running rules over a whole submission
- Pydantic adapters via ``rule.as_validator()``
"""

from constenum.validation.rules import (
    RuleResult,
    EnumRule,
    ValueRule,
    KeyRule,
)
from constenum.validation.validator import (
    ValidationResult,
    Validator,
)

__all__ = [
    # Rules
    "RuleResult",
    "EnumRule",
    "ValueRule",
    "KeyRule",
    # Pipeline
    "ValidationResult",
    "Validator",
]
