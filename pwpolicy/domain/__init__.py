"""
Password Policy Domain Layer

Rules, the strength engine and the validator that combines them.
"""

# Enums
from .enums import RuleFailureCode, Strength

# Rules
from .rules import (
    AllowedCharacterRule,
    FunctionalRule,
    LengthRule,
    NonDictionaryWordRule,
    PasswordRule,
    PredicateRule,
    RegularExpressionRule,
    RequiredCharacterRule,
    StrengthRule,
)

# Strength engine
from .services import analyze, calculate_entropy, classify

# Validator
from .validator import PasswordValidator

# Value objects
from .value_objects import CharacterSet, LengthRange, StrengthReport, ValidationResult

__all__ = [
    "AllowedCharacterRule",
    "CharacterSet",
    "FunctionalRule",
    "LengthRange",
    "LengthRule",
    "NonDictionaryWordRule",
    "PasswordRule",
    "PasswordValidator",
    "PredicateRule",
    "RegularExpressionRule",
    "RequiredCharacterRule",
    "RuleFailureCode",
    "Strength",
    "StrengthReport",
    "StrengthRule",
    "ValidationResult",
    "analyze",
    "calculate_entropy",
    "classify",
]
