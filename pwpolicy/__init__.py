"""
Password policy evaluation.

Compose password rules into a validator, and rank password strength by
estimated entropy.

Example:
    >>> from pwpolicy import PasswordValidator, RequiredCharacterRule, LengthRule
    >>> validator = PasswordValidator([
    ...     LengthRule(8, 128),
    ...     RequiredCharacterRule.decimal_digit_required(),
    ... ])
    >>> validator.validate("password").failure_codes
    ['decimal_digit_required']
"""

import logging

from pwpolicy.core import (
    ConfigurationError,
    Environment,
    PasswordPolicyConfig,
    PasswordPolicyError,
    PolicyConfigManager,
    RuleConfigurationError,
    configure_logging,
    get_logger,
    load_password_policy_config,
)
from pwpolicy.domain import (
    AllowedCharacterRule,
    CharacterSet,
    FunctionalRule,
    LengthRange,
    LengthRule,
    NonDictionaryWordRule,
    PasswordRule,
    PasswordValidator,
    PredicateRule,
    RegularExpressionRule,
    RequiredCharacterRule,
    RuleFailureCode,
    Strength,
    StrengthReport,
    StrengthRule,
    ValidationResult,
    analyze,
    calculate_entropy,
    classify,
)
from pwpolicy.domain.builders import PolicyBuilder
from pwpolicy.infrastructure.adapters import (
    CallablePredicate,
    RegexPatternMatcher,
    WordListDictionary,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AllowedCharacterRule",
    "CallablePredicate",
    "CharacterSet",
    "ConfigurationError",
    "Environment",
    "FunctionalRule",
    "LengthRange",
    "LengthRule",
    "NonDictionaryWordRule",
    "PasswordPolicyConfig",
    "PasswordPolicyError",
    "PasswordRule",
    "PasswordValidator",
    "PolicyBuilder",
    "PolicyConfigManager",
    "PredicateRule",
    "RegexPatternMatcher",
    "RegularExpressionRule",
    "RequiredCharacterRule",
    "RuleConfigurationError",
    "RuleFailureCode",
    "Strength",
    "StrengthReport",
    "StrengthRule",
    "ValidationResult",
    "WordListDictionary",
    "analyze",
    "calculate_entropy",
    "classify",
    "configure_logging",
    "get_logger",
    "load_password_policy_config",
]
