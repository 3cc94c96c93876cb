"""
Password Rules

Rule abstraction and its concrete variants.
"""

from .base import PasswordRule
from .character_rules import AllowedCharacterRule, RequiredCharacterRule
from .delegate_rules import (
    FunctionalRule,
    NonDictionaryWordRule,
    PredicateRule,
    RegularExpressionRule,
    dictionary_term,
)
from .length_rule import LengthRule, count_characters
from .strength_rule import StrengthRule

__all__ = [
    'AllowedCharacterRule',
    'FunctionalRule',
    'LengthRule',
    'NonDictionaryWordRule',
    # Base class
    'PasswordRule',
    'PredicateRule',
    'RegularExpressionRule',
    'RequiredCharacterRule',
    'StrengthRule',
    # Helpers
    'count_characters',
    'dictionary_term',
]
