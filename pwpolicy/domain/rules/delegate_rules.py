"""
Delegate Rules

Rules that forward the decision to an injected capability. Exceptions
raised by the capability propagate to the caller untouched, so a broken
dictionary service is never mistaken for a rejected password.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pwpolicy.domain.enums import RuleFailureCode
from pwpolicy.domain.interfaces import (
    IDictionaryLookup,
    IPatternMatcher,
    IPredicateEvaluator,
)
from pwpolicy.domain.rules.base import PasswordRule
from pwpolicy.domain.value_objects.character_set import CharacterSet

_LOWERCASE_LETTERS = CharacterSet.lowercase_letters()


def dictionary_term(password: str) -> str:
    """Lowercase ``password`` and drop every character that is not a lowercase letter."""
    return "".join(ch for ch in password.lower() if _LOWERCASE_LETTERS.contains(ch))


@dataclass(frozen=True)
class PredicateRule(PasswordRule):
    """Password must be accepted by the predicate."""

    predicate: IPredicateEvaluator

    def evaluate(self, password: str) -> bool:
        return bool(self.predicate.accepts(password))

    @property
    def failure_code(self) -> str:
        return RuleFailureCode.PREDICATE


@dataclass(frozen=True)
class RegularExpressionRule(PasswordRule):
    """Password must match the regular expression."""

    matcher: IPatternMatcher

    @classmethod
    def from_pattern(
        cls, pattern: str | re.Pattern[str], flags: int = 0
    ) -> "RegularExpressionRule":
        """Build the rule over Python's ``re`` engine."""
        from pwpolicy.infrastructure.adapters.regex_matcher import RegexPatternMatcher

        return cls(matcher=RegexPatternMatcher.compile(pattern, flags))

    def evaluate(self, password: str) -> bool:
        return bool(self.matcher.matches(password))

    @property
    def failure_code(self) -> str:
        return RuleFailureCode.REGULAR_EXPRESSION

    def failure_context(self) -> dict[str, Any]:
        pattern = getattr(self.matcher, "pattern", None)
        if pattern is None:
            return {}
        return {"pattern": getattr(pattern, "pattern", pattern)}


@dataclass(frozen=True)
class FunctionalRule(PasswordRule):
    """Password must satisfy the function."""

    function: Callable[[str], bool]

    def evaluate(self, password: str) -> bool:
        return bool(self.function(password))

    @property
    def failure_code(self) -> str:
        return RuleFailureCode.FUNCTION


@dataclass(frozen=True)
class NonDictionaryWordRule(PasswordRule):
    """Password must not be a dictionary word."""

    dictionary: IDictionaryLookup

    def evaluate(self, password: str) -> bool:
        return not self.dictionary.is_known_word(dictionary_term(password))

    @property
    def failure_code(self) -> str:
        return RuleFailureCode.DICTIONARY_WORD
