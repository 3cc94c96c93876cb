"""
Character Rules

Rules about which characters a password may or must contain.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pwpolicy.domain.enums import RuleFailureCode
from pwpolicy.domain.rules.base import PasswordRule
from pwpolicy.domain.value_objects.character_set import CharacterSet


@dataclass(frozen=True)
class AllowedCharacterRule(PasswordRule):
    """Password must not include characters outside the allowed set."""

    allowed: CharacterSet

    @classmethod
    def from_characters(cls, characters: Iterable[str]) -> "AllowedCharacterRule":
        """Allow exactly the scalars of ``characters``."""
        return cls(allowed=CharacterSet.from_characters(characters))

    def evaluate(self, password: str) -> bool:
        return self.allowed.contains_all(password)

    @property
    def failure_code(self) -> str:
        return RuleFailureCode.DISALLOWED_CHARACTER

    def failure_context(self) -> dict[str, Any]:
        if self.allowed.characters:
            return {"allowed_characters": "".join(sorted(self.allowed.characters))}
        return {}


@dataclass(frozen=True)
class RequiredCharacterRule(PasswordRule):
    """Password must include at least one character from the required set."""

    required: CharacterSet
    label: str = RuleFailureCode.REQUIRED_CHARACTER

    @classmethod
    def from_characters(
        cls, characters: Iterable[str], label: str = RuleFailureCode.REQUIRED_CHARACTER
    ) -> "RequiredCharacterRule":
        return cls(required=CharacterSet.from_characters(characters), label=label)

    @classmethod
    def lowercase_required(cls) -> "RequiredCharacterRule":
        return cls(
            required=CharacterSet.lowercase_letters(),
            label=RuleFailureCode.LOWERCASE_REQUIRED,
        )

    @classmethod
    def uppercase_required(cls) -> "RequiredCharacterRule":
        return cls(
            required=CharacterSet.uppercase_letters(),
            label=RuleFailureCode.UPPERCASE_REQUIRED,
        )

    @classmethod
    def decimal_digit_required(cls) -> "RequiredCharacterRule":
        return cls(
            required=CharacterSet.decimal_digits(),
            label=RuleFailureCode.DECIMAL_DIGIT_REQUIRED,
        )

    @classmethod
    def symbol_required(cls) -> "RequiredCharacterRule":
        """Symbols and punctuation both satisfy this rule."""
        return cls(
            required=CharacterSet.symbols() | CharacterSet.punctuation(),
            label=RuleFailureCode.SYMBOL_REQUIRED,
        )

    def evaluate(self, password: str) -> bool:
        return self.required.contains_any(password)

    @property
    def failure_code(self) -> str:
        return self.label
