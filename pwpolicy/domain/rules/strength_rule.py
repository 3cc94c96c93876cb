"""
Strength Rule

Requires a minimum entropy-based strength.
"""

from dataclasses import dataclass
from typing import Any

from pwpolicy.domain.enums import RuleFailureCode, Strength
from pwpolicy.domain.rules.base import PasswordRule
from pwpolicy.domain.services.strength import classify


@dataclass(frozen=True)
class StrengthRule(PasswordRule):
    """Password strength must be the given rank or above."""

    minimum: Strength

    def __post_init__(self) -> None:
        object.__setattr__(self, "minimum", Strength(self.minimum))

    def evaluate(self, password: str) -> bool:
        return classify(password) >= self.minimum

    @property
    def failure_code(self) -> str:
        return RuleFailureCode.STRENGTH

    def failure_context(self) -> dict[str, Any]:
        return {
            "strength": self.minimum.name.lower(),
            "strength_label": self.minimum.get_display_name(),
        }
