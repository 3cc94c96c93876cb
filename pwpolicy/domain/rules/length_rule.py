"""
Length Rule

Bounds the number of user-perceived characters in a password.
"""

from dataclasses import dataclass, field
from typing import Any

import regex

from pwpolicy.domain.enums import RuleFailureCode
from pwpolicy.domain.rules.base import PasswordRule
from pwpolicy.domain.value_objects.length_range import LengthRange

_GRAPHEME_CLUSTER = regex.compile(r"\X")


def count_characters(password: str) -> int:
    """Count extended grapheme clusters, so ``"e\\u0301"`` is one character."""
    return sum(1 for _ in _GRAPHEME_CLUSTER.finditer(password))


@dataclass(frozen=True)
class LengthRule(PasswordRule):
    """Password length must lie within ``[minimum, maximum)``."""

    minimum: int
    maximum: int
    length: LengthRange = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate bounds at construction."""
        object.__setattr__(self, "length", LengthRange(self.minimum, self.maximum))

    @classmethod
    def from_range(cls, length: LengthRange) -> "LengthRule":
        return cls(minimum=length.minimum, maximum=length.maximum)

    def evaluate(self, password: str) -> bool:
        return count_characters(password) in self.length

    @property
    def failure_code(self) -> str:
        return RuleFailureCode.LENGTH

    def failure_context(self) -> dict[str, Any]:
        return {"minimum": self.minimum, "maximum": self.maximum}
