"""
Validation Result Value Object

Represents the outcome of validating a password against a rule list.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pwpolicy.domain.interfaces import IMessageRenderer
    from pwpolicy.domain.rules.base import PasswordRule


@dataclass(frozen=True)
class ValidationResult:
    """
    Success, or failure carrying every rule that rejected the password.

    ``failing_rules`` keeps the validator's rule order and multiplicity.
    """

    failing_rules: tuple["PasswordRule", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "failing_rules", tuple(self.failing_rules))

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, failing_rules: "list[PasswordRule] | tuple[PasswordRule, ...]") -> "ValidationResult":
        if not failing_rules:
            raise ValueError("A failure needs at least one failing rule")
        return cls(failing_rules=tuple(failing_rules))

    @property
    def is_valid(self) -> bool:
        return not self.failing_rules

    def __bool__(self) -> bool:
        return self.is_valid

    @property
    def failure_codes(self) -> list[str]:
        """Failure codes of the failing rules, in order."""
        return [str(rule.failure_code) for rule in self.failing_rules]

    def render_messages(self, renderer: "IMessageRenderer", locale: str) -> list[str]:
        """Render one message per failing rule through a caller-supplied renderer."""
        return [
            renderer.render(str(rule.failure_code), locale, rule.failure_context())
            for rule in self.failing_rules
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "is_valid": self.is_valid,
            "failures": [
                {
                    "rule": rule.rule_name,
                    "code": str(rule.failure_code),
                    "context": rule.failure_context(),
                }
                for rule in self.failing_rules
            ],
        }
