"""
Base Password Rule

Foundation for all password rules.
"""

from abc import ABC, abstractmethod
from typing import Any


class PasswordRule(ABC):
    """
    A stateless predicate over a password plus a stable failure code.

    Concrete rules are frozen dataclasses: configuration is fixed at
    construction and ``evaluate`` is a pure function of its argument, apart
    from rules that delegate to an injected capability.
    """

    @abstractmethod
    def evaluate(self, password: str) -> bool:
        """Return True if ``password`` satisfies the rule."""

    @property
    @abstractmethod
    def failure_code(self) -> str:
        """Stable identifier reported when the rule rejects a password."""

    def failure_context(self) -> dict[str, Any]:
        """Configuration values a message renderer may interpolate."""
        return {}

    @property
    def rule_name(self) -> str:
        return self.__class__.__name__

    def get_rule_metadata(self) -> dict[str, Any]:
        """Get metadata about this rule."""
        return {
            "name": self.rule_name,
            "failure_code": str(self.failure_code),
            "description": (self.__doc__ or "").strip().split("\n")[0],
            "context": self.failure_context(),
        }
