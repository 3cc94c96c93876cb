"""
Callable Predicate

Adapts a plain callable to the predicate evaluator interface.
"""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class CallablePredicate:
    function: Callable[[str], bool]

    @classmethod
    def constant(cls, value: bool) -> "CallablePredicate":
        """Predicate that always answers ``value``."""
        return cls(function=lambda _password: value)

    def accepts(self, value: str) -> bool:
        return bool(self.function(value))
