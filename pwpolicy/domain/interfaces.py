"""
Password Policy Domain Interfaces

Capabilities the rules delegate to. Implementations live outside the
domain; see ``pwpolicy.infrastructure.adapters`` for reference adapters.
"""

from typing import Any, Protocol


class IPredicateEvaluator(Protocol):
    """Predicate over a password string."""

    def accepts(self, value: str) -> bool:
        """Return True if the predicate holds for ``value``."""
        ...


class IPatternMatcher(Protocol):
    """Regular-expression style matcher."""

    def matches(self, value: str) -> bool:
        """Return True if the pattern matches ``value`` at least once."""
        ...


class IDictionaryLookup(Protocol):
    """Dictionary or word-list lookup service."""

    def is_known_word(self, term: str) -> bool:
        """Return True if ``term`` is a known word."""
        ...


class IMessageRenderer(Protocol):
    """Consumer-side renderer turning failure codes into display text."""

    def render(self, code: str, locale: str, context: dict[str, Any]) -> str:
        """Render the message for ``code`` in ``locale``."""
        ...


__all__ = [
    "IDictionaryLookup",
    "IMessageRenderer",
    "IPatternMatcher",
    "IPredicateEvaluator",
]
