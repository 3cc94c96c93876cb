"""
Regex Pattern Matcher

Adapts Python's ``re`` engine to the pattern matcher interface.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class RegexPatternMatcher:
    """Matches when the compiled pattern is found anywhere in the string."""

    pattern: re.Pattern[str]

    @classmethod
    def compile(cls, pattern: str | re.Pattern[str], flags: int = 0) -> "RegexPatternMatcher":
        """
        Compile ``pattern`` once.

        Raises:
            re.error: If the pattern is not a valid regular expression
        """
        if isinstance(pattern, re.Pattern):
            if flags:
                raise ValueError("Flags cannot be applied to an already compiled pattern")
            return cls(pattern=pattern)
        return cls(pattern=re.compile(pattern, flags))

    def matches(self, value: str) -> bool:
        return self.pattern.search(value) is not None
