"""
Password Policy Domain Enumerations

Strength ranks and the stable failure codes rules report.
"""

from enum import Enum, IntEnum


class Strength(IntEnum):
    """
    Qualitative password strength, totally ordered by its integer value.

    EMPTY sits below every real rank and is only produced for passwords
    that carry no measurable entropy.
    """

    EMPTY = -1
    VERY_WEAK = 0
    WEAK = 1
    REASONABLE = 2
    STRONG = 3
    VERY_STRONG = 4

    @classmethod
    def from_entropy(cls, entropy_bits: float) -> "Strength":
        """Map an entropy estimate to a rank using half-open intervals."""
        if entropy_bits < 0.0:
            return cls.EMPTY
        if entropy_bits < 28.0:
            return cls.VERY_WEAK
        if entropy_bits < 36.0:
            return cls.WEAK
        if entropy_bits < 60.0:
            return cls.REASONABLE
        if entropy_bits < 128.0:
            return cls.STRONG
        return cls.VERY_STRONG

    @classmethod
    def from_string(cls, value: str) -> "Strength":
        """Parse a rank from its name, e.g. ``"reasonable"`` or ``"VERY_STRONG"``."""
        normalized = value.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[normalized]
        except KeyError:
            raise ValueError(f"Invalid strength: {value}") from None

    def get_display_name(self) -> str:
        """Get plain English display name."""
        display_names = {
            Strength.EMPTY: "Empty",
            Strength.VERY_WEAK: "Very Weak Password",
            Strength.WEAK: "Weak Password",
            Strength.REASONABLE: "Reasonable Password",
            Strength.STRONG: "Strong Password",
            Strength.VERY_STRONG: "Very Strong Password",
        }
        return display_names[self]


class RuleFailureCode(str, Enum):
    """Stable identifiers a rule reports when it rejects a password."""

    DISALLOWED_CHARACTER = "disallowed_character"
    REQUIRED_CHARACTER = "required_character"
    LOWERCASE_REQUIRED = "lowercase_required"
    UPPERCASE_REQUIRED = "uppercase_required"
    DECIMAL_DIGIT_REQUIRED = "decimal_digit_required"
    SYMBOL_REQUIRED = "symbol_required"
    DICTIONARY_WORD = "dictionary_word"
    LENGTH = "length"
    PREDICATE = "predicate"
    REGULAR_EXPRESSION = "regular_expression"
    FUNCTION = "function"
    STRENGTH = "strength"

    def __str__(self) -> str:
        return self.value
