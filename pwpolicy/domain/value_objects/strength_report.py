"""
Strength Report Value Object

Represents the outcome of a password strength analysis.
"""

import math
from dataclasses import dataclass
from typing import Any

from pwpolicy.domain.enums import Strength


@dataclass(frozen=True)
class StrengthReport:
    """
    Value object carrying a strength rank and the numbers behind it.

    ``entropy_bits`` is ``-inf`` when the password has no measurable
    alphabet (empty, or made only of characters outside every class).
    """

    strength: Strength
    entropy_bits: float
    alphabet_size: int
    length: int

    def __post_init__(self) -> None:
        """Validate report data."""
        if self.alphabet_size < 0:
            raise ValueError("Alphabet size cannot be negative")

        if self.length < 0:
            raise ValueError("Length cannot be negative")

    def meets(self, minimum: Strength) -> bool:
        """Check if the analysed password reaches ``minimum``."""
        return self.strength >= minimum

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "strength": self.strength.name.lower(),
            "strength_label": self.strength.get_display_name(),
            "entropy_bits": (
                round(self.entropy_bits, 2) if math.isfinite(self.entropy_bits) else None
            ),
            "alphabet_size": self.alphabet_size,
            "length": self.length,
        }
