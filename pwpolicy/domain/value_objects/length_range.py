"""
Length Range Value Object

Half-open range of accepted password lengths.
"""

from dataclasses import dataclass

from pwpolicy.core.errors import RuleConfigurationError


@dataclass(frozen=True)
class LengthRange:
    """
    Accepted password lengths ``[minimum, maximum)``.

    Raises RuleConfigurationError on construction when a bound is negative
    or the minimum exceeds the maximum.
    """

    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        """Validate range bounds."""
        if isinstance(self.minimum, bool) or not isinstance(self.minimum, int):
            raise RuleConfigurationError(
                "LengthRule", "Minimum length must be an integer"
            )
        if isinstance(self.maximum, bool) or not isinstance(self.maximum, int):
            raise RuleConfigurationError(
                "LengthRule", "Maximum length must be an integer"
            )
        if self.minimum < 0 or self.maximum < 0:
            raise RuleConfigurationError(
                "LengthRule",
                f"Length bounds cannot be negative: [{self.minimum}, {self.maximum})",
            )
        if self.minimum > self.maximum:
            raise RuleConfigurationError(
                "LengthRule",
                f"Minimum length {self.minimum} exceeds maximum length {self.maximum}",
            )

    def __contains__(self, length: object) -> bool:
        return isinstance(length, int) and self.minimum <= length < self.maximum

    def __str__(self) -> str:
        return f"[{self.minimum}, {self.maximum})"
