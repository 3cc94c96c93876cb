"""
Password Policy Value Objects

Immutable values shared by rules, the strength service and the validator.
"""

from .character_set import CharacterSet
from .length_range import LengthRange
from .strength_report import StrengthReport
from .validation_result import ValidationResult

__all__ = [
    'CharacterSet',
    'LengthRange',
    'StrengthReport',
    'ValidationResult',
]
