"""
Password Policy Domain Services

Stateless domain logic.
"""

from .strength import (
    CHARACTER_CLASS_WEIGHTS,
    analyze,
    calculate_entropy,
    classify,
    effective_alphabet_size,
)

__all__ = [
    'CHARACTER_CLASS_WEIGHTS',
    'analyze',
    'calculate_entropy',
    'classify',
    'effective_alphabet_size',
]
