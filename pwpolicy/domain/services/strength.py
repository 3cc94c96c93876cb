"""
Password Strength Service

Entropy-based strength classification.

The effective alphabet of a password is the sum of the sizes of the
character classes it draws from, each class counted once no matter how many
of its characters occur. Entropy is ``log2(alphabet) * length`` with length
measured in Unicode code points, and the rank follows from fixed entropy
thresholds (see ``Strength.from_entropy``).
"""

import math

from pwpolicy.domain.enums import Strength
from pwpolicy.domain.value_objects.character_set import CharacterSet
from pwpolicy.domain.value_objects.strength_report import StrengthReport

# Uppercase letters weigh the same as lowercase ones
CHARACTER_CLASS_WEIGHTS: tuple[tuple[str, CharacterSet, int], ...] = (
    ("lowercase", CharacterSet.lowercase_letters(), 26),
    ("uppercase", CharacterSet.uppercase_letters(), 26),
    ("decimal_digit", CharacterSet.decimal_digits(), 10),
    ("punctuation", CharacterSet.punctuation(), 20),
    ("symbol", CharacterSet.symbols(), 10),
    ("whitespace", CharacterSet.whitespace(), 1),
    ("non_base", CharacterSet.non_base(), 32 + 128),
)


def effective_alphabet_size(password: str) -> int:
    """Sum the alphabet contributions of every character class present."""
    seen: set[str] = set()
    size = 0

    for character in password:
        if len(seen) == len(CHARACTER_CLASS_WEIGHTS):
            break
        for name, character_set, weight in CHARACTER_CLASS_WEIGHTS:
            if name not in seen and character_set.contains(character):
                seen.add(name)
                size += weight

    return size


def _entropy(alphabet_size: int, length: int) -> float:
    if length == 0 or alphabet_size == 0:
        return -math.inf
    return math.log2(alphabet_size) * length


def calculate_entropy(password: str) -> float:
    """
    Estimate the entropy of ``password`` in bits.

    Returns ``-inf`` for the empty string and for passwords whose characters
    fall outside every class, which classify as ``Strength.EMPTY``.
    """
    return _entropy(effective_alphabet_size(password), len(password))


def classify(password: str) -> Strength:
    """Classify ``password`` into a strength rank."""
    if not password:
        return Strength.EMPTY
    return Strength.from_entropy(calculate_entropy(password))


def analyze(password: str) -> StrengthReport:
    """Classify ``password`` and report the alphabet size and entropy used."""
    alphabet_size = effective_alphabet_size(password)
    entropy_bits = _entropy(alphabet_size, len(password))
    return StrengthReport(
        strength=Strength.from_entropy(entropy_bits),
        entropy_bits=entropy_bits,
        alphabet_size=alphabet_size,
        length=len(password),
    )
