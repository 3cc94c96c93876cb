"""
Character Set Value Object

A set of Unicode scalars defined by explicit members, by Unicode general
categories, or both.
"""

import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass, field

LOWERCASE_CATEGORIES = frozenset({"Ll"})
UPPERCASE_CATEGORIES = frozenset({"Lu", "Lt"})
DECIMAL_DIGIT_CATEGORIES = frozenset({"Nd"})
PUNCTUATION_CATEGORIES = frozenset({"Pc", "Pd", "Ps", "Pe", "Pi", "Pf", "Po"})
SYMBOL_CATEGORIES = frozenset({"Sm", "Sc", "Sk", "So"})
WHITESPACE_CATEGORIES = frozenset({"Zs"})
NON_BASE_CATEGORIES = frozenset({"Mn", "Mc", "Me"})


@dataclass(frozen=True)
class CharacterSet:
    """
    Immutable set of Unicode scalars.

    A scalar belongs to the set when it is listed in ``characters`` or its
    general category is listed in ``categories``.
    """

    characters: frozenset[str] = field(default_factory=frozenset)
    categories: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Normalize members to frozensets of single scalars."""
        characters = frozenset(self.characters)
        if any(len(ch) != 1 for ch in characters):
            raise ValueError("Character set members must be single characters")
        object.__setattr__(self, "characters", characters)
        object.__setattr__(self, "categories", frozenset(self.categories))

    @classmethod
    def from_characters(cls, characters: Iterable[str]) -> "CharacterSet":
        """Create a set from the scalars of a string or any iterable of them."""
        return cls(characters=frozenset(characters))

    @classmethod
    def from_categories(cls, *categories: str) -> "CharacterSet":
        """Create a set from Unicode general category codes such as ``"Lu"``."""
        return cls(categories=frozenset(categories))

    @classmethod
    def lowercase_letters(cls) -> "CharacterSet":
        return cls(categories=LOWERCASE_CATEGORIES)

    @classmethod
    def uppercase_letters(cls) -> "CharacterSet":
        return cls(categories=UPPERCASE_CATEGORIES)

    @classmethod
    def decimal_digits(cls) -> "CharacterSet":
        return cls(categories=DECIMAL_DIGIT_CATEGORIES)

    @classmethod
    def punctuation(cls) -> "CharacterSet":
        return cls(categories=PUNCTUATION_CATEGORIES)

    @classmethod
    def symbols(cls) -> "CharacterSet":
        return cls(categories=SYMBOL_CATEGORIES)

    @classmethod
    def whitespace(cls) -> "CharacterSet":
        # Horizontal whitespace: space separators plus tab
        return cls(characters=frozenset({"\t"}), categories=WHITESPACE_CATEGORIES)

    @classmethod
    def non_base(cls) -> "CharacterSet":
        """Combining marks (diacritics and other non-spacing characters)."""
        return cls(categories=NON_BASE_CATEGORIES)

    def contains(self, character: str) -> bool:
        """Check whether a single scalar belongs to the set."""
        if character in self.characters:
            return True
        return bool(self.categories) and unicodedata.category(character) in self.categories

    def __contains__(self, character: object) -> bool:
        return isinstance(character, str) and len(character) == 1 and self.contains(character)

    def contains_any(self, text: str) -> bool:
        """Check whether at least one scalar of ``text`` is in the set."""
        return any(self.contains(ch) for ch in text)

    def contains_all(self, text: str) -> bool:
        """Check whether every scalar of ``text`` is in the set."""
        return all(self.contains(ch) for ch in text)

    def union(self, other: "CharacterSet") -> "CharacterSet":
        """Return a set containing the members of both sets."""
        return CharacterSet(
            characters=self.characters | other.characters,
            categories=self.categories | other.categories,
        )

    def __or__(self, other: "CharacterSet") -> "CharacterSet":
        return self.union(other)

    def is_empty(self) -> bool:
        """Check if the set has neither members nor categories."""
        return not self.characters and not self.categories
