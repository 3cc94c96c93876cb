"""
Capability Adapters

Reference implementations of the domain interfaces.
"""

from .callable_predicate import CallablePredicate
from .regex_matcher import RegexPatternMatcher
from .word_list_dictionary import WordListDictionary

__all__ = [
    'CallablePredicate',
    'RegexPatternMatcher',
    'WordListDictionary',
]
