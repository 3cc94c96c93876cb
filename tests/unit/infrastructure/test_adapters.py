"""
Test cases for the capability adapters.
"""

import re

import pytest

from pwpolicy.core.errors import ConfigurationError
from pwpolicy.domain.rules import NonDictionaryWordRule
from pwpolicy.infrastructure.adapters import (
    CallablePredicate,
    RegexPatternMatcher,
    WordListDictionary,
)

pytestmark = pytest.mark.unit


class TestRegexPatternMatcher:
    """Test the re-based pattern matcher."""

    def test_compile_string(self):
        """Test compiling a string pattern."""
        matcher = RegexPatternMatcher.compile(r"[0-9]{2}")

        assert matcher.matches("ab12") is True
        assert matcher.matches("a1b2") is False

    def test_search_semantics(self):
        """Test a match anywhere in the value counts."""
        matcher = RegexPatternMatcher.compile("word")

        assert matcher.matches("password") is True

    def test_flags_rejected_for_compiled_pattern(self):
        """Test flags cannot be combined with a compiled pattern."""
        with pytest.raises(ValueError, match="already compiled"):
            RegexPatternMatcher.compile(re.compile("a"), re.IGNORECASE)


class TestCallablePredicate:
    """Test the callable predicate adapter."""

    def test_result_coerced_to_bool(self):
        """Test truthy and falsy answers become booleans."""
        assert CallablePredicate(len).accepts("abc") is True
        assert CallablePredicate(len).accepts("") is False

    def test_constant(self):
        """Test constant predicates ignore their input."""
        assert CallablePredicate.constant(True).accepts("anything") is True
        assert CallablePredicate.constant(False).accepts("anything") is False


class TestWordListDictionary:
    """Test the word list dictionary."""

    def test_case_insensitive_lookup(self):
        """Test words are matched regardless of case."""
        dictionary = WordListDictionary(["Password", " dragon "])

        assert dictionary.is_known_word("password") is True
        assert dictionary.is_known_word("DRAGON") is True
        assert dictionary.is_known_word("xylophone") is False
        assert "dragon" in dictionary
        assert 42 not in dictionary

    def test_blank_entries_ignored(self):
        """Test blank lines never become words."""
        dictionary = WordListDictionary(["", "   ", "monkey"])

        assert len(dictionary) == 1
        assert dictionary.is_known_word("") is False

    def test_from_file(self, word_list_dictionary):
        """Test loading a word file skipping comments and blanks."""
        assert len(word_list_dictionary) == 3
        assert word_list_dictionary.is_known_word("password") is True
        assert word_list_dictionary.is_known_word("monkey") is True
        assert word_list_dictionary.is_known_word("# common passwords") is False

    def test_missing_file(self, tmp_path):
        """Test a missing word file is a configuration error."""
        with pytest.raises(ConfigurationError, match="Failed to load word list") as exc_info:
            WordListDictionary.from_file(tmp_path / "missing.txt")

        assert exc_info.value.details["config_key"] == "dictionary_path"
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_with_dictionary_rule(self, word_list_dictionary):
        """Test the dictionary plugged into the dictionary word rule."""
        rule = NonDictionaryWordRule(word_list_dictionary)

        assert rule.evaluate("Monkey!23") is False
        assert rule.evaluate("Xylophone!23") is True
