"""
Test cases for PolicyBuilder.

Tests fluent rule assembly, configuration-driven construction and
environment profiles.
"""

import pytest

from pwpolicy.core.config import PasswordPolicyConfig
from pwpolicy.core.enums import Environment
from pwpolicy.core.errors import ConfigurationError
from pwpolicy.domain.builders import PolicyBuilder
from pwpolicy.domain.enums import Strength
from pwpolicy.domain.rules import (
    AllowedCharacterRule,
    LengthRule,
    NonDictionaryWordRule,
    RequiredCharacterRule,
    StrengthRule,
)
from pwpolicy.domain.validator import PasswordValidator
from pwpolicy.infrastructure.adapters import CallablePredicate

pytestmark = pytest.mark.unit


class TestFluentBuilder:
    """Test building validators rule by rule."""

    def test_rules_follow_call_order(self):
        """Test rules appear in the order the builder methods were called."""
        validator = (
            PolicyBuilder()
            .require_uppercase()
            .with_length(8, 64)
            .require_digits()
            .build()
        )

        assert isinstance(validator, PasswordValidator)
        assert validator.rules == (
            RequiredCharacterRule.uppercase_required(),
            LengthRule(8, 64),
            RequiredCharacterRule.decimal_digit_required(),
        )

    def test_empty_builder_accepts_everything(self):
        """Test a builder without rules yields a validator without rules."""
        validator = PolicyBuilder().build()

        assert len(validator) == 0
        assert validator.is_valid("") is True

    def test_all_rule_kinds(self, recording_dictionary):
        """Test every builder method adds its rule."""
        validator = (
            PolicyBuilder()
            .with_length(4, 32)
            .allow_only("abcdefghijklmnopqrstuvwxyz0123456789")
            .require_lowercase()
            .with_minimum_strength(Strength.WEAK)
            .reject_dictionary_words(recording_dictionary)
            .with_pattern(r"\d$")
            .with_predicate(CallablePredicate(lambda password: "q" not in password))
            .with_function(lambda password: len(set(password)) > 3)
            .build()
        )

        assert [rule.rule_name for rule in validator.rules] == [
            "LengthRule",
            "AllowedCharacterRule",
            "RequiredCharacterRule",
            "StrengthRule",
            "NonDictionaryWordRule",
            "RegularExpressionRule",
            "PredicateRule",
            "FunctionalRule",
        ]
        assert validator.is_valid("dragonfly7") is True
        assert validator.validate("dragon7").failure_codes == ["dictionary_word"]

    def test_with_custom_rule(self):
        """Test adding a prebuilt rule."""
        rule = RequiredCharacterRule.from_characters("#", label="hash_required")

        validator = PolicyBuilder().with_rule(rule).build()

        assert validator.validate("password").failure_codes == ["hash_required"]

    def test_with_rule_rejects_non_rules(self):
        """Test custom rules must be PasswordRule instances."""
        with pytest.raises(TypeError):
            PolicyBuilder().with_rule("not a rule")

    def test_invalid_length_fails_immediately(self):
        """Test invalid bounds raise when the rule is added."""
        with pytest.raises(ConfigurationError):
            PolicyBuilder().with_length(10, 2)


class TestBuilderFromConfig:
    """Test building validators from configuration."""

    def test_minimal_config(self, policy_config_factory):
        """Test a configuration without requirements yields only a length rule."""
        config = policy_config_factory(min_length=10, max_length=20)

        validator = PolicyBuilder().from_config(config).build()

        assert validator.rules == (LengthRule(10, 20),)

    def test_fixed_rule_order(self, recording_dictionary):
        """Test configuration rules are emitted in a fixed order."""
        config = PasswordPolicyConfig(
            min_length=8,
            max_length=64,
            require_lowercase=True,
            require_uppercase=True,
            require_digits=True,
            require_symbols=True,
            allowed_characters="abcABC123!",
            minimum_strength=Strength.STRONG,
            reject_dictionary_words=True,
        )

        validator = PolicyBuilder().from_config(config, dictionary=recording_dictionary).build()

        assert validator.rules == (
            LengthRule(8, 64),
            AllowedCharacterRule.from_characters("abcABC123!"),
            RequiredCharacterRule.lowercase_required(),
            RequiredCharacterRule.uppercase_required(),
            RequiredCharacterRule.decimal_digit_required(),
            RequiredCharacterRule.symbol_required(),
            NonDictionaryWordRule(recording_dictionary),
            StrengthRule(Strength.STRONG),
        )

    def test_dictionary_loaded_from_path(self, word_file):
        """Test the dictionary is loaded from the configured word file."""
        config = PasswordPolicyConfig(
            reject_dictionary_words=True, dictionary_path=str(word_file)
        )

        validator = PolicyBuilder().from_config(config).build()

        assert validator.validate("Password123").failure_codes == ["dictionary_word"]
        assert validator.validate("Xylophone123").is_valid is True

    def test_dictionary_required(self):
        """Test rejecting dictionary words without a dictionary is an error."""
        config = PasswordPolicyConfig(reject_dictionary_words=True)

        with pytest.raises(ConfigurationError, match="no dictionary"):
            PolicyBuilder().from_config(config)

    def test_config_rules_precede_later_calls(self):
        """Test builder calls after from_config append to its rules."""
        config = PasswordPolicyConfig(min_length=4, max_length=16)

        validator = PolicyBuilder().from_config(config).require_symbols().build()

        assert validator.validate("abcd").failure_codes == ["symbol_required"]


class TestBuilderForEnvironment:
    """Test environment profiles."""

    def test_production_profile(self):
        """Test production requires every class and reasonable strength."""
        validator = PolicyBuilder.for_environment(Environment.PRODUCTION).build()

        assert validator.validate("password").failure_codes == [
            "uppercase_required",
            "decimal_digit_required",
            "symbol_required",
        ]
        assert validator.is_valid("Tr0ub4dor&3") is True
        assert validator.rules[-1] == StrengthRule(Strength.REASONABLE)

    def test_development_profile(self):
        """Test development relaxes the minimum length."""
        validator = PolicyBuilder.for_environment(Environment.DEVELOPMENT).build()

        assert validator.rules == (LengthRule(6, 128),)
        assert validator.is_valid("abcdef") is True
        assert validator.is_valid("abcde") is False

    def test_testing_profile_uses_defaults(self):
        """Test the testing profile matches the default policy."""
        validator = PolicyBuilder.for_environment(Environment.TESTING).build()

        assert validator.rules == PasswordValidator.default().rules
