"""
Policy Builders

Fluent builder for assembling password validators from rules or configuration.
"""

import re
from collections.abc import Callable

from pwpolicy.core.config import PasswordPolicyConfig, PolicyConfigManager
from pwpolicy.core.enums import Environment
from pwpolicy.core.errors import ConfigurationError
from pwpolicy.core.logging import get_logger
from pwpolicy.domain.enums import Strength
from pwpolicy.domain.interfaces import IDictionaryLookup, IPredicateEvaluator
from pwpolicy.domain.rules import (
    AllowedCharacterRule,
    FunctionalRule,
    LengthRule,
    NonDictionaryWordRule,
    PasswordRule,
    PredicateRule,
    RegularExpressionRule,
    RequiredCharacterRule,
    StrengthRule,
)
from pwpolicy.domain.validator import PasswordValidator

logger = get_logger(__name__)


class PolicyBuilder:
    """
    Fluent builder for password validators.

    Rules appear in the built validator in the order the builder methods
    were called.
    """

    def __init__(self):
        self._rules: list[PasswordRule] = []

    @classmethod
    def for_environment(
        cls,
        environment: Environment,
        dictionary: IDictionaryLookup | None = None,
    ) -> "PolicyBuilder":
        """Start from the policy profile of ``environment``."""
        config = PolicyConfigManager(environment).get_password_config()
        return cls().from_config(config, dictionary=dictionary)

    def with_length(self, minimum: int, maximum: int) -> "PolicyBuilder":
        """Require a length in ``[minimum, maximum)``."""
        self._rules.append(LengthRule(minimum, maximum))
        return self

    def require_lowercase(self) -> "PolicyBuilder":
        self._rules.append(RequiredCharacterRule.lowercase_required())
        return self

    def require_uppercase(self) -> "PolicyBuilder":
        self._rules.append(RequiredCharacterRule.uppercase_required())
        return self

    def require_digits(self) -> "PolicyBuilder":
        self._rules.append(RequiredCharacterRule.decimal_digit_required())
        return self

    def require_symbols(self) -> "PolicyBuilder":
        self._rules.append(RequiredCharacterRule.symbol_required())
        return self

    def allow_only(self, characters: str) -> "PolicyBuilder":
        self._rules.append(AllowedCharacterRule.from_characters(characters))
        return self

    def with_minimum_strength(self, minimum: Strength) -> "PolicyBuilder":
        self._rules.append(StrengthRule(minimum))
        return self

    def reject_dictionary_words(self, dictionary: IDictionaryLookup) -> "PolicyBuilder":
        self._rules.append(NonDictionaryWordRule(dictionary))
        return self

    def with_pattern(self, pattern: str | re.Pattern[str], flags: int = 0) -> "PolicyBuilder":
        self._rules.append(RegularExpressionRule.from_pattern(pattern, flags))
        return self

    def with_predicate(self, predicate: IPredicateEvaluator) -> "PolicyBuilder":
        self._rules.append(PredicateRule(predicate))
        return self

    def with_function(self, function: Callable[[str], bool]) -> "PolicyBuilder":
        self._rules.append(FunctionalRule(function))
        return self

    def with_rule(self, rule: PasswordRule) -> "PolicyBuilder":
        """Add a custom rule."""
        if not isinstance(rule, PasswordRule):
            raise TypeError(f"Expected a PasswordRule, got {type(rule).__name__}")
        self._rules.append(rule)
        return self

    def from_config(
        self,
        config: PasswordPolicyConfig,
        dictionary: IDictionaryLookup | None = None,
    ) -> "PolicyBuilder":
        """
        Add the rules described by ``config``.

        Rules are added as length, allowed characters, lowercase, uppercase,
        digit, symbol, dictionary word and strength, skipping disabled ones.

        Args:
            config: Policy configuration
            dictionary: Lookup for the dictionary rule; loaded from
                ``config.dictionary_path`` when omitted

        Raises:
            ConfigurationError: If dictionary words are rejected but no
                dictionary is available
        """
        self.with_length(config.min_length, config.max_length)

        if config.allowed_characters:
            self.allow_only(config.allowed_characters)
        if config.require_lowercase:
            self.require_lowercase()
        if config.require_uppercase:
            self.require_uppercase()
        if config.require_digits:
            self.require_digits()
        if config.require_symbols:
            self.require_symbols()

        if config.reject_dictionary_words:
            self.reject_dictionary_words(self._resolve_dictionary(config, dictionary))

        if config.minimum_strength is not None:
            self.with_minimum_strength(config.minimum_strength)

        return self

    @staticmethod
    def _resolve_dictionary(
        config: PasswordPolicyConfig, dictionary: IDictionaryLookup | None
    ) -> IDictionaryLookup:
        if dictionary is not None:
            return dictionary
        if not config.dictionary_path:
            raise ConfigurationError(
                "Dictionary words are rejected but no dictionary was provided",
                config_key="dictionary_path",
            )

        from pwpolicy.infrastructure.adapters.word_list_dictionary import (
            WordListDictionary,
        )

        return WordListDictionary.from_file(config.dictionary_path)

    def build(self) -> PasswordValidator:
        """Build the validator."""
        validator = PasswordValidator(self._rules)
        logger.debug(
            "Password validator built",
            rules=[rule.rule_name for rule in validator.rules],
        )
        return validator
