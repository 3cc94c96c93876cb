"""
Password Validator

Evaluates an ordered list of rules as one policy.
"""

from collections.abc import Iterable

from pwpolicy.core.logging import get_logger
from pwpolicy.domain.rules.base import PasswordRule
from pwpolicy.domain.rules.length_rule import LengthRule
from pwpolicy.domain.value_objects.validation_result import ValidationResult

logger = get_logger(__name__)

DEFAULT_MINIMUM_LENGTH = 8
DEFAULT_MAXIMUM_LENGTH = 128


class PasswordValidator:
    """
    Ordered, immutable collection of password rules.

    Every rule is evaluated on every call, even after an earlier rule has
    failed, so a failure reports the complete set of rejecting rules. With
    no arguments the validator enforces a length of ``[8, 128)``; an
    explicit empty rule list accepts every password.
    """

    def __init__(self, rules: Iterable[PasswordRule] | None = None):
        if rules is None:
            rules = [LengthRule(DEFAULT_MINIMUM_LENGTH, DEFAULT_MAXIMUM_LENGTH)]
        self._rules: tuple[PasswordRule, ...] = tuple(rules)

        for rule in self._rules:
            if not isinstance(rule, PasswordRule):
                raise TypeError(
                    f"Validator rules must be PasswordRule instances, got {type(rule).__name__}"
                )

    @classmethod
    def default(cls) -> "PasswordValidator":
        return cls()

    @property
    def rules(self) -> tuple[PasswordRule, ...]:
        return self._rules

    def validate(self, password: str) -> ValidationResult:
        """
        Validate a password against every rule.

        Args:
            password: Candidate password

        Returns:
            ValidationResult: success, or failure listing the rejecting rules
                in rule order

        Raises:
            Whatever an injected capability raises, unchanged.
        """
        failing_rules = []

        for rule in self._rules:
            try:
                passed = rule.evaluate(password)
            except Exception:
                logger.exception(
                    "Password rule raised during evaluation",
                    rule=rule.rule_name,
                    failure_code=str(rule.failure_code),
                )
                raise

            if not passed:
                failing_rules.append(rule)

        logger.debug(
            "Password validated",
            rule_count=len(self._rules),
            failure_codes=[str(rule.failure_code) for rule in failing_rules],
        )

        if not failing_rules:
            return ValidationResult.success()
        return ValidationResult.failure(failing_rules)

    def is_valid(self, password: str) -> bool:
        return self.validate(password).is_valid

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"PasswordValidator(rules={list(self._rules)!r})"
