"""Error classes for the pwpolicy library.

Only configuration problems are raised as exceptions. A password that fails
validation is an ordinary ``ValidationResult``, and exceptions raised by
injected capabilities (predicates, pattern matchers, dictionaries) reach the
caller unchanged.
"""

import logging
import time
import uuid
from enum import Enum
from typing import Any


class ErrorSeverity(Enum):
    """Error severity levels for monitoring and alerting."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class PasswordPolicyError(Exception):
    """
    Base exception for all pwpolicy errors.

    Carries a stable error code, structured details and an error id, and
    logs itself with sensitive detail keys redacted.
    """

    default_code: str = "PASSWORD_POLICY_ERROR"
    severity: ErrorSeverity = ErrorSeverity.MEDIUM

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = kwargs.get("code") or self.default_code
        self.details = kwargs.get("details") or {}
        self.error_id = str(uuid.uuid4())
        self.timestamp = time.time()
        self.context = kwargs.get("context") or {}
        self.__cause__ = kwargs.get("cause")

        self._log_error()

    def _log_error(self) -> None:
        """Log error with structured data."""
        logger = logging.getLogger(f"pwpolicy.errors.{self.__class__.__name__}")
        log_data = {
            "error_id": self.error_id,
            "code": self.code,
            "error_message": self.message,
            "severity": self.severity.value,
            "details": self._sanitize_details(self.details),
            "context": self._sanitize_details(self.context),
            "error_class": self.__class__.__name__,
        }

        if self.severity == ErrorSeverity.CRITICAL:
            logger.critical("Critical error occurred", extra=log_data)
        elif self.severity == ErrorSeverity.HIGH:
            logger.error("High severity error", extra=log_data)
        elif self.severity == ErrorSeverity.MEDIUM:
            logger.warning("Medium severity error", extra=log_data)
        else:
            logger.info("Low severity error", extra=log_data)

    def _sanitize_details(self, details: dict) -> dict:
        """Sanitize error details to remove sensitive information."""
        if not details:
            return {}

        sensitive_keys = {"password", "token", "secret", "credential"}
        sanitized = {}

        for key, value in details.items():
            if any(sensitive in key.lower() for sensitive in sensitive_keys):
                sanitized[key] = "***REDACTED***"
            elif isinstance(value, dict):
                sanitized[key] = self._sanitize_details(value)
            else:
                sanitized[key] = value

        return sanitized

    def to_dict(self, include_internal: bool = False) -> dict[str, Any]:
        """
        Serialize error for logging or an API response.

        Args:
            include_internal: Include the error id, severity and context
        """
        data = {
            "error": self.code,
            "message": self.message,
            "timestamp": self.timestamp,
        }

        if self.details:
            data["details"] = self._sanitize_details(self.details)

        if include_internal:
            data.update(
                {
                    "error_id": self.error_id,
                    "severity": self.severity.value,
                    "context": self._sanitize_details(self.context),
                }
            )

        return data

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ConfigurationError(PasswordPolicyError):
    """Invalid policy configuration."""

    default_code = "CONFIGURATION_ERROR"
    severity = ErrorSeverity.HIGH

    def __init__(
        self, message: str, config_key: str | None = None, **kwargs: Any
    ) -> None:
        super().__init__(message, **kwargs)
        if config_key:
            self.details["config_key"] = config_key
        self.code = self.default_code


class RuleConfigurationError(ConfigurationError):
    """A rule was constructed with an invalid configuration."""

    default_code = "RULE_CONFIGURATION_ERROR"

    def __init__(self, rule: str, message: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.details["rule"] = rule
        self.code = self.default_code


__all__ = [
    "ConfigurationError",
    "ErrorSeverity",
    "PasswordPolicyError",
    "RuleConfigurationError",
]
