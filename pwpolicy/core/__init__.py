"""Core infrastructure shared by the password policy domain.

Architecture Components:
- enums: Environment, log level and log format enumerations
- errors: Error hierarchy with structured self-logging
- logging: Structured logging over structlog with sensitive data filtering
- config: Policy configuration, environment profiles and variable loading
"""

# Enums
from .enums import Environment, LogFormat, LogLevel

# Error hierarchy
from .errors import (
    ConfigurationError,
    ErrorSeverity,
    PasswordPolicyError,
    RuleConfigurationError,
)

# Logging
from .logging import (
    LogConfig,
    LoggerFactory,
    SensitiveDataFilter,
    StructuredLogger,
    clear_context,
    configure_logging,
    get_logger,
    log_context,
)

# Configuration management
from .config import (
    EnvironmentLoader,
    PasswordPolicyConfig,
    PolicyConfigManager,
    load_password_policy_config,
)

__all__ = [
    "ConfigurationError",
    "Environment",
    "EnvironmentLoader",
    "ErrorSeverity",
    "LogConfig",
    "LogFormat",
    "LogLevel",
    "LoggerFactory",
    "PasswordPolicyConfig",
    "PasswordPolicyError",
    "PolicyConfigManager",
    "RuleConfigurationError",
    "SensitiveDataFilter",
    "StructuredLogger",
    "clear_context",
    "configure_logging",
    "get_logger",
    "load_password_policy_config",
    "log_context",
]
