"""Shared enums for the pwpolicy library.

Infrastructure-level enumerations (environments, log levels and formats)
used by configuration and logging. Domain enumerations such as password
strength live in ``pwpolicy.domain.enums``.
"""

from enum import Enum


class Environment(Enum):
    """Deployment environment a password policy is configured for."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"

    @property
    def is_production(self) -> bool:
        """Check if environment is production."""
        return self == Environment.PRODUCTION

    @property
    def requires_security_hardening(self) -> bool:
        """Check if environment requires security hardening."""
        return self in (Environment.STAGING, Environment.PRODUCTION)

    @classmethod
    def from_string(cls, value: str) -> "Environment":
        """Create Environment from its value or name, case-insensitively."""
        normalized = value.strip().lower()
        for environment in cls:
            if normalized in (environment.value, environment.name.lower()):
                return environment
        raise ValueError(f"Invalid environment: {value}")


class LogLevel(Enum):
    """Logging levels with priority mapping."""

    DEBUG = ("DEBUG", 10)
    INFO = ("INFO", 20)
    WARNING = ("WARNING", 30)
    ERROR = ("ERROR", 40)
    CRITICAL = ("CRITICAL", 50)

    def __init__(self, level_name: str, priority: int):
        self.level_name = level_name
        self.priority = priority

    def to_logging_level(self) -> int:
        """Convert to standard logging module level."""
        return self.priority


class LogFormat(Enum):
    """Log output formats."""

    JSON = "json"
    CONSOLE = "console"
    PLAIN = "plain"

    @property
    def is_structured(self) -> bool:
        """Check if format is structured (machine readable)."""
        return self == LogFormat.JSON
