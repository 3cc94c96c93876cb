# ruff: noqa: A005
"""Structured logging for pwpolicy.

Importing the package never configures logging. Until the application calls
``configure_logging`` every event is handed to the standard library logger of
the same name, where the package's ``NullHandler`` keeps it silent unless the
host has handlers of its own. ``configure_logging`` installs the structlog
pipeline, and loggers created earlier pick the new settings up on their next
call.

The library never hands a raw password to a logger; field names that look
like secrets are masked as well.

Note: This module name intentionally shadows the standard library 'logging'
module inside the package namespace.
"""

import logging
import re
import sys
from dataclasses import dataclass, field
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars

from pwpolicy.core.enums import Environment, LogFormat, LogLevel

ROOT_LOGGER_NAME = "pwpolicy"


@dataclass
class LogConfig:
    """
    Logging configuration with environment defaults.

    Usage Example:
        configure_logging(
            LogConfig(level=LogLevel.DEBUG, environment=Environment.DEVELOPMENT)
        )
    """

    level: LogLevel = field(default=LogLevel.INFO)
    format: LogFormat = field(default=LogFormat.JSON)
    environment: Environment = field(default=Environment.PRODUCTION)

    enable_timestamps: bool = field(default=True)
    enable_caller_info: bool = field(default=False)
    enable_sensitive_data_filtering: bool = field(default=True)

    def __post_init__(self):
        self.apply_environment_defaults()

    def apply_environment_defaults(self) -> None:
        if self.environment == Environment.DEVELOPMENT:
            self.format = LogFormat.CONSOLE
            self.enable_caller_info = True

        elif self.environment == Environment.TESTING:
            self.level = LogLevel.WARNING
            self.format = LogFormat.PLAIN

        elif self.environment.is_production:
            # Masking cannot be switched off in production
            self.enable_sensitive_data_filtering = True
            self.format = LogFormat.JSON

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level.level_name,
            "format": self.format.value,
            "environment": self.environment.value,
            "enable_timestamps": self.enable_timestamps,
            "enable_caller_info": self.enable_caller_info,
            "enable_sensitive_data_filtering": self.enable_sensitive_data_filtering,
        }


_DEFAULT_CONFIG = LogConfig()


class SensitiveDataFilter:
    """
    Masks fields whose names look like secrets.

    Masking recurses through nested dicts and lists of dicts. ``None`` stays
    ``None`` so a missing value is not reported as a masked one.
    """

    SENSITIVE_NAMES = re.compile(
        r"password|passphrase|secret|token|credential|candidate", re.IGNORECASE
    )

    def __init__(self, mask_char: str = "*", preserve_length: bool = False):
        self.mask_char = mask_char
        self.preserve_length = preserve_length

    def filter(self, record: dict[str, Any]) -> dict[str, Any]:
        masked = {}
        for key, value in record.items():
            if self.SENSITIVE_NAMES.search(key):
                masked[key] = self._mask(value)
            elif isinstance(value, dict):
                masked[key] = self.filter(value)
            elif isinstance(value, list):
                masked[key] = [
                    self.filter(item) if isinstance(item, dict) else item
                    for item in value
                ]
            else:
                masked[key] = value
        return masked

    def _mask(self, value: Any) -> str | None:
        if value is None:
            return None
        if self.preserve_length:
            return self.mask_char * len(str(value))
        return f"{self.mask_char * 3}[MASKED]"


# Used while the application has not called configure_logging
_STDLIB_PROCESSORS = [
    merge_contextvars,
    structlog.processors.format_exc_info,
    structlog.processors.KeyValueRenderer(key_order=["event"]),
]


class StructuredLogger:
    """
    Logger that masks every record before emitting it.

    Without an explicit ``config`` the logger follows whatever
    ``configure_logging`` installed most recently, so module-level loggers
    created on import honour a later configuration.
    """

    def __init__(self, name: str, config: LogConfig | None = None):
        self.name = name
        self._config = config
        self._log_count = 0

    @property
    def config(self) -> LogConfig:
        if self._config is not None:
            return self._config
        if _logger_factory is not None:
            return _logger_factory.config
        return _DEFAULT_CONFIG

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level.priority >= self.config.level.priority

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log an error with the active exception's traceback."""
        kwargs["exc_info"] = True
        self.error(message, **kwargs)

    def prepare_record(self, message: str, **kwargs: Any) -> dict[str, Any]:
        """Build the masked record for a message."""
        record = {"message": message, "logger": self.name, **kwargs}
        if self.config.enable_sensitive_data_filtering:
            record = SensitiveDataFilter().filter(record)
        return record

    def _bound_logger(self) -> Any:
        if _logger_factory is not None:
            return structlog.get_logger(self.name)
        return structlog.wrap_logger(
            logging.getLogger(self.name),
            processors=_STDLIB_PROCESSORS,
            wrapper_class=structlog.stdlib.BoundLogger,
        )

    def _log(self, level: LogLevel, message: str, **kwargs: Any) -> None:
        if not self.is_enabled_for(level):
            return

        record = self.prepare_record(message, **kwargs)
        emitted = record.pop("message")
        record.pop("logger", None)
        getattr(self._bound_logger(), level.level_name.lower())(emitted, **record)
        self._log_count += 1

    def get_stats(self) -> dict[str, Any]:
        return {"logger_name": self.name, "log_count": self._log_count}


class LoggerFactory:
    """Installs the structlog pipeline described by a LogConfig."""

    def __init__(self, config: LogConfig):
        self.config = config

    def build_processors(self) -> list[Any]:
        processors = [
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
        ]

        if self.config.enable_timestamps:
            processors.append(structlog.processors.TimeStamper(fmt="iso"))

        if self.config.enable_caller_info:
            processors.append(
                structlog.processors.CallsiteParameterAdder(
                    parameters=[
                        structlog.processors.CallsiteParameter.MODULE,
                        structlog.processors.CallsiteParameter.LINENO,
                    ]
                )
            )

        processors.append(structlog.processors.format_exc_info)

        if self.config.format == LogFormat.JSON:
            processors.append(structlog.processors.JSONRenderer())
        elif self.config.format == LogFormat.CONSOLE:
            processors.append(structlog.dev.ConsoleRenderer(colors=False))
        else:
            processors.append(structlog.processors.KeyValueRenderer(key_order=["event"]))

        return processors

    def configure_logging(self) -> None:
        structlog.configure(
            processors=self.build_processors(),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(format="%(message)s", stream=sys.stdout)
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(self.config.level.to_logging_level())


_logger_factory: LoggerFactory | None = None
_loggers: dict[str, StructuredLogger] = {}


def configure_logging(config: LogConfig | None = None) -> None:
    """
    Configure structlog and the standard logging bridge for the application.

    This is the only call in the package that touches global logging state.
    Existing loggers follow the new configuration from their next call on.

    Args:
        config: Logging configuration (uses defaults if not provided)
    """
    global _logger_factory  # noqa: PLW0603 - Required to replace global factory

    factory = LoggerFactory(config or LogConfig())
    factory.configure_logging()
    _logger_factory = factory


def get_logger(name: str) -> StructuredLogger:
    """
    Get the structured logger for a module. Never configures logging.

    Args:
        name: Logger name (usually __name__)
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name)
    return _loggers[name]


def log_context(**kwargs: Any) -> None:
    """Add context variables to all subsequent logs in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "ROOT_LOGGER_NAME",
    "LogConfig",
    "LoggerFactory",
    "SensitiveDataFilter",
    "StructuredLogger",
    "clear_context",
    "configure_logging",
    "get_logger",
    "log_context",
]
