"""Password policy configuration management.

Declarative password policy settings with validation, environment-specific
overrides and environment-variable loading.

Architecture:
- PasswordPolicyConfig: The policy settings, validated on construction
- PolicyConfigManager: Environment profiles applied over the defaults
- EnvironmentLoader: Typed access to PASSWORD_POLICY_* variables and .env files
- load_password_policy_config: Profile defaults overridden by the environment
"""

import os
from collections.abc import Mapping
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any

from pwpolicy.core.enums import Environment
from pwpolicy.core.errors import ConfigurationError
from pwpolicy.domain.enums import Strength

ENV_PREFIX = "PASSWORD_POLICY_"

BOOLEAN_SETTINGS = (
    "require_lowercase",
    "require_uppercase",
    "require_digits",
    "require_symbols",
    "reject_dictionary_words",
)

# =====================================================================================
# VALIDATION HELPERS
# =====================================================================================


def validate_integer(value: Any, key: str, min_value: int | None = None) -> int:
    try:
        val = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{key} must be an integer", config_key=key) from e
    if min_value is not None and val < min_value:
        raise ConfigurationError(f"{key} must be >= {min_value}", config_key=key)
    return val


def validate_boolean(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in ("true", "1", "yes", "on"):
            return True
        if normalized in ("false", "0", "no", "off", ""):
            return False
    raise ConfigurationError(f"{key} must be a boolean", config_key=key)


def validate_strength(value: Any, key: str) -> Strength:
    if isinstance(value, Strength):
        return value
    try:
        if isinstance(value, int):
            return Strength(value)
        return Strength.from_string(str(value))
    except ValueError as e:
        raise ConfigurationError(f"{key} must be a strength rank", config_key=key) from e


# =====================================================================================
# POLICY CONFIGURATION
# =====================================================================================


@dataclass
class PasswordPolicyConfig:
    """Password policy configuration."""

    min_length: int = 8
    max_length: int = 128
    require_lowercase: bool = False
    require_uppercase: bool = False
    require_digits: bool = False
    require_symbols: bool = False
    allowed_characters: str | None = None
    minimum_strength: Strength | None = None
    reject_dictionary_words: bool = False
    dictionary_path: str | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self.min_length = validate_integer(self.min_length, "min_length", min_value=0)
        self.max_length = validate_integer(self.max_length, "max_length", min_value=0)

        if self.min_length > self.max_length:
            raise ConfigurationError(
                "Minimum password length must not exceed maximum",
                config_key="min_length",
            )

        for name in BOOLEAN_SETTINGS:
            setattr(self, name, validate_boolean(getattr(self, name), name))

        if self.minimum_strength is not None:
            self.minimum_strength = validate_strength(
                self.minimum_strength, "minimum_strength"
            )

        if self.allowed_characters is not None and not self.allowed_characters:
            raise ConfigurationError(
                "Allowed characters cannot be empty", config_key="allowed_characters"
            )

        if self.dictionary_path and not self.reject_dictionary_words:
            raise ConfigurationError(
                "dictionary_path is set but reject_dictionary_words is disabled",
                config_key="dictionary_path",
            )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        if self.minimum_strength is not None:
            data["minimum_strength"] = self.minimum_strength.name.lower()
        return data


class PolicyConfigManager:
    """Manages password policy configuration with environment-specific overrides."""

    def __init__(self, environment: Environment = Environment.PRODUCTION):
        self.environment = environment
        self._config = PasswordPolicyConfig()
        self._apply_environment_overrides()
        self._config.validate()

    def _apply_environment_overrides(self) -> None:
        """Apply environment-specific configuration overrides."""
        if self.environment == Environment.DEVELOPMENT:
            self._apply_development_overrides()
        elif self.environment.requires_security_hardening:
            self._apply_hardened_overrides()

    def _apply_development_overrides(self) -> None:
        # Relaxed password requirements for development
        self._config.min_length = 6

    def _apply_hardened_overrides(self) -> None:
        self._require_all_character_classes()
        if self.environment.is_production:
            self._config.minimum_strength = Strength.REASONABLE

    def _require_all_character_classes(self) -> None:
        self._config.require_lowercase = True
        self._config.require_uppercase = True
        self._config.require_digits = True
        self._config.require_symbols = True

    def get_password_config(self) -> PasswordPolicyConfig:
        """Get a copy of the password policy configuration."""
        return replace(self._config)

    def update_config(self, **kwargs: Any) -> None:
        """
        Update configuration with provided values.

        Raises:
            ConfigurationError: If a key is unknown or the result is invalid
        """
        for key in kwargs:
            if not hasattr(self._config, key):
                raise ConfigurationError(f"Unknown password policy setting: {key}", config_key=key)
        self._config = replace(self._config, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "environment": self.environment.value,
            "password": self._config.to_dict(),
        }


# =====================================================================================
# ENVIRONMENT LOADER
# =====================================================================================


class EnvironmentLoader:
    """
    Environment variable loader with type conversion and validation.

    Values from an optional ``.env`` file are used only for keys missing
    from the process environment. The process environment is never modified.
    """

    def __init__(
        self,
        env_file: str | Path | None = ".env",
        environ: Mapping[str, str] | None = None,
    ):
        """
        Initialize environment loader.

        Args:
            env_file: Optional environment file to load
            environ: Variables to read instead of ``os.environ``
        """
        self.env_file = Path(env_file) if env_file else None
        self._values: dict[str, str] = {}
        self._load_env_file()
        self._values.update(os.environ if environ is None else environ)

    def _load_env_file(self) -> None:
        """Load key=value pairs from the environment file if it exists."""
        if self.env_file is None or not self.env_file.exists():
            return

        try:
            with self.env_file.open(encoding="utf-8") as f:
                for raw_line in f:
                    line = raw_line.strip()

                    if not line or line.startswith("#") or "=" not in line:
                        continue

                    key, value = line.split("=", 1)
                    key = key.strip()
                    value = value.strip()

                    if (value.startswith('"') and value.endswith('"')) or (
                        value.startswith("'") and value.endswith("'")
                    ):
                        value = value[1:-1]

                    self._values[key] = value

        except OSError as e:
            raise ConfigurationError(
                f"Failed to load environment file {self.env_file}: {e}"
            ) from e

    def has(self, key: str) -> bool:
        return key in self._values

    def get_string(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)

    def get_integer(self, key: str, default: int | None = None, **kwargs: Any) -> int | None:
        value = self._values.get(key)
        if value is None:
            return default
        return validate_integer(value, key, **kwargs)

    def get_boolean(self, key: str, default: bool | None = None) -> bool | None:
        value = self._values.get(key)
        if value is None:
            return default
        return validate_boolean(value, key)

    def get_strength(self, key: str, default: Strength | None = None) -> Strength | None:
        value = self._values.get(key)
        if value is None or not value.strip():
            return default
        return validate_strength(value, key)

    def get_environment(self, key: str, default: Environment) -> Environment:
        value = self._values.get(key)
        if value is None:
            return default
        try:
            return Environment.from_string(value)
        except ValueError as e:
            raise ConfigurationError(f"{key} must be an environment name", config_key=key) from e


def load_password_policy_config(
    env_file: str | Path | None = ".env",
    environ: Mapping[str, str] | None = None,
    prefix: str = ENV_PREFIX,
) -> PasswordPolicyConfig:
    """
    Build a policy configuration from ``PASSWORD_POLICY_*`` variables.

    ``PASSWORD_POLICY_ENVIRONMENT`` selects the profile (production when
    unset); the remaining variables override individual settings.

    Raises:
        ConfigurationError: If a variable is malformed or the result is invalid
    """
    loader = EnvironmentLoader(env_file=env_file, environ=environ)
    environment = loader.get_environment(f"{prefix}ENVIRONMENT", Environment.PRODUCTION)
    config = PolicyConfigManager(environment).get_password_config()

    overrides: dict[str, Any] = {}
    for name in ("min_length", "max_length"):
        key = f"{prefix}{name.upper()}"
        if loader.has(key):
            overrides[name] = loader.get_integer(key, min_value=0)

    for name in BOOLEAN_SETTINGS:
        key = f"{prefix}{name.upper()}"
        if loader.has(key):
            overrides[name] = loader.get_boolean(key)

    for name in ("allowed_characters", "dictionary_path"):
        key = f"{prefix}{name.upper()}"
        if loader.has(key):
            overrides[name] = loader.get_string(key) or None

    key = f"{prefix}MINIMUM_STRENGTH"
    if loader.has(key):
        overrides["minimum_strength"] = loader.get_strength(key)

    return replace(config, **overrides)
