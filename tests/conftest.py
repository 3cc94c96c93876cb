"""
Shared test configuration and fixtures.

Provides factories for policy configuration, capability doubles for the
delegate rules, and word-list files.
"""

import logging

import factory
import pytest
import structlog
from faker import Faker

import pwpolicy.core.logging as pwpolicy_logging
from pwpolicy.core.config import PasswordPolicyConfig
from pwpolicy.infrastructure.adapters import WordListDictionary

fake = Faker()


# Test Factories using Factory Boy
class PasswordPolicyConfigFactory(factory.Factory):
    """Factory for creating valid password policy configurations."""

    class Meta:
        model = PasswordPolicyConfig

    min_length = factory.Faker("pyint", min_value=4, max_value=16)
    max_length = factory.LazyAttribute(lambda obj: obj.min_length + 64)
    require_lowercase = False
    require_uppercase = False
    require_digits = False
    require_symbols = False
    allowed_characters = None
    minimum_strength = None
    reject_dictionary_words = False
    dictionary_path = None


class RecordingDictionary:
    """Dictionary double that records every term it is asked about."""

    def __init__(self, words=()):
        self.words = {word.lower() for word in words}
        self.terms: list[str] = []

    def is_known_word(self, term: str) -> bool:
        self.terms.append(term)
        return term in self.words


class CapabilityFailure(RuntimeError):
    """Raised by capability doubles standing in for a broken service."""


class FailingCapability:
    """Capability double whose every call raises."""

    def __init__(self, error: Exception | None = None):
        self.error = error or CapabilityFailure("service unavailable")

    def accepts(self, value: str) -> bool:
        raise self.error

    def matches(self, value: str) -> bool:
        raise self.error

    def is_known_word(self, term: str) -> bool:
        raise self.error


class TemplateRenderer:
    """Message renderer double producing ``locale:code`` strings."""

    def __init__(self):
        self.calls: list[tuple[str, str, dict]] = []

    def render(self, code: str, locale: str, context: dict) -> str:
        self.calls.append((code, locale, context))
        return f"{locale}:{code}"


@pytest.fixture
def faker_instance():
    """Shared Faker instance."""
    return fake


@pytest.fixture
def policy_config_factory():
    """Factory for password policy configurations."""
    return PasswordPolicyConfigFactory


@pytest.fixture
def recording_dictionary():
    """Dictionary knowing a handful of common words."""
    return RecordingDictionary(["password", "dragon", "monkey", "letmein"])


@pytest.fixture
def failing_capability():
    """Capability that raises on every call."""
    return FailingCapability()


@pytest.fixture
def renderer():
    """Message renderer double."""
    return TemplateRenderer()


@pytest.fixture
def word_file(tmp_path):
    """Newline-delimited word list on disk."""
    path = tmp_path / "words.txt"
    path.write_text("# common passwords\nPassword\ndragon\n\n  Monkey  \n", encoding="utf-8")
    return path


@pytest.fixture
def word_list_dictionary(word_file):
    """Word list dictionary loaded from the word file."""
    return WordListDictionary.from_file(word_file)


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove every PASSWORD_POLICY_* variable from the process environment."""
    import os

    for key in list(os.environ):
        if key.startswith("PASSWORD_POLICY_"):
            monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch):
    """Undo any configure_logging call made by a test."""
    monkeypatch.setattr(pwpolicy_logging, "_logger_factory", None)
    package_logger = logging.getLogger(pwpolicy_logging.ROOT_LOGGER_NAME)
    level = package_logger.level
    yield
    structlog.reset_defaults()
    package_logger.setLevel(level)


# Markers for test categorization

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "security: Security-related tests")
