"""Shared fixtures for recordguard tests."""

import pytest
import structlog

from recordguard.config import Settings, get_settings
from recordguard.validators import ValidationEngine


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return Settings(
        DEBUG=False,
        LOG_LEVEL="info",
        LOG_VALIDATION_RUNS=True,
        FULL_MESSAGE_FORMAT="{attribute} {message}",
        HUMANIZE_ATTRIBUTES=True,
    )


@pytest.fixture
def engine(settings):
    """Empty engine with test settings."""
    return ValidationEngine(settings=settings)


@pytest.fixture
def taken_emails():
    """Collaborator backed by an in-memory set of existing emails."""
    existing = {"taken@example.com", "admin@example.com"}

    def exists_elsewhere(attribute, value):
        return attribute == "email" and value in existing

    return exists_elsewhere


@pytest.fixture(autouse=True)
def reset_logging_and_settings():
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()
