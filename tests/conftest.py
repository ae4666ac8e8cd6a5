"""Shared pytest fixtures for FFM tests."""
import logging

import pytest
import structlog

from ffm.config import get_settings
from ffm.logging_config import HANDLER_NAME
from ffm.models.personality import PersonalityProfile


@pytest.fixture(autouse=True)
def _reset_logging():
    """Keep structlog and root-logger configuration from leaking between tests."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
    get_settings.cache_clear()


@pytest.fixture
def sample_profile():
    """Ascending profile used by the accessor tests."""
    return PersonalityProfile(0.1, 0.2, 0.3, 0.4, 0.5)


@pytest.fixture
def zero_profile():
    """Profile covering every Likert bucket, starting at exactly 0."""
    return PersonalityProfile(0.0, 0.3, 0.5, 0.7, 0.9)


@pytest.fixture
def evens_profile():
    """Profile sitting exactly on the multiples of 0.2."""
    return PersonalityProfile(0.2, 0.4, 0.6, 0.8, 1.0)
