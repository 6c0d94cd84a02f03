"""Root conftest: shared test configuration."""

import logging
import os

import pytest

# Keep tests independent of a developer's environment
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "INFO")

from users_api.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """setup_logging mutates the root logger; undo it after each test."""
    level = logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if handler.get_name() == "users_api":
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)
