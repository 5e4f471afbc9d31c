"""Shared fixtures for object-location tests."""

import os
from collections.abc import Iterator

import pytest

LOG_LEVEL_ENV = "OBJECT_LOCATION_LOG_LEVEL"


@pytest.fixture
def clean_env() -> Iterator[None]:
    """Remove OBJECT_LOCATION_* settings before and after the test (load_dotenv writes os.environ directly)."""
    saved = os.environ.pop(LOG_LEVEL_ENV, None)
    yield
    os.environ.pop(LOG_LEVEL_ENV, None)
    if saved is not None:
        os.environ[LOG_LEVEL_ENV] = saved
