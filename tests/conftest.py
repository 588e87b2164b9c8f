"""Root conftest - shared test configuration and album fixtures."""

import os
from datetime import datetime

import pytest

# Human-readable logs when the app lifespan runs under tests
os.environ.setdefault("LOG_FORMAT", "text")

from photoalbum.core.album import PhotoAlbum  # noqa: E402

FIXED_TIME = datetime(2026, 3, 14, 15, 9, 26)


@pytest.fixture
def fixed_clock():
    """Clock frozen at FIXED_TIME: every snapshot shares one timestamp."""
    return lambda: FIXED_TIME


@pytest.fixture
def album(fixed_clock):
    return PhotoAlbum(clock=fixed_clock)
