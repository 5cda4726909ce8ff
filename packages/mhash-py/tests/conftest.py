import os
import random

import pytest

from mhash.config import get_settings


@pytest.fixture
def random_bytes():
    """Return a function producing random byte strings of up to ``max_size`` bytes."""

    def generate(max_size: int) -> bytes:
        return os.urandom(random.randrange(max_size))

    return generate


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings around every test so environment overrides do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
