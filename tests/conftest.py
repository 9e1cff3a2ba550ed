"""
Pytest configuration and shared fixtures for streamhash tests.

This conftest.py:
1. Adds project root and tests root to sys.path for imports
2. Provides deterministic payload fixtures
3. Resets the process-wide configuration around every test
"""
import random
import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from streamhash import set_config  # noqa: E402


@pytest.fixture
def sample_data():
    """Deterministic pseudo-random payload spanning many block sizes."""
    rng = random.Random(1234)
    return bytes(rng.getrandbits(8) for _ in range(701))


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture(autouse=True)
def _reset_config():
    set_config(None)
    yield
    set_config(None)
