# tests/conftest.py

import pytest

import litcal


@pytest.fixture(scope="module")
def service():
    return litcal.build_service("dominican")


@pytest.fixture
def fresh_service():
    """Unshared service, for tests that inspect the cache counters."""
    return litcal.build_service("dominican")
