# tests/conftest.py
import pytest
from qtty.units.registry import DEFAULT_REGISTRY as _ureg
from qtty.units.registry import _bootstrap_default_registry


@pytest.fixture(scope="session")
def ureg():
    return _ureg


@pytest.fixture
def fresh_registry():
    """Fully bootstrapped registry, isolated per test."""
    return _bootstrap_default_registry()
