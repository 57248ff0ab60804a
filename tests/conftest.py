"""Shared fixtures for the distance test suite."""

import pytest

from distance.core import registry
from distance.models.unit_table import UnitTable
from distance.utils.units import DEFAULT_CONFIG


@pytest.fixture(autouse=True)
def clean_registry():
    """Every test starts without a registered default config."""
    registry.reset()
    yield
    registry.reset()


@pytest.fixture
def table() -> UnitTable:
    """The shipped unit table, passed explicitly."""
    return UnitTable.from_config(DEFAULT_CONFIG)


@pytest.fixture
def defaults() -> UnitTable:
    """The shipped unit table registered as the process-wide default."""
    return registry.register_defaults()
