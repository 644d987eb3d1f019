import logging
import os

import pytest

from vehicle_patterns.creational.singleton import VehicleRegistry


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep VEHICLE_PATTERNS_* settings from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("VEHICLE_PATTERNS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def fresh_registry():
    """Reset the singleton before and after a test."""
    VehicleRegistry.reset_instance()
    yield VehicleRegistry.get_instance()
    VehicleRegistry.reset_instance()


@pytest.fixture
def debug_logs(caplog):
    """Capture DEBUG records from the example modules."""
    caplog.set_level(logging.DEBUG)
    return caplog
