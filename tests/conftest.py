"""
Pytest configuration and fixtures for hvac_engine testing.

This file sets up common fixtures, test configuration, and hooks for pytest.
"""

import pytest

from hvac_engine.config.loader import CONFIG_ENV_VAR, reset_engine_config
from hvac_engine.fluids.flows import HumidAirFlow
from hvac_engine.processes.coolant import CoolantData


def pytest_configure(config):
    """Configure pytest settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "scenario: end-to-end numeric scenarios"
    )


@pytest.fixture(autouse=True)
def clean_engine_config(monkeypatch):
    """Every test starts from the packaged default configuration."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_engine_config()
    yield
    reset_engine_config()


@pytest.fixture
def room_air():
    """1000 m3/h of air at 20 degC / 50 % RH."""
    return HumidAirFlow.from_volumetric_flow(1000.0 / 3600.0, 20.0, relative_humidity_pct=50.0)


@pytest.fixture
def summer_air():
    """Hot humid outdoor air at 30 degC / 60 % RH."""
    return HumidAirFlow.from_volumetric_flow(5000.0 / 3600.0, 30.0, relative_humidity_pct=60.0)


@pytest.fixture
def chilled_water():
    """Chilled water coil at 7/14 degC."""
    return CoolantData(7.0, 14.0)
