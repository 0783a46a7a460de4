"""Shared test fixtures."""

import json
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path
from typing import Any

import pytest
import yaml

from beachwatch.config.defaults import DEFAULT_BEACHES
from beachwatch.config.schema import BeachwatchConfig
from beachwatch.models.observation import ConditionCategory, Observation

FIXTURE_DIR = Path(__file__).parent / "fixtures"

# Benign midday conditions: GOOD verdict, lifeguard and "excellent" notes only.
BASE_OBSERVATION = Observation(
    air_temperature_f=80.0,
    feels_like_f=80.0,
    humidity_pct=50.0,
    wind_speed_mph=5.0,
    wind_gust_mph=None,
    wind_direction_deg=180.0,
    condition_category=ConditionCategory.CLEAR,
    condition_keyword="Clear",
    condition_description="clear sky",
    visibility_miles=10.0,
    pressure_hpa=1015.0,
    cloud_cover_pct=10.0,
    observed_at_local_hour=12,
)


@pytest.fixture
def make_observation() -> Callable[..., Observation]:
    """Factory for observations that differ from the benign baseline."""

    def _make(**overrides: Any) -> Observation:
        return replace(BASE_OBSERVATION, **overrides)

    return _make


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def clear_payload() -> dict:
    with open(FIXTURE_DIR / "openweather_current_clear.json") as f:
        return json.load(f)


@pytest.fixture
def storm_payload() -> dict:
    with open(FIXTURE_DIR / "openweather_current_thunderstorm.json") as f:
        return json.load(f)


@pytest.fixture
def default_config() -> BeachwatchConfig:
    """Return default BeachwatchConfig with default beaches."""
    return BeachwatchConfig(beaches=DEFAULT_BEACHES)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"timeout": 10.0, "max_retries": 1},
        "ops": {"timezone": "America/New_York", "log_level": "WARNING"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
