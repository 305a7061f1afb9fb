"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from rainalert.config.schema import JobConfig

VALID_CONFIG = {
    "latitude": 37.7749,
    "longitude": -122.4194,
    "location": "San Francisco",
    "timezone": "America/Los_Angeles",
    "forecast_range_hrs": 3,
    "ntfy_times": [0, 3],
    "ntfy_topic": "weather-updates",
    "ignore_no_rain": False,
}


def _forecast_body(amounts: list[float]) -> dict:
    return {
        "timezone": "America/Los_Angeles",
        "hourly": {
            "time": [f"2023-09-20T{h:02d}:00" for h in range(len(amounts))],
            "precipitation": amounts,
        },
    }


@pytest.fixture
def raw_config() -> dict:
    return dict(VALID_CONFIG)


@pytest.fixture
def job_config() -> JobConfig:
    return JobConfig(**VALID_CONFIG)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(VALID_CONFIG, f)
    return path


@pytest.fixture
def forecast_body():
    """Factory for Open-Meteo style response bodies from hourly amounts."""
    return _forecast_body
