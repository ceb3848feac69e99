"""Shared test fixtures."""

import json
from datetime import datetime
from pathlib import Path

import pytest
import yaml

from shoresquad.config.schema import AdvisoryConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"

# 10:00 local: after the 09:30 batch, before the 11:30 one.
FIXTURE_NOW = datetime.fromisoformat("2026-10-20T10:00:00+08:00")


@pytest.fixture
def default_config() -> AdvisoryConfig:
    return AdvisoryConfig()


@pytest.fixture
def now() -> datetime:
    return FIXTURE_NOW


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "focus_area": {"station_ids": ["S43", "S07"]},
        "schedule": {"interval_minutes": 15},
        "fallback": {"policy": "keep-last-good"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def two_hour_payload() -> dict:
    with open(FIXTURE_DIR / "nea_two_hour_forecast.json") as f:
        return json.load(f)


@pytest.fixture
def air_temperature_payload() -> dict:
    with open(FIXTURE_DIR / "nea_air_temperature.json") as f:
        return json.load(f)


@pytest.fixture
def four_day_payload() -> dict:
    with open(FIXTURE_DIR / "nea_four_day_forecast.json") as f:
        return json.load(f)
