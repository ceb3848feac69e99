"""Tests for config loading and get/set."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from shoresquad.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from shoresquad.config.schema import AdvisoryConfig, FallbackPolicy

REPO_ROOT = Path(__file__).resolve().parents[3]


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.focus_area.station_ids == ["S43", "S07"]
        assert config.schedule.interval_minutes == 15
        assert config.fallback.policy == FallbackPolicy.KEEP_LAST_GOOD

    def test_unspecified_sections_use_defaults(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.focus_area.area_substrings == ["pasir ris", "east"]
        assert config.scoring.base_score == 5

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == AdvisoryConfig()

    def test_shipped_default_matches_builtin(self):
        config = load_config(REPO_ROOT / "ops" / "configs" / "default.yaml")
        assert config == AdvisoryConfig()

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        with open(path, "w") as f:
            yaml.dump({"scoring": {"bonus": 2}}, f)
        with pytest.raises(ValidationError):
            load_config(path)


class TestSaveConfig:
    def test_saved_file_loads_back(self, tmp_path: Path):
        path = tmp_path / "saved.yaml"
        config = set_config_value(AdvisoryConfig(), "schedule.interval_minutes", "10")
        save_config(config, path)
        loaded = load_config(path)
        assert loaded == config
        assert loaded.display.temperature_format == "{value}°C"

    def test_overwrites_existing_file(self, config_yaml_path: Path):
        config = set_config_value(
            load_config(config_yaml_path), "fallback.policy", "reset"
        )
        save_config(config, config_yaml_path)
        reloaded = load_config(config_yaml_path)
        assert reloaded.fallback.policy == FallbackPolicy.RESET
        assert reloaded.focus_area.station_ids == ["S43", "S07"]


class TestGetSet:
    def test_get_nested(self):
        config = AdvisoryConfig()
        assert get_config_value(config, "scoring.excellent_at") == 8
        assert get_config_value(config, "focus_area.station_ids.1") == "S43"
        assert get_config_value(config, "scoring.condition_rules.0.adjustment") == 3

    def test_get_missing(self):
        with pytest.raises(KeyError):
            get_config_value(AdvisoryConfig(), "scoring.nope")

    def test_set_coerces_int(self):
        config = set_config_value(AdvisoryConfig(), "schedule.interval_minutes", "10")
        assert config.schedule.interval_minutes == 10

    def test_set_coerces_float(self):
        config = set_config_value(AdvisoryConfig(), "scoring.humidity_high", "90")
        assert config.scoring.humidity_high == 90.0

    def test_set_list_from_csv(self):
        config = set_config_value(AdvisoryConfig(), "focus_area.station_ids", "S43, S07")
        assert config.focus_area.station_ids == ["S43", "S07"]

    def test_set_returns_new_instance(self):
        original = AdvisoryConfig()
        set_config_value(original, "scoring.base_score", "6")
        assert original.scoring.base_score == 5

    def test_set_revalidates(self):
        with pytest.raises(ValidationError):
            set_config_value(AdvisoryConfig(), "schedule.interval_minutes", "0")

    def test_set_unknown_key(self):
        with pytest.raises(KeyError):
            set_config_value(AdvisoryConfig(), "schedule.period", "5")
