"""
Tests for configuration loading.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from workinghours.config import AppConfig, WorkingWindowConfig, get_default_config_path


def write_config(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(content, encoding="utf-8")
    return config_path


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        config = AppConfig()

        assert config.timezone == "UTC"
        assert str(config.working_window.to_window()) == "09:00 - 17:30"

    def test_load_from_yaml(self, tmp_path):
        config_path = write_config(
            tmp_path,
            "working_window:\n"
            "  start_hour: 8\n"
            "  start_minute: 15\n"
            "  end_hour: 16\n"
            "  end_minute: 45\n"
            "timezone: Europe/Berlin\n",
        )

        config = AppConfig.load_from_yaml(config_path)

        assert config.timezone == "Europe/Berlin"
        assert config.working_window.to_window().daily_hours() == 8.5

    def test_empty_file_uses_defaults(self, tmp_path):
        config = AppConfig.load_from_yaml(write_config(tmp_path, ""))

        assert config == AppConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        config_path = write_config(tmp_path, "working_window: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(config_path)

    def test_root_must_be_mapping(self, tmp_path):
        config_path = write_config(tmp_path, "- 9\n- 17\n")

        with pytest.raises(ValueError, match="mapping at the root"):
            AppConfig.load_from_yaml(config_path)

    def test_unknown_timezone(self):
        with pytest.raises(ValidationError, match="Unknown timezone"):
            AppConfig(timezone="Not/AZone")

    def test_build_calculator(self):
        config = AppConfig(working_window={"start_hour": 8, "end_hour": 16, "end_minute": 0})

        calculator = config.build_calculator()

        assert calculator.window.daily_hours() == 8


class TestWorkingWindowConfig:
    """Tests for WorkingWindowConfig validation."""

    def test_hour_out_of_range(self):
        with pytest.raises(ValidationError, match="Hour must be between 0 and 23"):
            WorkingWindowConfig(start_hour=25)

    def test_minute_out_of_range(self):
        with pytest.raises(ValidationError, match="Minute must be between 0 and 59"):
            WorkingWindowConfig(end_minute=75)

    def test_window_order(self):
        with pytest.raises(ValidationError, match="must end later than it starts"):
            WorkingWindowConfig(start_hour=18)


def test_default_config_path_prefers_working_directory(tmp_path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("timezone: Europe/Berlin\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert get_default_config_path() == config_path


def test_default_config_path_falls_back_to_checkout(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert get_default_config_path().name == "config.yaml"
    assert get_default_config_path().parent != tmp_path
